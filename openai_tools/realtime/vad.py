"""
Turn detection settings.

The server detects when the user starts and stops speaking, either by voice
activity (``server_vad``) or by a model judging whether the user has finished
their thought (``semantic_vad``). Setting a session's ``turn_detection`` to
None turns detection off and leaves committing audio to the caller.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class ServerVadConfig(BaseModel):
    """Voice activity detection on the server."""
    type: Literal["server_vad"] = "server_vad"
    threshold: Optional[float] = Field(None, ge=0.0, le=1.0, description="Activation threshold")
    prefix_padding_ms: Optional[int] = Field(None, ge=0, description="Audio kept before speech starts")
    silence_duration_ms: Optional[int] = Field(None, ge=0, description="Silence that ends a turn")
    create_response: Optional[bool] = None
    interrupt_response: Optional[bool] = None


class Eagerness(str, Enum):
    """How eagerly semantic VAD ends a turn. Default: auto."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    AUTO = "auto"

    @classmethod
    def default(cls) -> "Eagerness":
        return cls.AUTO


class SemanticVadConfig(BaseModel):
    """Model based end of turn detection."""
    type: Literal["semantic_vad"] = "semantic_vad"
    eagerness: Optional[Eagerness] = None
    create_response: Optional[bool] = None
    interrupt_response: Optional[bool] = None


TurnDetection = Annotated[Union[ServerVadConfig, SemanticVadConfig], Field(discriminator="type")]
