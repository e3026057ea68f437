"""
Session and response configuration for the realtime API.

Every field is optional. A ``session.update`` only changes the fields it
carries, so fields left as None are omitted from the wire. The one
exception is ``turn_detection``: assigning None explicitly is sent as
``null``, which switches turn detection off.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple, Union

from pydantic import BaseModel

from openai_tools.common.parameters import ParameterProperty, Parameters
from openai_tools.common.tool import FunctionTool, McpTool
from openai_tools.realtime.audio import (
    AudioFormat,
    InputAudioNoiseReduction,
    InputAudioTranscription,
    Voice,
)
from openai_tools.realtime.conversation import ConversationItem
from openai_tools.realtime.vad import TurnDetection


class Modality(str, Enum):
    TEXT = "text"
    AUDIO = "audio"


MaxTokens = Union[int, Literal["inf"]]

INFINITE_TOKENS = "inf"


class FunctionToolChoice(BaseModel):
    """Force the model to call one named function."""
    type: Literal["function"] = "function"
    name: str


ToolChoice = Union[Literal["auto", "none", "required"], FunctionToolChoice]


class RealtimeTool(BaseModel):
    """A tool in the flat shape realtime sessions expect."""
    type: str = "function"
    name: str
    description: Optional[str] = None
    parameters: Optional[Parameters] = None

    @classmethod
    def function(cls, name: str, description: str,
                 parameters: Sequence[Tuple[str, ParameterProperty]]) -> "RealtimeTool":
        return cls(name=name, description=description, parameters=Parameters.new(parameters))

    @classmethod
    def from_tool(cls, tool: Union[FunctionTool, McpTool]) -> "RealtimeTool":
        if isinstance(tool, FunctionTool):
            return cls(
                name=tool.function.name,
                description=tool.function.description,
                parameters=tool.function.parameters,
            )
        return cls(type=tool.type, name=tool.name)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SessionConfig(BaseModel):
    """Body of ``session.update`` and the session echoed by the server."""
    modalities: Optional[List[Modality]] = None
    instructions: Optional[str] = None
    voice: Optional[Voice] = None
    input_audio_format: Optional[AudioFormat] = None
    output_audio_format: Optional[AudioFormat] = None
    input_audio_transcription: Optional[InputAudioTranscription] = None
    input_audio_noise_reduction: Optional[InputAudioNoiseReduction] = None
    turn_detection: Optional[TurnDetection] = None
    tools: Optional[List[RealtimeTool]] = None
    tool_choice: Optional[ToolChoice] = None
    temperature: Optional[float] = None
    max_response_output_tokens: Optional[MaxTokens] = None

    def is_empty(self) -> bool:
        return not self.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if "turn_detection" in self.model_fields_set and self.turn_detection is None:
            data["turn_detection"] = None
        return data


class ResponseCreateConfig(BaseModel):
    """Per response overrides carried by ``response.create``."""
    modalities: Optional[List[Modality]] = None
    instructions: Optional[str] = None
    voice: Optional[Voice] = None
    output_audio_format: Optional[AudioFormat] = None
    tools: Optional[List[RealtimeTool]] = None
    tool_choice: Optional[ToolChoice] = None
    temperature: Optional[float] = None
    max_output_tokens: Optional[MaxTokens] = None
    conversation: Optional[Literal["auto", "none"]] = None
    metadata: Optional[Dict[str, Any]] = None
    input: Optional[List[ConversationItem]] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
