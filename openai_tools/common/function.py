"""
Function descriptors and tool calls.

On the wire a tool call's ``arguments`` is always a string containing JSON.
In Python it is a dict: incoming strings are decoded on validation and the
dict is encoded back to a string on serialization.
"""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, field_serializer, field_validator

from openai_tools.common.parameters import Parameters


class Function(BaseModel):
    """A callable function: its declaration, a call's arguments, or both."""
    name: str
    description: Optional[str] = None
    parameters: Optional[Parameters] = None
    arguments: Optional[Dict[str, Any]] = None
    strict: Optional[bool] = None

    @field_validator("arguments", mode="before")
    @classmethod
    def decode_arguments(cls, v):
        """Accept the wire form (a JSON string) as well as a mapping."""
        if isinstance(v, str):
            if not v.strip():
                return {}
            decoded = json.loads(v)
            if not isinstance(decoded, dict):
                raise ValueError("Function arguments must encode a JSON object")
            return decoded
        return v

    @field_serializer("arguments")
    def encode_arguments(self, v: Optional[Dict[str, Any]]) -> Optional[str]:
        if v is None:
            return None
        return json.dumps(v)

    @classmethod
    def declare(cls, name: str, description: str, parameters: Parameters,
                strict: bool = False) -> "Function":
        return cls(name=name, description=description, parameters=parameters, strict=strict)


class ToolCall(BaseModel):
    """A tool invocation produced by the model."""
    id: str
    type: str = "function"
    function: Function

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
