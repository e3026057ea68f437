"""
Conversation items exchanged over a realtime session.

Items are messages, function calls made by the model, and the outputs the
caller returns for them. A function call and its output are paired by
``call_id``.
"""

import base64
import json
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class ItemRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ItemStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"


class InputTextContent(BaseModel):
    type: Literal["input_text"] = "input_text"
    text: str


class InputAudioContent(BaseModel):
    type: Literal["input_audio"] = "input_audio"
    audio: Optional[str] = Field(None, description="Base64 encoded audio")
    transcript: Optional[str] = None


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str = ""


class AudioContent(BaseModel):
    type: Literal["audio"] = "audio"
    audio: Optional[str] = None
    transcript: Optional[str] = None


class ItemReferenceContent(BaseModel):
    type: Literal["item_reference"] = "item_reference"
    id: str


ContentPart = Annotated[
    Union[InputTextContent, InputAudioContent, TextContent, AudioContent, ItemReferenceContent],
    Field(discriminator="type"),
]


class MessageItem(BaseModel):
    type: Literal["message"] = "message"
    id: Optional[str] = None
    role: ItemRole
    content: List[ContentPart] = Field(default_factory=list)
    status: Optional[ItemStatus] = None

    @classmethod
    def user_text(cls, text: str) -> "MessageItem":
        return cls(role=ItemRole.USER, content=[InputTextContent(text=text)])

    @classmethod
    def assistant_text(cls, text: str) -> "MessageItem":
        return cls(role=ItemRole.ASSISTANT, content=[TextContent(text=text)])

    @classmethod
    def system(cls, text: str) -> "MessageItem":
        return cls(role=ItemRole.SYSTEM, content=[InputTextContent(text=text)])

    @classmethod
    def user_audio(cls, audio: Union[str, bytes]) -> "MessageItem":
        """A user message carrying audio; raw bytes are base64 encoded."""
        if isinstance(audio, bytes):
            audio = base64.b64encode(audio).decode("ascii")
        return cls(role=ItemRole.USER, content=[InputAudioContent(audio=audio)])

    def text(self) -> Optional[str]:
        """Concatenated text and transcripts of this message, if any."""
        pieces = []
        for part in self.content:
            if isinstance(part, (InputTextContent, TextContent)):
                pieces.append(part.text)
            elif isinstance(part, (InputAudioContent, AudioContent)) and part.transcript:
                pieces.append(part.transcript)
        return "".join(pieces) if pieces else None


class FunctionCallItem(BaseModel):
    """A function call made by the model; ``arguments`` is a JSON string."""
    type: Literal["function_call"] = "function_call"
    id: Optional[str] = None
    call_id: str
    name: str
    arguments: str = ""
    status: Optional[ItemStatus] = None

    def parsed_arguments(self) -> Dict[str, Any]:
        return json.loads(self.arguments) if self.arguments.strip() else {}


class FunctionCallOutputItem(BaseModel):
    type: Literal["function_call_output"] = "function_call_output"
    id: Optional[str] = None
    call_id: str
    output: str

    @classmethod
    def new(cls, call_id: str, output: str) -> "FunctionCallOutputItem":
        return cls(call_id=call_id, output=output)


ConversationItem = Annotated[
    Union[MessageItem, FunctionCallItem, FunctionCallOutputItem],
    Field(discriminator="type"),
]
