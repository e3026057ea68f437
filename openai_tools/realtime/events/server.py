"""
Events received from the realtime server.

``parse_server_event`` turns one JSON text frame into the matching typed
event. Unknown fields are ignored so newer servers keep working; an unknown
``type`` is a ResponseShapeError.
"""

import base64
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from openai_tools.common.errors import ResponseShapeError, loads_json
from openai_tools.realtime.audio import AudioFormat, InputAudioTranscription, Voice
from openai_tools.realtime.conversation import ItemStatus
from openai_tools.realtime.session import MaxTokens, Modality, RealtimeTool, ToolChoice
from openai_tools.realtime.vad import TurnDetection


class ServerEvent(BaseModel):
    """Base model for events received from the server."""

    type: str
    event_id: Optional[str] = None

    def get_response_id(self) -> Optional[str]:
        """Id of the response this event belongs to, if any."""
        return getattr(self, "response_id", None)

    def is_error(self) -> bool:
        return False


class ResponseScopedEvent(ServerEvent):
    """An event that belongs to one response."""

    response_id: str


# Payload models


class SessionInfo(BaseModel):
    id: Optional[str] = None
    object: Optional[str] = None
    model: Optional[str] = None
    modalities: List[Modality] = Field(default_factory=list)
    instructions: str = ""
    voice: Optional[Voice] = None
    input_audio_format: Optional[AudioFormat] = None
    output_audio_format: Optional[AudioFormat] = None
    input_audio_transcription: Optional[InputAudioTranscription] = None
    turn_detection: Optional[TurnDetection] = None
    tools: List[RealtimeTool] = Field(default_factory=list)
    tool_choice: Optional[ToolChoice] = None
    temperature: Optional[float] = None
    max_response_output_tokens: Optional[MaxTokens] = None


class ConversationInfo(BaseModel):
    id: str
    object: Optional[str] = None


class ResponseContentPart(BaseModel):
    type: str
    text: Optional[str] = None
    audio: Optional[str] = None
    transcript: Optional[str] = None


class ResponseItem(BaseModel):
    """An item as the server reports it, whatever its kind."""
    id: Optional[str] = None
    object: Optional[str] = None
    type: str
    role: Optional[str] = None
    content: List[ResponseContentPart] = Field(default_factory=list)
    status: Optional[ItemStatus] = None
    call_id: Optional[str] = None
    name: Optional[str] = None
    arguments: Optional[str] = None
    output: Optional[str] = None


class ResponseStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    INCOMPLETE = "incomplete"
    FAILED = "failed"


class InputTokenDetails(BaseModel):
    cached_tokens: int = 0
    text_tokens: int = 0
    audio_tokens: int = 0


class OutputTokenDetails(BaseModel):
    text_tokens: int = 0
    audio_tokens: int = 0


class RealtimeUsage(BaseModel):
    total_tokens: int = 0
    input_tokens: int = 0
    output_tokens: int = 0
    input_token_details: Optional[InputTokenDetails] = None
    output_token_details: Optional[OutputTokenDetails] = None


class ResponseInfo(BaseModel):
    id: str
    object: Optional[str] = None
    status: ResponseStatus = ResponseStatus.IN_PROGRESS
    status_details: Optional[Dict[str, Any]] = None
    output: List[ResponseItem] = Field(default_factory=list)
    usage: Optional[RealtimeUsage] = None


class RateLimit(BaseModel):
    name: str
    limit: int
    remaining: int
    reset_seconds: float


class ErrorInfo(BaseModel):
    type: Optional[str] = None
    code: Optional[str] = None
    message: str
    param: Optional[str] = None
    event_id: Optional[str] = None


# Session and conversation events


class SessionCreatedEvent(ServerEvent):
    """First event of every connection, carrying the default session."""

    type: Literal["session.created"] = "session.created"
    session: SessionInfo


class SessionUpdatedEvent(ServerEvent):
    type: Literal["session.updated"] = "session.updated"
    session: SessionInfo


class ConversationCreatedEvent(ServerEvent):
    type: Literal["conversation.created"] = "conversation.created"
    conversation: ConversationInfo


class ConversationItemCreatedEvent(ServerEvent):
    type: Literal["conversation.item.created"] = "conversation.item.created"
    previous_item_id: Optional[str] = None
    item: ResponseItem


class ConversationItemRetrievedEvent(ServerEvent):
    type: Literal["conversation.item.retrieved"] = "conversation.item.retrieved"
    item: ResponseItem


class ConversationItemDeletedEvent(ServerEvent):
    type: Literal["conversation.item.deleted"] = "conversation.item.deleted"
    item_id: str


class ConversationItemTruncatedEvent(ServerEvent):
    type: Literal["conversation.item.truncated"] = "conversation.item.truncated"
    item_id: str
    content_index: int
    audio_end_ms: int


class InputAudioTranscriptionCompletedEvent(ServerEvent):
    type: Literal["conversation.item.input_audio_transcription.completed"] = (
        "conversation.item.input_audio_transcription.completed"
    )
    item_id: str
    content_index: int
    transcript: str


class InputAudioTranscriptionFailedEvent(ServerEvent):
    type: Literal["conversation.item.input_audio_transcription.failed"] = (
        "conversation.item.input_audio_transcription.failed"
    )
    item_id: str
    content_index: int
    error: ErrorInfo


# Input and output audio buffer events


class InputAudioBufferCommittedEvent(ServerEvent):
    type: Literal["input_audio_buffer.committed"] = "input_audio_buffer.committed"
    previous_item_id: Optional[str] = None
    item_id: str


class InputAudioBufferClearedEvent(ServerEvent):
    type: Literal["input_audio_buffer.cleared"] = "input_audio_buffer.cleared"


class SpeechStartedEvent(ServerEvent):
    type: Literal["input_audio_buffer.speech_started"] = "input_audio_buffer.speech_started"
    audio_start_ms: int
    item_id: str


class SpeechStoppedEvent(ServerEvent):
    type: Literal["input_audio_buffer.speech_stopped"] = "input_audio_buffer.speech_stopped"
    audio_end_ms: int
    item_id: Optional[str] = None


class OutputAudioBufferStartedEvent(ResponseScopedEvent):
    type: Literal["output_audio_buffer.started"] = "output_audio_buffer.started"


class OutputAudioBufferStoppedEvent(ResponseScopedEvent):
    type: Literal["output_audio_buffer.stopped"] = "output_audio_buffer.stopped"
    audio_end_ms: Optional[int] = None
    item_id: Optional[str] = None


class OutputAudioBufferClearedEvent(ResponseScopedEvent):
    type: Literal["output_audio_buffer.cleared"] = "output_audio_buffer.cleared"


# Response lifecycle events


class ResponseCreatedEvent(ServerEvent):
    type: Literal["response.created"] = "response.created"
    response: ResponseInfo

    def get_response_id(self) -> Optional[str]:
        return self.response.id


class ResponseDoneEvent(ServerEvent):
    """Emitted once a response stops streaming, whatever its final status."""

    type: Literal["response.done"] = "response.done"
    response: ResponseInfo

    def get_response_id(self) -> Optional[str]:
        return self.response.id


class ResponseCancelledEvent(ResponseScopedEvent):
    type: Literal["response.cancelled"] = "response.cancelled"


class ResponseOutputItemAddedEvent(ResponseScopedEvent):
    type: Literal["response.output_item.added"] = "response.output_item.added"
    output_index: int
    item: ResponseItem


class ResponseOutputItemDoneEvent(ResponseScopedEvent):
    type: Literal["response.output_item.done"] = "response.output_item.done"
    output_index: int
    item: ResponseItem


class ResponseContentPartAddedEvent(ResponseScopedEvent):
    type: Literal["response.content_part.added"] = "response.content_part.added"
    item_id: str
    output_index: int
    content_index: int
    part: ResponseContentPart


class ResponseContentPartDoneEvent(ResponseScopedEvent):
    type: Literal["response.content_part.done"] = "response.content_part.done"
    item_id: str
    output_index: int
    content_index: int
    part: ResponseContentPart


# Streaming deltas


class ResponseTextDeltaEvent(ResponseScopedEvent):
    type: Literal["response.text.delta"] = "response.text.delta"
    item_id: str
    output_index: int
    content_index: int
    delta: str


class ResponseTextDoneEvent(ResponseScopedEvent):
    type: Literal["response.text.done"] = "response.text.done"
    item_id: str
    output_index: int
    content_index: int
    text: str


class ResponseAudioDeltaEvent(ResponseScopedEvent):
    type: Literal["response.audio.delta"] = "response.audio.delta"
    item_id: str
    output_index: int
    content_index: int
    delta: str

    def audio_bytes(self) -> bytes:
        """Decode the base64 audio chunk."""
        return base64.b64decode(self.delta)


class ResponseAudioDoneEvent(ResponseScopedEvent):
    type: Literal["response.audio.done"] = "response.audio.done"
    item_id: str
    output_index: int
    content_index: int


class ResponseAudioTranscriptDeltaEvent(ResponseScopedEvent):
    type: Literal["response.audio_transcript.delta"] = "response.audio_transcript.delta"
    item_id: str
    output_index: int
    content_index: int
    delta: str


class ResponseAudioTranscriptDoneEvent(ResponseScopedEvent):
    type: Literal["response.audio_transcript.done"] = "response.audio_transcript.done"
    item_id: str
    output_index: int
    content_index: int
    transcript: str


class ResponseFunctionCallArgumentsDeltaEvent(ResponseScopedEvent):
    type: Literal["response.function_call_arguments.delta"] = "response.function_call_arguments.delta"
    item_id: str
    output_index: int
    call_id: str
    delta: str


class ResponseFunctionCallArgumentsDoneEvent(ResponseScopedEvent):
    type: Literal["response.function_call_arguments.done"] = "response.function_call_arguments.done"
    item_id: str
    output_index: int
    call_id: str
    name: Optional[str] = None
    arguments: str


# Misc


class RateLimitsUpdatedEvent(ServerEvent):
    type: Literal["rate_limits.updated"] = "rate_limits.updated"
    rate_limits: List[RateLimit] = Field(default_factory=list)


class ErrorEvent(ServerEvent):
    """An error reported by the server. The session stays open."""

    type: Literal["error"] = "error"
    error: ErrorInfo

    def is_error(self) -> bool:
        return True


DELTA_EVENT_TYPES = frozenset({
    "response.text.delta",
    "response.audio.delta",
    "response.audio_transcript.delta",
    "response.function_call_arguments.delta",
})

SERVER_EVENT_CLASSES = (
    SessionCreatedEvent,
    SessionUpdatedEvent,
    ConversationCreatedEvent,
    ConversationItemCreatedEvent,
    ConversationItemRetrievedEvent,
    ConversationItemDeletedEvent,
    ConversationItemTruncatedEvent,
    InputAudioTranscriptionCompletedEvent,
    InputAudioTranscriptionFailedEvent,
    InputAudioBufferCommittedEvent,
    InputAudioBufferClearedEvent,
    SpeechStartedEvent,
    SpeechStoppedEvent,
    OutputAudioBufferStartedEvent,
    OutputAudioBufferStoppedEvent,
    OutputAudioBufferClearedEvent,
    ResponseCreatedEvent,
    ResponseDoneEvent,
    ResponseCancelledEvent,
    ResponseOutputItemAddedEvent,
    ResponseOutputItemDoneEvent,
    ResponseContentPartAddedEvent,
    ResponseContentPartDoneEvent,
    ResponseTextDeltaEvent,
    ResponseTextDoneEvent,
    ResponseAudioDeltaEvent,
    ResponseAudioDoneEvent,
    ResponseAudioTranscriptDeltaEvent,
    ResponseAudioTranscriptDoneEvent,
    ResponseFunctionCallArgumentsDeltaEvent,
    ResponseFunctionCallArgumentsDoneEvent,
    RateLimitsUpdatedEvent,
    ErrorEvent,
)

ServerEventUnion = Annotated[Union[SERVER_EVENT_CLASSES], Field(discriminator="type")]

_server_event_adapter = TypeAdapter(ServerEventUnion)

SERVER_EVENT_TYPES = frozenset(cls.model_fields["type"].default for cls in SERVER_EVENT_CLASSES)


def parse_server_event(raw: Union[str, bytes, Dict[str, Any]]) -> ServerEvent:
    """Parse one server frame into its typed event."""
    data = raw if isinstance(raw, dict) else loads_json(raw)
    event_type = data.get("type")
    if event_type not in SERVER_EVENT_TYPES:
        raise ResponseShapeError(f"Unknown realtime server event type: {event_type!r}")
    try:
        return _server_event_adapter.validate_python(data)
    except ValidationError as e:
        raise ResponseShapeError(f"Malformed '{event_type}' event: {e}") from e
