"""
Events sent from the client to the realtime server.

Every event carries a ``type`` and an optional ``event_id``. The server
echoes the id in any ``error`` event caused by the client event, so callers
that need to correlate errors should set one with ``with_event_id``.
"""

import json
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel

from openai_tools.realtime.conversation import ConversationItem
from openai_tools.realtime.session import ResponseCreateConfig, SessionConfig


class ClientEvent(BaseModel):
    """Base model for events sent to the server."""

    type: str
    event_id: Optional[str] = None

    def with_event_id(self, event_id: str) -> "ClientEvent":
        return self.model_copy(update={"event_id": event_id})

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


class SessionUpdateEvent(ClientEvent):
    """Update the session's default configuration.

    Only the fields present in ``session`` change. The server answers with
    ``session.updated``.
    """

    type: Literal["session.update"] = "session.update"
    session: SessionConfig

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["session"] = self.session.to_dict()
        return data


class InputAudioBufferAppendEvent(ClientEvent):
    """Append base64 encoded audio to the input buffer. No confirmation is sent."""

    type: Literal["input_audio_buffer.append"] = "input_audio_buffer.append"
    audio: str


class InputAudioBufferCommitEvent(ClientEvent):
    """Commit the input buffer as a new user message.

    Fails on the server when the buffer is empty. In server VAD mode the
    server commits by itself.
    """

    type: Literal["input_audio_buffer.commit"] = "input_audio_buffer.commit"


class InputAudioBufferClearEvent(ClientEvent):
    type: Literal["input_audio_buffer.clear"] = "input_audio_buffer.clear"


class OutputAudioBufferClearEvent(ClientEvent):
    """Stop playback of audio already generated (WebRTC sessions)."""

    type: Literal["output_audio_buffer.clear"] = "output_audio_buffer.clear"


class ConversationItemCreateEvent(ClientEvent):
    """Add an item to the conversation, after ``previous_item_id`` when given."""

    type: Literal["conversation.item.create"] = "conversation.item.create"
    previous_item_id: Optional[str] = None
    item: ConversationItem


class ConversationItemDeleteEvent(ClientEvent):
    type: Literal["conversation.item.delete"] = "conversation.item.delete"
    item_id: str


class ConversationItemRetrieveEvent(ClientEvent):
    type: Literal["conversation.item.retrieve"] = "conversation.item.retrieve"
    item_id: str


class ConversationItemTruncateEvent(ClientEvent):
    """Cut an assistant audio message at ``audio_end_ms``.

    Used when the user interrupts playback, so the transcript only keeps
    what was actually heard.
    """

    type: Literal["conversation.item.truncate"] = "conversation.item.truncate"
    item_id: str
    content_index: int
    audio_end_ms: int


class ResponseCreateEvent(ClientEvent):
    type: Literal["response.create"] = "response.create"
    response: Optional[ResponseCreateConfig] = None


class ResponseCancelEvent(ClientEvent):
    """Cancel an in progress response, the current one when no id is given."""

    type: Literal["response.cancel"] = "response.cancel"
    response_id: Optional[str] = None
