"""Tests for realtime client event serialization and server event parsing."""

import base64
import json

import pytest

from openai_tools.common.errors import ResponseShapeError
from openai_tools.common.parameters import ParameterProperty
from openai_tools.realtime.audio import AudioFormat, Voice
from openai_tools.realtime.conversation import FunctionCallOutputItem, MessageItem
from openai_tools.realtime.events.client import (
    ConversationItemCreateEvent,
    ConversationItemTruncateEvent,
    InputAudioBufferAppendEvent,
    ResponseCancelEvent,
    ResponseCreateEvent,
    SessionUpdateEvent,
)
from openai_tools.realtime.events.server import (
    ErrorEvent,
    ResponseAudioDeltaEvent,
    ResponseDoneEvent,
    ResponseStatus,
    ResponseTextDeltaEvent,
    SessionCreatedEvent,
    SessionUpdatedEvent,
    parse_server_event,
)
from openai_tools.realtime.session import Modality, RealtimeTool, ResponseCreateConfig, SessionConfig
from openai_tools.realtime.vad import SemanticVadConfig, ServerVadConfig


class TestClientEvents:
    def test_session_update(self):
        config = SessionConfig(voice=Voice.ALLOY, input_audio_format=AudioFormat.PCM16,
                               turn_detection=ServerVadConfig(threshold=0.6))
        assert SessionUpdateEvent(session=config).to_dict() == {
            "type": "session.update",
            "session": {
                "voice": "alloy",
                "input_audio_format": "pcm16",
                "turn_detection": {"type": "server_vad", "threshold": 0.6},
            },
        }

    def test_explicit_null_turn_detection_is_sent(self):
        event = SessionUpdateEvent(session=SessionConfig(turn_detection=None))
        assert json.loads(event.to_json()) == {"type": "session.update",
                                               "session": {"turn_detection": None}}

    def test_unset_turn_detection_is_omitted(self):
        event = SessionUpdateEvent(session=SessionConfig(instructions="Be brief"))
        assert "turn_detection" not in event.to_dict()["session"]

    def test_semantic_vad(self):
        session = SessionConfig(turn_detection=SemanticVadConfig(eagerness="low")).to_dict()
        assert session["turn_detection"] == {"type": "semantic_vad", "eagerness": "low"}

    def test_with_event_id(self):
        event = InputAudioBufferAppendEvent(audio="AAAA")
        tagged = event.with_event_id("evt_1")
        assert tagged.to_dict() == {"type": "input_audio_buffer.append", "audio": "AAAA",
                                    "event_id": "evt_1"}
        assert event.event_id is None

    def test_create_user_message(self):
        event = ConversationItemCreateEvent(item=MessageItem.user_text("Hi"))
        assert event.to_dict() == {
            "type": "conversation.item.create",
            "item": {"type": "message", "role": "user",
                     "content": [{"type": "input_text", "text": "Hi"}]},
        }

    def test_function_output_item(self):
        event = ConversationItemCreateEvent(item=FunctionCallOutputItem.new("call_1", '{"ok": true}'),
                                            previous_item_id="item_0")
        data = event.to_dict()
        assert data["previous_item_id"] == "item_0"
        assert data["item"] == {"type": "function_call_output", "call_id": "call_1",
                                "output": '{"ok": true}'}

    def test_response_create_with_overrides(self):
        event = ResponseCreateEvent(response=ResponseCreateConfig(
            modalities=[Modality.TEXT], instructions="Summarize", conversation="none",
        ))
        assert event.to_dict() == {
            "type": "response.create",
            "response": {"modalities": ["text"], "instructions": "Summarize", "conversation": "none"},
        }

    def test_bare_response_create_and_cancel(self):
        assert ResponseCreateEvent().to_dict() == {"type": "response.create"}
        assert ResponseCancelEvent().to_dict() == {"type": "response.cancel"}

    def test_truncate(self):
        event = ConversationItemTruncateEvent(item_id="item_1", content_index=0, audio_end_ms=1500)
        assert event.to_dict()["audio_end_ms"] == 1500

    def test_user_audio_bytes_are_encoded(self):
        item = MessageItem.user_audio(b"\x00\x01")
        assert item.content[0].audio == base64.b64encode(b"\x00\x01").decode("ascii")


class TestServerEvents:
    def test_session_created(self):
        event = parse_server_event(json.dumps({
            "type": "session.created",
            "event_id": "event_1",
            "session": {
                "id": "sess_1", "object": "realtime.session", "model": "gpt-4o-realtime-preview",
                "modalities": ["text", "audio"], "voice": "alloy",
                "turn_detection": {"type": "server_vad", "threshold": 0.5,
                                   "prefix_padding_ms": 300, "silence_duration_ms": 200},
                "max_response_output_tokens": "inf",
            },
        }))
        assert isinstance(event, SessionCreatedEvent)
        assert event.session.id == "sess_1"
        assert event.session.turn_detection.silence_duration_ms == 200
        assert event.session.max_response_output_tokens == "inf"

    def test_session_updated_with_tools(self):
        tool = RealtimeTool.function("add", "Add numbers", [
            ("a", ParameterProperty.number()),
            ("b", ParameterProperty.nullable("number", "Optional second term")),
        ])
        event = parse_server_event({
            "type": "session.updated",
            "session": {"id": "sess_1", "modalities": ["text"], "tools": [tool.to_dict()],
                        "tool_choice": "auto"},
        })
        assert isinstance(event, SessionUpdatedEvent)
        parsed = event.session.tools[0]
        assert parsed.name == "add"
        assert parsed.parameters.properties["a"].type_names == ["number"]
        assert parsed.parameters.properties["b"].type_names == ["number", "null"]
        assert parsed.to_dict() == tool.to_dict()

    def test_text_delta(self):
        event = parse_server_event({
            "type": "response.text.delta", "event_id": "e", "response_id": "resp_1",
            "item_id": "item_1", "output_index": 0, "content_index": 0, "delta": "Hel",
        })
        assert isinstance(event, ResponseTextDeltaEvent)
        assert event.get_response_id() == "resp_1"
        assert event.delta == "Hel"

    def test_audio_delta_bytes(self):
        event = parse_server_event({
            "type": "response.audio.delta", "response_id": "resp_1", "item_id": "item_1",
            "output_index": 0, "content_index": 0, "delta": base64.b64encode(b"pcm").decode(),
        })
        assert isinstance(event, ResponseAudioDeltaEvent)
        assert event.audio_bytes() == b"pcm"

    def test_response_done(self):
        event = parse_server_event({
            "type": "response.done",
            "response": {
                "id": "resp_1", "object": "realtime.response", "status": "completed",
                "output": [{"id": "item_1", "type": "message", "role": "assistant",
                            "content": [{"type": "text", "text": "Hello"}]}],
                "usage": {"total_tokens": 12, "input_tokens": 5, "output_tokens": 7},
            },
        })
        assert isinstance(event, ResponseDoneEvent)
        assert event.get_response_id() == "resp_1"
        assert event.response.status is ResponseStatus.COMPLETED
        assert event.response.output[0].content[0].text == "Hello"
        assert event.response.usage.output_tokens == 7

    def test_error_event(self):
        event = parse_server_event({
            "type": "error",
            "error": {"type": "invalid_request_error", "code": "invalid_value",
                      "message": "Bad voice", "param": "session.voice", "event_id": "evt_1"},
        })
        assert isinstance(event, ErrorEvent)
        assert event.is_error()
        assert event.error.event_id == "evt_1"

    def test_non_error_event_is_not_error(self):
        event = parse_server_event({"type": "input_audio_buffer.cleared"})
        assert not event.is_error()
        assert event.get_response_id() is None

    def test_unknown_fields_are_ignored(self):
        event = parse_server_event({"type": "input_audio_buffer.speech_started",
                                    "audio_start_ms": 10, "item_id": "item_1", "extra": 1})
        assert event.audio_start_ms == 10

    def test_unknown_type(self):
        with pytest.raises(ResponseShapeError):
            parse_server_event({"type": "response.teleported"})

    def test_malformed_known_type(self):
        with pytest.raises(ResponseShapeError):
            parse_server_event({"type": "response.text.delta", "delta": "x"})

    def test_invalid_json(self):
        with pytest.raises(ResponseShapeError):
            parse_server_event("{not json")
