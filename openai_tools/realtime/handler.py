"""
Callback dispatch for realtime server events.

Example:
```python
handler = EventHandler()
handler.on_text_delta(lambda e: print(e.delta, end=""))
handler.on_error(lambda e: print("error:", e.error.message))

async with await RealtimeClient().connect() as session:
    await session.send_text("Hello")
    await session.create_response()
    await handler.run(session)
```
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, List, Union

from openai_tools.config.constants import LOGGER_NAME
from openai_tools.realtime.events.server import SERVER_EVENT_TYPES, ServerEvent

logger = logging.getLogger(LOGGER_NAME)

Callback = Callable[[Any], Union[None, Awaitable[None]]]


class EventHandler:
    """
    Routes each server event to the callbacks registered for its ``type``.

    Callbacks may be plain functions or coroutine functions. Several
    callbacks can be registered for one type; they run in registration order.
    """

    def __init__(self):
        self.handlers: Dict[str, List[Callback]] = {}

    def on(self, event_type: str, callback: Callback) -> "EventHandler":
        if event_type not in SERVER_EVENT_TYPES:
            logger.warning(f"Registering callback for unknown event type: {event_type}")
        self.handlers.setdefault(event_type, []).append(callback)
        return self

    def on_session_created(self, callback: Callback) -> "EventHandler":
        return self.on("session.created", callback)

    def on_session_updated(self, callback: Callback) -> "EventHandler":
        return self.on("session.updated", callback)

    def on_conversation_item_created(self, callback: Callback) -> "EventHandler":
        return self.on("conversation.item.created", callback)

    def on_input_audio_transcription_completed(self, callback: Callback) -> "EventHandler":
        return self.on("conversation.item.input_audio_transcription.completed", callback)

    def on_speech_started(self, callback: Callback) -> "EventHandler":
        return self.on("input_audio_buffer.speech_started", callback)

    def on_speech_stopped(self, callback: Callback) -> "EventHandler":
        return self.on("input_audio_buffer.speech_stopped", callback)

    def on_response_created(self, callback: Callback) -> "EventHandler":
        return self.on("response.created", callback)

    def on_response_done(self, callback: Callback) -> "EventHandler":
        return self.on("response.done", callback)

    def on_text_delta(self, callback: Callback) -> "EventHandler":
        return self.on("response.text.delta", callback)

    def on_text_done(self, callback: Callback) -> "EventHandler":
        return self.on("response.text.done", callback)

    def on_audio_delta(self, callback: Callback) -> "EventHandler":
        return self.on("response.audio.delta", callback)

    def on_audio_done(self, callback: Callback) -> "EventHandler":
        return self.on("response.audio.done", callback)

    def on_audio_transcript_delta(self, callback: Callback) -> "EventHandler":
        return self.on("response.audio_transcript.delta", callback)

    def on_audio_transcript_done(self, callback: Callback) -> "EventHandler":
        return self.on("response.audio_transcript.done", callback)

    def on_function_call_arguments_delta(self, callback: Callback) -> "EventHandler":
        return self.on("response.function_call_arguments.delta", callback)

    def on_function_call_arguments_done(self, callback: Callback) -> "EventHandler":
        return self.on("response.function_call_arguments.done", callback)

    def on_rate_limits_updated(self, callback: Callback) -> "EventHandler":
        return self.on("rate_limits.updated", callback)

    def on_error(self, callback: Callback) -> "EventHandler":
        return self.on("error", callback)

    async def handle(self, event: ServerEvent) -> None:
        """Run every callback registered for the event's type."""
        for callback in self.handlers.get(event.type, []):
            result = callback(event)
            if inspect.isawaitable(result):
                await result

    async def run(self, session) -> None:
        """Dispatch events from ``session`` until it closes."""
        async for event in session:
            await self.handle(event)
        logger.debug("Event handler finished: session closed")
