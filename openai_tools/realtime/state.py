"""
Client side state machines for a realtime session.

Two independent machines are tracked from the events flowing in both
directions:

* responses: ``idle -> creating -> streaming -> done | cancelled``, one per
  response id. Deltas belonging to a cancelled response are reported as
  suppressed so the session can drop them.
* the input audio buffer: ``empty -> buffering -> committed -> empty``.

Illegal transitions are logged and leave the state unchanged; the server
stays the source of truth.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, Optional, Set

from openai_tools.config.constants import LOGGER_NAME
from openai_tools.realtime.events.client import (
    ClientEvent,
    InputAudioBufferAppendEvent,
    InputAudioBufferClearEvent,
    InputAudioBufferCommitEvent,
    ResponseCancelEvent,
    ResponseCreateEvent,
    SessionUpdateEvent,
)
from openai_tools.realtime.events.server import (
    DELTA_EVENT_TYPES,
    ConversationItemCreatedEvent,
    ErrorEvent,
    InputAudioBufferClearedEvent,
    InputAudioBufferCommittedEvent,
    ResponseCancelledEvent,
    ResponseCreatedEvent,
    ResponseDoneEvent,
    ResponseScopedEvent,
    ResponseStatus,
    ServerEvent,
    SessionCreatedEvent,
    SessionUpdatedEvent,
    SpeechStartedEvent,
)

logger = logging.getLogger(LOGGER_NAME)


class ResponseState(str, Enum):
    IDLE = "idle"
    CREATING = "creating"
    STREAMING = "streaming"
    DONE = "done"
    CANCELLED = "cancelled"

    @property
    def is_active(self) -> bool:
        return self in (ResponseState.CREATING, ResponseState.STREAMING)


class InputAudioState(str, Enum):
    EMPTY = "empty"
    BUFFERING = "buffering"
    COMMITTED = "committed"


def _interrupts(turn_detection) -> bool:
    return turn_detection is not None and turn_detection.interrupt_response is not False


class ResponseTracker:
    """Tracks the lifecycle of every response seen on a session."""

    def __init__(self):
        self._states: Dict[str, ResponseState] = {}
        # responses whose response.done arrived; no more deltas can follow
        self._finished: Set[str] = set()
        self.current_id: Optional[str] = None
        # response.create sent, response.created not yet received
        self._requested = False
        self._request_event_id: Optional[str] = None
        self._cancel_requested = False
        self.interrupt_response = True

    @property
    def state(self) -> ResponseState:
        if self._requested:
            return ResponseState.CANCELLED if self._cancel_requested else ResponseState.CREATING
        if self.current_id is None:
            return ResponseState.IDLE
        return self._states[self.current_id]

    def state_of(self, response_id: str) -> ResponseState:
        return self._states.get(response_id, ResponseState.IDLE)

    def _move(self, response_id: str, new: ResponseState, allowed: Iterable[ResponseState]) -> None:
        old = self.state_of(response_id)
        if old == new:
            return
        if old not in allowed:
            logger.warning(f"Ignoring response {response_id} transition {old.value} -> {new.value}")
            return
        logger.debug(f"Response {response_id}: {old.value} -> {new.value}")
        self._states[response_id] = new

    def _cancel(self, response_id: Optional[str]) -> None:
        if response_id is None and self._requested:
            self._cancel_requested = True
            return
        response_id = response_id or self.current_id
        if response_id is None:
            logger.warning("Cancel requested with no response in progress")
            return
        self._move(response_id, ResponseState.CANCELLED,
                   (ResponseState.CREATING, ResponseState.STREAMING))

    def _clear_request(self) -> None:
        self._requested = False
        self._request_event_id = None
        self._cancel_requested = False

    def _is_request_error(self, event: ErrorEvent) -> bool:
        """An error without a matching event id may still belong to the pending create."""
        if self._request_event_id is None or event.error.event_id is None:
            return True
        return event.error.event_id == self._request_event_id

    def _prune(self) -> None:
        """Forget finished responses before a new one becomes current."""
        for response_id in self._finished:
            self._states.pop(response_id, None)
        self._finished.clear()

    def on_client_event(self, event: ClientEvent) -> None:
        if isinstance(event, ResponseCreateEvent):
            if self.state.is_active:
                logger.warning(f"response.create sent while response {self.current_id} is {self.state.value}")
            self._requested = True
            self._request_event_id = event.event_id
            self._cancel_requested = False
        elif isinstance(event, ResponseCancelEvent):
            self._cancel(event.response_id)
        elif isinstance(event, SessionUpdateEvent):
            if "turn_detection" in event.session.model_fields_set:
                self.interrupt_response = _interrupts(event.session.turn_detection)

    def on_server_event(self, event: ServerEvent) -> None:
        if isinstance(event, ResponseCreatedEvent):
            response_id = event.response.id
            cancelled = self._requested and self._cancel_requested
            self._clear_request()
            self._prune()
            self.current_id = response_id
            self._states[response_id] = ResponseState.CANCELLED if cancelled else ResponseState.CREATING
        elif isinstance(event, ResponseDoneEvent):
            response_id = event.response.id
            if (event.response.status == ResponseStatus.CANCELLED
                    or self.state_of(response_id) == ResponseState.CANCELLED):
                self._states[response_id] = ResponseState.CANCELLED
            else:
                self._states[response_id] = ResponseState.DONE
            self._finished.add(response_id)
        elif isinstance(event, ErrorEvent):
            if self._requested and self._is_request_error(event):
                logger.warning(f"response.create rejected: {event.error.message}")
                self._clear_request()
        elif isinstance(event, ResponseCancelledEvent):
            self._move(event.response_id, ResponseState.CANCELLED,
                       (ResponseState.CREATING, ResponseState.STREAMING))
        elif isinstance(event, SpeechStartedEvent):
            if self.interrupt_response and self.current_id is not None \
                    and self.state_of(self.current_id) == ResponseState.STREAMING:
                logger.info(f"Speech started, response {self.current_id} interrupted")
                self._states[self.current_id] = ResponseState.CANCELLED
        elif isinstance(event, (SessionCreatedEvent, SessionUpdatedEvent)):
            self.interrupt_response = _interrupts(event.session.turn_detection)
        elif isinstance(event, ResponseScopedEvent):
            if self.state_of(event.response_id) == ResponseState.CREATING:
                self._move(event.response_id, ResponseState.STREAMING, (ResponseState.CREATING,))

    def is_suppressed(self, event: ServerEvent) -> bool:
        """True for a delta belonging to a cancelled response."""
        if event.type not in DELTA_EVENT_TYPES:
            return False
        return self.state_of(event.get_response_id()) == ResponseState.CANCELLED


class InputAudioTracker:
    """Tracks the input audio buffer."""

    def __init__(self):
        self.state = InputAudioState.EMPTY
        self.committed_item_id: Optional[str] = None

    def _move(self, new: InputAudioState, allowed: Iterable[InputAudioState], cause: str) -> bool:
        if self.state not in allowed:
            logger.warning(f"Ignoring {cause}: input audio buffer is {self.state.value}")
            return False
        if self.state != new:
            logger.debug(f"Input audio buffer: {self.state.value} -> {new.value}")
        self.state = new
        return True

    def _clear(self) -> None:
        self.state = InputAudioState.EMPTY
        self.committed_item_id = None

    def on_client_event(self, event: ClientEvent) -> None:
        if isinstance(event, InputAudioBufferAppendEvent):
            self._move(InputAudioState.BUFFERING, tuple(InputAudioState), event.type)
        elif isinstance(event, InputAudioBufferCommitEvent):
            self._move(InputAudioState.COMMITTED, (InputAudioState.BUFFERING,), event.type)
        elif isinstance(event, InputAudioBufferClearEvent):
            self._clear()

    def on_server_event(self, event: ServerEvent) -> None:
        if isinstance(event, InputAudioBufferCommittedEvent):
            if self._move(InputAudioState.COMMITTED,
                          (InputAudioState.BUFFERING, InputAudioState.COMMITTED), event.type):
                self.committed_item_id = event.item_id
        elif isinstance(event, InputAudioBufferClearedEvent):
            self._clear()
        elif isinstance(event, ConversationItemCreatedEvent):
            if self.state == InputAudioState.COMMITTED and event.item.id == self.committed_item_id:
                self._clear()
