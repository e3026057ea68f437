"""
WebSocket client for the realtime API.

``RealtimeClient`` collects the session configuration and opens the
connection; ``RealtimeSession`` is the live connection. Sessions are
asyncio based: every send and receive suspends the calling task, and the
library starts no background tasks of its own.
"""

import asyncio
import base64
import logging
from typing import Optional, Sequence, Union

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK, WebSocketException

from openai_tools.common.auth import AuthProvider
from openai_tools.common.errors import RemoteError, ResponseShapeError, TransportError, loads_json
from openai_tools.common.models import RealtimeModel, model_id
from openai_tools.common.tool import FunctionTool, McpTool
from openai_tools.config.constants import (
    CONNECTION_TIMEOUT,
    LOGGER_NAME,
    REALTIME_BETA_HEADER,
    WS_MAX_SIZE,
)
from openai_tools.realtime.audio import (
    AudioFormat,
    InputAudioNoiseReduction,
    InputAudioTranscription,
    NoiseReductionType,
    TranscriptionModel,
    Voice,
)
from openai_tools.realtime.conversation import (
    ConversationItem,
    FunctionCallOutputItem,
    MessageItem,
)
from openai_tools.realtime.events.client import (
    ClientEvent,
    ConversationItemCreateEvent,
    ConversationItemDeleteEvent,
    ConversationItemRetrieveEvent,
    ConversationItemTruncateEvent,
    InputAudioBufferAppendEvent,
    InputAudioBufferClearEvent,
    InputAudioBufferCommitEvent,
    OutputAudioBufferClearEvent,
    ResponseCancelEvent,
    ResponseCreateEvent,
    SessionUpdateEvent,
)
from openai_tools.realtime.events.server import (
    SERVER_EVENT_TYPES,
    ErrorEvent,
    ServerEvent,
    SessionCreatedEvent,
    SessionInfo,
    parse_server_event,
)
from openai_tools.realtime.session import (
    MaxTokens,
    Modality,
    RealtimeTool,
    ResponseCreateConfig,
    SessionConfig,
    ToolChoice,
)
from openai_tools.realtime.state import (
    InputAudioState,
    InputAudioTracker,
    ResponseState,
    ResponseTracker,
)
from openai_tools.realtime.vad import SemanticVadConfig, ServerVadConfig

logger = logging.getLogger(LOGGER_NAME)


class RealtimeClient:
    """
    Builder for realtime sessions.

    Setters return the client so calls can be chained::

        client = RealtimeClient().set_voice(Voice.CORAL).set_instructions("Be brief")
        session = await client.connect()

    Args:
        auth: Authentication provider, read from the environment when omitted
        model: Realtime model (default gpt-4o-realtime-preview)
    """

    def __init__(self, auth: Optional[AuthProvider] = None,
                 model: Union[str, RealtimeModel] = RealtimeModel.GPT_4O_REALTIME_PREVIEW):
        self.auth = auth if auth is not None else AuthProvider.from_env()
        self.model = model_id(model)
        self.session_config = SessionConfig()

    @classmethod
    def azure(cls) -> "RealtimeClient":
        return cls(AuthProvider.azure_from_env())

    @classmethod
    def with_url(cls, base_url: str, api_key: str) -> "RealtimeClient":
        return cls(AuthProvider.from_url(base_url, api_key=api_key))

    def set_model(self, model: Union[str, RealtimeModel]) -> "RealtimeClient":
        self.model = model_id(model)
        return self

    def set_modalities(self, modalities: Sequence[Modality]) -> "RealtimeClient":
        self.session_config.modalities = list(modalities)
        return self

    def set_instructions(self, instructions: str) -> "RealtimeClient":
        self.session_config.instructions = instructions
        return self

    def set_voice(self, voice: Voice) -> "RealtimeClient":
        self.session_config.voice = voice
        return self

    def set_input_audio_format(self, audio_format: AudioFormat) -> "RealtimeClient":
        self.session_config.input_audio_format = audio_format
        return self

    def set_output_audio_format(self, audio_format: AudioFormat) -> "RealtimeClient":
        self.session_config.output_audio_format = audio_format
        return self

    def enable_transcription(self, model: TranscriptionModel = TranscriptionModel.WHISPER_1) -> "RealtimeClient":
        self.session_config.input_audio_transcription = InputAudioTranscription(model=model)
        return self

    def set_transcription(self, config: InputAudioTranscription) -> "RealtimeClient":
        self.session_config.input_audio_transcription = config
        return self

    def set_noise_reduction(self, noise_type: NoiseReductionType) -> "RealtimeClient":
        self.session_config.input_audio_noise_reduction = InputAudioNoiseReduction(type=noise_type)
        return self

    def set_server_vad(self, config: Optional[ServerVadConfig] = None) -> "RealtimeClient":
        self.session_config.turn_detection = config or ServerVadConfig()
        return self

    def set_semantic_vad(self, config: Optional[SemanticVadConfig] = None) -> "RealtimeClient":
        self.session_config.turn_detection = config or SemanticVadConfig()
        return self

    def disable_turn_detection(self) -> "RealtimeClient":
        """Send ``turn_detection: null``; the caller then commits audio itself."""
        self.session_config.turn_detection = None
        return self

    def set_tools(self, tools: Sequence[Union[FunctionTool, McpTool]]) -> "RealtimeClient":
        self.session_config.tools = [RealtimeTool.from_tool(tool) for tool in tools]
        return self

    def set_realtime_tools(self, tools: Sequence[RealtimeTool]) -> "RealtimeClient":
        self.session_config.tools = list(tools)
        return self

    def set_tool_choice(self, choice: ToolChoice) -> "RealtimeClient":
        self.session_config.tool_choice = choice
        return self

    def set_temperature(self, temperature: float) -> "RealtimeClient":
        self.session_config.temperature = temperature
        return self

    def set_max_response_output_tokens(self, max_tokens: MaxTokens) -> "RealtimeClient":
        self.session_config.max_response_output_tokens = max_tokens
        return self

    def ws_url(self) -> str:
        return self.auth.realtime_url(self.model)

    def _headers(self):
        headers = dict(self.auth.headers())
        headers["OpenAI-Beta"] = REALTIME_BETA_HEADER
        return headers

    async def connect(self) -> "RealtimeSession":
        """
        Open a session.

        Waits for ``session.created`` and then sends ``session.update`` when
        any configuration was set on the client.

        Raises:
            TransportError: The connection could not be established or was lost
            RemoteError: The server answered with an ``error`` event
            ResponseShapeError: The first event was not ``session.created``
        """
        url = self.ws_url()
        logger.info(f"Connecting to realtime API with model: {self.model}")
        logger.debug(f"WebSocket URL: {url}")
        try:
            ws = await asyncio.wait_for(
                websockets.connect(url, additional_headers=self._headers(), max_size=WS_MAX_SIZE),
                timeout=CONNECTION_TIMEOUT,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout while connecting to realtime API (after {CONNECTION_TIMEOUT}s)")
            raise TransportError(f"Timed out connecting to {url}") from e
        except (OSError, WebSocketException) as e:
            logger.error(f"Failed to connect to realtime API: {e}")
            raise TransportError(f"Failed to connect to realtime API: {e}") from e

        session = RealtimeSession(ws)
        try:
            first = await session.recv()
            if first is None:
                raise TransportError("Connection closed before session.created")
            if isinstance(first, ErrorEvent):
                raise RemoteError(first.error.message, code=first.error.code,
                                  error_type=first.error.type, param=first.error.param)
            if not isinstance(first, SessionCreatedEvent):
                raise ResponseShapeError(f"Expected session.created, got {first.type}")
            session.session = first.session
            logger.info(f"Realtime session created: {first.session.id}")

            if not self.session_config.is_empty():
                await session.update_session(self.session_config)
        except Exception:
            await session.close()
            raise
        return session


class RealtimeSession:
    """
    A live realtime connection.

    ``recv`` returns the next typed server event, or None once the server
    closes the connection normally. The session also supports ``async for``
    and ``async with``.
    """

    def __init__(self, ws):
        self._ws = ws
        self._send_lock = asyncio.Lock()
        self._responses = ResponseTracker()
        self._input_audio = InputAudioTracker()
        self.session: Optional[SessionInfo] = None
        self.closed = False

    @property
    def response_state(self) -> ResponseState:
        return self._responses.state

    @property
    def input_audio_state(self) -> InputAudioState:
        return self._input_audio.state

    def response_state_of(self, response_id: str) -> ResponseState:
        return self._responses.state_of(response_id)

    async def send(self, event: ClientEvent) -> None:
        """Send one client event. Events are written in call order."""
        message = event.to_json()
        async with self._send_lock:
            try:
                await self._ws.send(message)
            except ConnectionClosed as e:
                self.closed = True
                logger.error(f"Realtime connection lost while sending {event.type}: {e}")
                raise TransportError(f"Realtime connection closed: {e}") from e
            self._responses.on_client_event(event)
            self._input_audio.on_client_event(event)
        if event.type != "input_audio_buffer.append":
            logger.debug(f"Sent {event.type}")

    async def recv(self) -> Optional[ServerEvent]:
        """
        Receive the next server event.

        Binary frames and unknown event types are skipped, as are deltas of
        responses the client cancelled.

        Raises:
            TransportError: The connection was lost
            ResponseShapeError: A known event type had an unexpected shape
        """
        while True:
            try:
                message = await self._ws.recv()
            except ConnectionClosedOK:
                logger.info("Realtime connection closed")
                self.closed = True
                return None
            except ConnectionClosed as e:
                self.closed = True
                logger.error(f"Realtime connection lost: {e}")
                raise TransportError(f"Realtime connection lost: {e}") from e

            if isinstance(message, bytes):
                logger.debug(f"Skipping binary frame of {len(message)} bytes")
                continue

            data = loads_json(message)
            if data.get("type") not in SERVER_EVENT_TYPES:
                logger.warning(f"Skipping unknown realtime event type: {data.get('type')}")
                continue

            event = parse_server_event(data)
            self._input_audio.on_server_event(event)
            self._responses.on_server_event(event)
            if self._responses.is_suppressed(event):
                logger.debug(f"Dropping {event.type} of cancelled response {event.get_response_id()}")
                continue
            if isinstance(event, ErrorEvent):
                logger.error(f"Realtime error event: {event.error.message}")
            return event

    async def update_session(self, config: SessionConfig) -> None:
        await self.send(SessionUpdateEvent(session=config))

    async def append_audio(self, audio_base64: str) -> None:
        await self.send(InputAudioBufferAppendEvent(audio=audio_base64))

    async def append_audio_bytes(self, audio: bytes) -> None:
        await self.append_audio(base64.b64encode(audio).decode("ascii"))

    async def commit_audio(self) -> None:
        await self.send(InputAudioBufferCommitEvent())

    async def clear_audio(self) -> None:
        await self.send(InputAudioBufferClearEvent())

    async def clear_output_audio(self) -> None:
        await self.send(OutputAudioBufferClearEvent())

    async def create_item(self, item: ConversationItem, previous_item_id: Optional[str] = None) -> None:
        await self.send(ConversationItemCreateEvent(item=item, previous_item_id=previous_item_id))

    async def send_text(self, text: str) -> None:
        """Add a user text message. Call ``create_response`` to get an answer."""
        await self.create_item(MessageItem.user_text(text))

    async def create_response(self, config: Optional[ResponseCreateConfig] = None) -> None:
        await self.send(ResponseCreateEvent(response=config))

    async def cancel_response(self, response_id: Optional[str] = None) -> None:
        await self.send(ResponseCancelEvent(response_id=response_id))

    async def submit_function_output(self, call_id: str, output: str) -> None:
        await self.create_item(FunctionCallOutputItem.new(call_id, output))

    async def delete_item(self, item_id: str) -> None:
        await self.send(ConversationItemDeleteEvent(item_id=item_id))

    async def retrieve_item(self, item_id: str) -> None:
        await self.send(ConversationItemRetrieveEvent(item_id=item_id))

    async def truncate_item(self, item_id: str, content_index: int, audio_end_ms: int) -> None:
        await self.send(ConversationItemTruncateEvent(
            item_id=item_id, content_index=content_index, audio_end_ms=audio_end_ms
        ))

    async def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        logger.info("Closing realtime session")
        await self._ws.close()

    def __aiter__(self):
        return self

    async def __anext__(self) -> ServerEvent:
        event = await self.recv()
        if event is None:
            raise StopAsyncIteration
        return event

    async def __aenter__(self) -> "RealtimeSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
