"""
Realtime API over WebSocket.

A realtime session is a long lived, bidirectional connection: the client
streams audio and conversation items in, the server streams transcripts,
text and audio back as events.

Key components:
- client: RealtimeClient (configuration and connect) and RealtimeSession
- events: typed client and server events
- session, audio, vad, conversation: configuration and item models
- state: response and input audio state machines tracked by the session
- handler: EventHandler for callback style processing

Usage example:
```python
import asyncio
from openai_tools.realtime import RealtimeClient, Modality

async def main():
    client = RealtimeClient().set_modalities([Modality.TEXT]).set_instructions("Be brief")
    async with await client.connect() as session:
        await session.send_text("What is the capital of France?")
        await session.create_response()
        async for event in session:
            if event.type == "response.text.delta":
                print(event.delta, end="")
            elif event.type == "response.done":
                break

asyncio.run(main())
```
"""

from openai_tools.realtime.audio import (
    AudioFormat,
    InputAudioNoiseReduction,
    InputAudioTranscription,
    NoiseReductionType,
    TranscriptionModel,
    Voice,
)
from openai_tools.realtime.client import RealtimeClient, RealtimeSession
from openai_tools.realtime.conversation import (
    FunctionCallItem,
    FunctionCallOutputItem,
    ItemRole,
    ItemStatus,
    MessageItem,
)
from openai_tools.realtime.events.server import parse_server_event
from openai_tools.realtime.handler import EventHandler
from openai_tools.realtime.session import (
    FunctionToolChoice,
    Modality,
    RealtimeTool,
    ResponseCreateConfig,
    SessionConfig,
)
from openai_tools.realtime.state import InputAudioState, ResponseState
from openai_tools.realtime.vad import Eagerness, SemanticVadConfig, ServerVadConfig

__all__ = [
    "AudioFormat",
    "Eagerness",
    "EventHandler",
    "FunctionCallItem",
    "FunctionCallOutputItem",
    "FunctionToolChoice",
    "InputAudioNoiseReduction",
    "InputAudioState",
    "InputAudioTranscription",
    "ItemRole",
    "ItemStatus",
    "MessageItem",
    "Modality",
    "NoiseReductionType",
    "RealtimeClient",
    "RealtimeSession",
    "RealtimeTool",
    "ResponseCreateConfig",
    "ResponseState",
    "SemanticVadConfig",
    "ServerVadConfig",
    "SessionConfig",
    "TranscriptionModel",
    "Voice",
    "parse_server_event",
]
