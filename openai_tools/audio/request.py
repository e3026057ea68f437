"""
Audio endpoints: text-to-speech, transcription and translation.

Usage:
```python
audio = Audio()
mp3 = audio.text_to_speech("Hello", TtsOptions(voice=Voice.NOVA))

result = audio.transcribe("meeting.mp3", TranscriptionOptions(
    response_format=TranscriptionFormat.VERBOSE_JSON,
    timestamp_granularities=[TimestampGranularity.WORD],
))
```
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from openai_tools.audio.response import TranscriptionResponse
from openai_tools.common.client import ApiResource
from openai_tools.common.errors import InvalidArgumentError, MissingConfigurationError, parse_model
from openai_tools.common.models import model_id
from openai_tools.config.constants import LOGGER_NAME, MAX_AUDIO_FILE_SIZE

logger = logging.getLogger(LOGGER_NAME)

SPEECH_PATH = "audio/speech"
TRANSCRIPTIONS_PATH = "audio/transcriptions"
TRANSLATIONS_PATH = "audio/translations"


class TtsModel(str, Enum):
    """Text-to-speech models. Default: tts-1."""
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"
    GPT_4O_MINI_TTS = "gpt-4o-mini-tts"


class SttModel(str, Enum):
    """Speech-to-text models. Default: whisper-1."""
    WHISPER_1 = "whisper-1"
    GPT_4O_TRANSCRIBE = "gpt-4o-transcribe"
    GPT_4O_MINI_TRANSCRIBE = "gpt-4o-mini-transcribe"


class Voice(str, Enum):
    """Text-to-speech voices. Default: alloy."""
    ALLOY = "alloy"
    ASH = "ash"
    BALLAD = "ballad"
    CORAL = "coral"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SAGE = "sage"
    SHIMMER = "shimmer"
    VERSE = "verse"


class AudioFormat(str, Enum):
    """Text-to-speech output containers. Default: mp3."""
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"
    WAV = "wav"
    PCM = "pcm"

    @property
    def file_extension(self) -> str:
        return self.value


class AudioInputFormat(str, Enum):
    """Containers accepted for transcription and translation uploads."""
    MP3 = "mp3"
    MP4 = "mp4"
    MPEG = "mpeg"
    MPGA = "mpga"
    M4A = "m4a"
    OGG = "ogg"
    WAV = "wav"
    WEBM = "webm"
    FLAC = "flac"

    @property
    def mime_type(self) -> str:
        return INPUT_MIME_TYPES[self]


INPUT_MIME_TYPES = {
    AudioInputFormat.MP3: "audio/mpeg",
    AudioInputFormat.MP4: "audio/mp4",
    AudioInputFormat.MPEG: "audio/mpeg",
    AudioInputFormat.MPGA: "audio/mpeg",
    AudioInputFormat.M4A: "audio/mp4",
    AudioInputFormat.OGG: "audio/ogg",
    AudioInputFormat.WAV: "audio/wav",
    AudioInputFormat.WEBM: "audio/webm",
    AudioInputFormat.FLAC: "audio/flac",
}


class TranscriptionFormat(str, Enum):
    """Output format of transcriptions. Default: json."""
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"

    @property
    def is_json(self) -> bool:
        return self in (TranscriptionFormat.JSON, TranscriptionFormat.VERBOSE_JSON)


class TimestampGranularity(str, Enum):
    WORD = "word"
    SEGMENT = "segment"


class TtsOptions(BaseModel):
    """Options for ``Audio.text_to_speech``."""
    model: str = TtsModel.TTS_1.value
    voice: Voice = Voice.ALLOY
    response_format: AudioFormat = AudioFormat.MP3
    speed: Optional[float] = Field(default=None, ge=0.25, le=4.0)
    instructions: Optional[str] = None

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v):
        return model_id(v)


class TranscriptionOptions(BaseModel):
    """Options for transcription and translation."""
    model: str = SttModel.WHISPER_1.value
    language: Optional[str] = None
    prompt: Optional[str] = None
    response_format: TranscriptionFormat = TranscriptionFormat.JSON
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    timestamp_granularities: Optional[List[TimestampGranularity]] = None

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v):
        return model_id(v)

    def form_fields(self) -> List[Tuple[str, str]]:
        """Multipart form fields; granularities repeat the array key."""
        fields = [("model", self.model), ("response_format", self.response_format.value)]
        if self.language is not None:
            fields.append(("language", self.language))
        if self.prompt is not None:
            fields.append(("prompt", self.prompt))
        if self.temperature is not None:
            fields.append(("temperature", str(self.temperature)))
        for granularity in self.timestamp_granularities or []:
            fields.append(("timestamp_granularities[]", granularity.value))
        return fields


def audio_mime_type(filename: str) -> str:
    """MIME type for an upload, derived from its extension."""
    extension = Path(filename).suffix.lstrip(".").lower()
    try:
        return AudioInputFormat(extension).mime_type
    except ValueError:
        raise InvalidArgumentError(
            f"Unsupported audio file '{filename}'; expected one of "
            f"{[fmt.value for fmt in AudioInputFormat]}"
        ) from None


class Audio(ApiResource):
    """Client for the audio endpoints."""

    def text_to_speech(self, text: str, options: Optional[TtsOptions] = None) -> bytes:
        """Synthesize ``text`` and return the encoded audio bytes."""
        if not text:
            raise MissingConfigurationError("Text-to-speech needs input text")
        options = options or TtsOptions()
        payload = {"input": text, **options.model_dump(mode="json", exclude_none=True)}
        logger.info(f"Synthesizing {len(text)} characters with {options.model} "
                    f"({options.voice.value}, {options.response_format.value})")
        response = self.http.post(SPEECH_PATH, json=payload)
        return response.content

    def transcribe(self, path: Union[str, Path],
                   options: Optional[TranscriptionOptions] = None) -> TranscriptionResponse:
        path = Path(path)
        return self.transcribe_bytes(path.read_bytes(), path.name, options)

    def transcribe_bytes(self, audio: bytes, filename: str,
                         options: Optional[TranscriptionOptions] = None) -> TranscriptionResponse:
        return self._submit(TRANSCRIPTIONS_PATH, audio, filename, options or TranscriptionOptions())

    def translate(self, path: Union[str, Path],
                  options: Optional[TranscriptionOptions] = None) -> TranscriptionResponse:
        """Transcribe and translate into English."""
        path = Path(path)
        return self.translate_bytes(path.read_bytes(), path.name, options)

    def translate_bytes(self, audio: bytes, filename: str,
                        options: Optional[TranscriptionOptions] = None) -> TranscriptionResponse:
        return self._submit(TRANSLATIONS_PATH, audio, filename, options or TranscriptionOptions())

    def _submit(self, path: str, audio: bytes, filename: str,
                options: TranscriptionOptions) -> TranscriptionResponse:
        if not audio:
            raise MissingConfigurationError("Audio upload is empty")
        if len(audio) > MAX_AUDIO_FILE_SIZE:
            # The service rejects it; the request is still sent.
            logger.warning(f"{filename} is {len(audio)} bytes, above the 25 MiB upload limit")

        files: Any = {"file": (filename, audio, audio_mime_type(filename))}
        logger.info(f"Uploading {filename} ({len(audio)} bytes) to {path} with {options.model}")
        response = self.http.post(path, data=options.form_fields(), files=files)

        if options.response_format.is_json:
            return parse_model(TranscriptionResponse, response.text)
        return TranscriptionResponse(text=response.text)
