"""Audio settings of a realtime session."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class AudioFormat(str, Enum):
    """Wire format of input and output audio. Default: pcm16."""
    PCM16 = "pcm16"
    G711_ULAW = "g711_ulaw"
    G711_ALAW = "g711_alaw"

    @classmethod
    def default(cls) -> "AudioFormat":
        return cls.PCM16


class Voice(str, Enum):
    """Voices available for spoken output. Default: alloy."""
    ALLOY = "alloy"
    ASH = "ash"
    BALLAD = "ballad"
    CORAL = "coral"
    ECHO = "echo"
    SAGE = "sage"
    SHIMMER = "shimmer"
    VERSE = "verse"

    @classmethod
    def default(cls) -> "Voice":
        return cls.ALLOY


class TranscriptionModel(str, Enum):
    WHISPER_1 = "whisper-1"


class InputAudioTranscription(BaseModel):
    """Transcribe the user's audio alongside the conversation."""
    model: Optional[TranscriptionModel] = TranscriptionModel.WHISPER_1
    language: Optional[str] = None
    prompt: Optional[str] = None


class NoiseReductionType(str, Enum):
    NEAR_FIELD = "near_field"
    FAR_FIELD = "far_field"


class InputAudioNoiseReduction(BaseModel):
    type: NoiseReductionType
