"""Response models for transcription and translation."""

from typing import List, Optional

from pydantic import BaseModel


class Word(BaseModel):
    word: str
    start: float
    end: float


class Segment(BaseModel):
    id: int
    seek: Optional[int] = None
    start: float
    end: float
    text: str
    tokens: Optional[List[int]] = None
    temperature: Optional[float] = None
    avg_logprob: Optional[float] = None
    compression_ratio: Optional[float] = None
    no_speech_prob: Optional[float] = None


class TranscriptionResponse(BaseModel):
    """
    Transcription or translation result.

    For ``json`` only ``text`` is set; ``verbose_json`` adds language,
    duration and, when requested, words and segments. For ``text``, ``srt``
    and ``vtt`` the raw body is placed in ``text``.
    """
    text: str
    task: Optional[str] = None
    language: Optional[str] = None
    duration: Optional[float] = None
    words: Optional[List[Word]] = None
    segments: Optional[List[Segment]] = None
