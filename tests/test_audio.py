"""Tests for text to speech, transcription and translation."""

import logging

import pytest

from conftest import make_response, sent_json, sent_url
from openai_tools.audio.request import (
    Audio,
    AudioFormat,
    TimestampGranularity,
    TranscriptionFormat,
    TranscriptionOptions,
    TtsModel,
    TtsOptions,
    Voice,
    audio_mime_type,
)
from openai_tools.common.errors import InvalidArgumentError, MissingConfigurationError


def test_text_to_speech(api_key, mock_request):
    mock_request.return_value = make_response(content=b"ID3-audio")

    audio = Audio().text_to_speech("Hello", TtsOptions(
        model=TtsModel.TTS_1, voice=Voice.NOVA, response_format=AudioFormat.WAV, speed=1.25,
    ))

    assert audio == b"ID3-audio"
    assert sent_url(mock_request) == "https://api.openai.com/v1/audio/speech"
    assert sent_json(mock_request) == {
        "input": "Hello", "model": "tts-1", "voice": "nova", "response_format": "wav", "speed": 1.25,
    }


def test_text_to_speech_requires_text(api_key, mock_request):
    with pytest.raises(MissingConfigurationError):
        Audio().text_to_speech("")


def test_transcribe_file(api_key, mock_request, tmp_path):
    path = tmp_path / "meeting.wav"
    path.write_bytes(b"RIFF....WAVE")
    mock_request.return_value = make_response({"text": "Hello team"})

    result = Audio().transcribe(path, TranscriptionOptions(language="en"))

    assert result.text == "Hello team"
    assert sent_url(mock_request) == "https://api.openai.com/v1/audio/transcriptions"
    kwargs = mock_request.call_args.kwargs
    assert kwargs["files"]["file"] == ("meeting.wav", b"RIFF....WAVE", "audio/wav")
    assert ("language", "en") in kwargs["data"]
    assert ("model", "whisper-1") in kwargs["data"]


def test_verbose_json_with_granularities(api_key, mock_request):
    mock_request.return_value = make_response({
        "task": "transcribe",
        "language": "english",
        "duration": 1.5,
        "text": "Hi there",
        "words": [{"word": "Hi", "start": 0.0, "end": 0.4}, {"word": "there", "start": 0.5, "end": 1.0}],
    })
    options = TranscriptionOptions(
        response_format=TranscriptionFormat.VERBOSE_JSON,
        timestamp_granularities=[TimestampGranularity.WORD, TimestampGranularity.SEGMENT],
    )

    result = Audio().transcribe_bytes(b"audio", "clip.mp3", options)

    data = mock_request.call_args.kwargs["data"]
    assert [v for k, v in data if k == "timestamp_granularities[]"] == ["word", "segment"]
    assert result.duration == 1.5
    assert [w.word for w in result.words] == ["Hi", "there"]


def test_plain_text_formats_use_raw_body(api_key, mock_request):
    srt = "1\n00:00:00,000 --> 00:00:01,000\nHi\n"
    mock_request.return_value = make_response(srt)

    result = Audio().transcribe_bytes(
        b"audio", "clip.m4a", TranscriptionOptions(response_format=TranscriptionFormat.SRT)
    )

    assert result.text == srt


def test_translate(api_key, mock_request):
    mock_request.return_value = make_response({"text": "Good morning"})
    result = Audio().translate_bytes(b"audio", "bonjour.ogg")
    assert result.text == "Good morning"
    assert sent_url(mock_request).endswith("/audio/translations")


def test_large_upload_only_warns(api_key, mock_request, caplog, monkeypatch):
    monkeypatch.setattr("openai_tools.audio.request.MAX_AUDIO_FILE_SIZE", 4)
    mock_request.return_value = make_response({"text": "ok"})
    with caplog.at_level(logging.WARNING, logger="openai_tools"):
        Audio().transcribe_bytes(b"0123456789", "big.wav")
    assert "25 MiB" in caplog.text
    mock_request.assert_called_once()


def test_mime_types():
    assert audio_mime_type("a.MP3") == "audio/mpeg"
    assert audio_mime_type("a.webm") == "audio/webm"
    with pytest.raises(InvalidArgumentError):
        audio_mime_type("notes.txt")


def test_empty_upload(api_key, mock_request):
    with pytest.raises(MissingConfigurationError):
        Audio().transcribe_bytes(b"", "empty.wav")
