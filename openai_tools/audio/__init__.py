"""
Speech endpoints: text to speech, transcription and translation.

Usage example:
```python
from openai_tools.audio import Audio, TtsOptions

audio = Audio()
mp3 = audio.text_to_speech("Hello there", TtsOptions())
text = audio.transcribe("meeting.wav").text
```
"""

from openai_tools.audio.request import Audio, TranscriptionOptions, TtsOptions
from openai_tools.audio.response import TranscriptionResponse

__all__ = ["Audio", "TranscriptionOptions", "TranscriptionResponse", "TtsOptions"]
