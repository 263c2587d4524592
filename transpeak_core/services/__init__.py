"""Service layer shared by the backend routes."""

from .audio_store import AudioStore
from .translation import translate
from .speech import synthesize_speech

__all__ = [
    "AudioStore",
    "translate",
    "synthesize_speech",
]
