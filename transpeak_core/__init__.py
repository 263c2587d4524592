"""Core services and configuration for transpeak."""

from .config import Settings, load_settings, save_settings
from .languages import LanguageError, resolve_language
from .services.translation import translate
from .services.speech import synthesize_speech

__all__ = [
    "Settings",
    "load_settings",
    "save_settings",
    "LanguageError",
    "resolve_language",
    "translate",
    "synthesize_speech",
]
