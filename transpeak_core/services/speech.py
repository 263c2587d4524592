"""Text-to-speech helpers."""

from __future__ import annotations

import logging
from typing import Final

from ..languages import resolve_language
from ._client import get_openai_client

LOGGER = logging.getLogger(__name__)

TTS_MODEL: Final[str] = "tts-1"
DEFAULT_VOICE: Final[str] = "nova"
AUDIO_FORMAT: Final[str] = "mp3"


def synthesize_speech(text: str, language: str, voice: str | None = None) -> bytes:
    """Return MP3 audio reading *text* aloud.

    The model picks up pronunciation from the text itself, so *language* is
    only validated and logged.
    """

    tag = resolve_language(language)
    clean = text.strip()
    if not clean:
        raise ValueError("Cannot generate speech for empty text")

    target_voice = (voice or DEFAULT_VOICE).lower()
    LOGGER.info("Synthesizing %d chars of %s speech with voice %s", len(clean), tag, target_voice)
    client = get_openai_client()
    response = client.audio.speech.create(
        input=clean,
        model=TTS_MODEL,
        voice=target_voice,
        response_format=AUDIO_FORMAT,
    )
    if isinstance(response, (bytes, bytearray)):
        return bytes(response)
    if hasattr(response, "read"):
        return response.read()
    if hasattr(response, "content"):
        return bytes(response.content)
    raise TypeError(f"Unsupported response type: {type(response)}")


__all__ = ["synthesize_speech"]
