"""Request, response and view-state types for the playback workflow."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TranslationRequest:
    text: str
    source_language: str
    target_language: str


@dataclass(frozen=True)
class TranslationResponse:
    translated_text: str


@dataclass(frozen=True)
class SynthesisRequest:
    text: str
    language: str


@dataclass(frozen=True)
class SynthesisResponse:
    audio_url: str


@dataclass
class AudioPlayerState:
    """What the audio element shows; never visible without a source."""

    visible: bool = False
    source_url: str | None = None
    playing: bool = False
    position: float = 0.0


@dataclass
class PageState:
    """Values of the page's inputs plus the audio player."""

    text_input: str = ""
    translated_text: str = ""
    source_language: str = "en"
    target_language: str = "id"
    player: AudioPlayerState = field(default_factory=AudioPlayerState)


__all__ = [
    "TranslationRequest",
    "TranslationResponse",
    "SynthesisRequest",
    "SynthesisResponse",
    "AudioPlayerState",
    "PageState",
]
