"""Controller that drives translate-then-speak from user actions."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from .client import BackendError
from .models import (
    PageState,
    SynthesisRequest,
    SynthesisResponse,
    TranslationRequest,
    TranslationResponse,
)

LOGGER = logging.getLogger(__name__)

TRANSLATE_ALERT = "An error occurred while translating the text. Please try again."
SYNTHESIZE_ALERT = "An error occurred while synthesizing the text. Please try again."


class Backend(Protocol):
    def translate(self, req: TranslationRequest) -> TranslationResponse: ...

    def synthesize(self, req: SynthesisRequest) -> SynthesisResponse: ...

    def speak(self, text: str, lang: str) -> SynthesisResponse: ...


class PlaybackOrchestrator:
    """Runs one backend call per user action and applies the result to *state*.

    Each handler returns True when it changed *state*. Failures return False,
    never touch the page and produce exactly one ``alert`` call.
    Responses are applied even if the inputs changed while the call was in
    flight.
    """

    def __init__(
        self,
        backend: Backend,
        state: PageState,
        alert: Callable[[str], None],
        autoplay: bool = False,
    ) -> None:
        self.backend = backend
        self.state = state
        self.alert = alert
        self.autoplay = autoplay

    def handle_translate_click(self) -> bool:
        req = TranslationRequest(
            text=self.state.text_input,
            source_language=self.state.source_language,
            target_language=self.state.target_language,
        )
        try:
            resp = self.backend.translate(req)
        except BackendError as exc:
            LOGGER.warning("Translate failed: %s", exc)
            self.alert(TRANSLATE_ALERT)
            return False

        self.state.translated_text = resp.translated_text
        self.reset_audio_player()
        return True

    def handle_form_submit(self) -> bool:
        req = SynthesisRequest(text=self.state.translated_text, language=self.state.target_language)
        try:
            resp = self.backend.synthesize(req)
        except BackendError as exc:
            LOGGER.warning("Synthesize failed: %s", exc)
            self.alert(SYNTHESIZE_ALERT)
            return False
        self._load_audio(resp.audio_url, play=self.autoplay)
        return True

    def handle_speak_submit(self) -> bool:
        """Translate and speak the input text in one request, then play it."""

        try:
            resp = self.backend.speak(self.state.text_input, self.state.target_language)
        except BackendError as exc:
            LOGGER.warning("Speak failed: %s", exc)
            self.alert(SYNTHESIZE_ALERT)
            return False
        self._load_audio(resp.audio_url, play=True)
        return True

    def handle_reset_click(self) -> bool:
        self.state.text_input = ""
        self.state.translated_text = ""
        self.reset_audio_player()
        return True

    def reset_audio_player(self) -> None:
        player = self.state.player
        player.visible = False
        player.playing = False
        player.position = 0.0
        player.source_url = None

    def _load_audio(self, url: str, play: bool) -> None:
        player = self.state.player
        player.source_url = url
        player.position = 0.0
        player.visible = True
        player.playing = play
        LOGGER.info("Loaded audio %s (playing=%s)", url, play)


__all__ = [
    "Backend",
    "PlaybackOrchestrator",
    "TRANSLATE_ALERT",
    "SYNTHESIZE_ALERT",
]
