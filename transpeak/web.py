# Part of transpeak: Translating text and reading it aloud | Copyright (c) 2025 | License: MIT
"""NiceGUI page for translating text and listening to the result."""

from __future__ import annotations

import logging
from typing import Callable

try:
    from nicegui import run, ui
except ImportError:
    raise ImportError("NiceGUI is required for the web page. Install with: pip install nicegui")

from transpeak_core import Settings, load_settings

from .client import BackendClient
from .models import PageState
from .orchestrator import PlaybackOrchestrator
from .ui_common import LANGUAGE_OPTIONS

LOGGER = logging.getLogger(__name__)


class TranspeakPage:
    """One browser tab: widgets, their page state and the orchestrator behind them."""

    def __init__(self, settings: Settings, client: BackendClient | None = None):
        self.settings = settings
        self.client = client or BackendClient(settings.backend_url, settings.request_timeout)
        self.state = PageState(
            source_language=settings.default_source_language,
            target_language=settings.default_target_language,
        )
        self.pending_alerts: list[str] = []
        self.busy = False
        self.orchestrator = PlaybackOrchestrator(
            self.client,
            self.state,
            alert=self.pending_alerts.append,
            autoplay=settings.autoplay,
        )

        # UI elements - set during build_ui
        self.text_input = None
        self.source_select = None
        self.target_select = None
        self.translated_text = None
        self.audio_player = None
        self.action_buttons: list = []

    def build_ui(self):
        ui.page_title("transpeak")

        with ui.column().classes('w-full max-w-3xl mx-auto p-4'):
            ui.label("transpeak").classes('text-2xl font-bold mb-4')

            with ui.card().classes('w-full p-4 mb-4'):
                with ui.row().classes('w-full gap-4'):
                    self.source_select = ui.select(
                        options=LANGUAGE_OPTIONS,
                        value=self.state.source_language,
                        label="Source language",
                    ).classes('flex-1')
                    self.target_select = ui.select(
                        options=LANGUAGE_OPTIONS,
                        value=self.state.target_language,
                        label="Target language",
                    ).classes('flex-1')

                self.text_input = ui.textarea(
                    label="Text",
                    placeholder="Type the text to translate...",
                ).classes('w-full')
                self.action_buttons.append(ui.button("Translate", on_click=self.on_translate, icon="translate"))

            with ui.card().classes('w-full p-4'):
                self.translated_text = ui.textarea(
                    label="Translation",
                    placeholder="The translation will appear here...",
                ).classes('w-full')

                with ui.row().classes('gap-2'):
                    self.action_buttons.append(ui.button("Speak", on_click=self.on_submit, icon="volume_up"))
                    self.action_buttons.append(
                        ui.button("Translate & speak", on_click=self.on_speak, icon="record_voice_over").props('flat')
                    )
                    ui.button("Reset", on_click=self.on_reset, icon="restart_alt").props('flat')

                self.audio_player = ui.audio('').classes('w-full mt-2')
                self.audio_player.set_visibility(False)

    async def on_translate(self):
        await self._dispatch(self.orchestrator.handle_translate_click, fields=("translated_text",))

    async def on_submit(self):
        await self._dispatch(self.orchestrator.handle_form_submit)

    async def on_speak(self):
        await self._dispatch(self.orchestrator.handle_speak_submit)

    def on_reset(self):
        if self.orchestrator.handle_reset_click():
            self.push_fields(("text_input", "translated_text"))
            self.push_player()

    async def _dispatch(self, handler: Callable[[], bool], fields: tuple[str, ...] = ()) -> None:
        """Run *handler* off the event loop; on success copy back only *fields* and the player.

        Widgets the handler does not own keep whatever the user typed meanwhile.
        """
        if self.busy:
            LOGGER.debug("Ignoring action while a request is pending")
            return
        self._set_busy(True)
        try:
            self.pull_state()
            changed = await run.io_bound(handler)
            if changed:
                self.push_fields(fields)
                self.push_player()
        finally:
            self._set_busy(False)
            self.flush_alerts()

    def _set_busy(self, busy: bool):
        self.busy = busy
        for button in self.action_buttons:
            if busy:
                button.disable()
            else:
                button.enable()

    def pull_state(self):
        self.state.text_input = self.text_input.value or ""
        self.state.translated_text = self.translated_text.value or ""
        self.state.source_language = self.source_select.value or self.settings.default_source_language
        self.state.target_language = self.target_select.value or self.settings.default_target_language

    def push_fields(self, fields: tuple[str, ...]):
        for name in fields:
            getattr(self, name).value = getattr(self.state, name)

    def push_player(self):
        """Mirror the player state; ``play`` is only issued right after audio was loaded."""
        player = self.state.player
        if player.visible and player.source_url:
            self.audio_player.set_source(self.client.audio_url(player.source_url))
            self.audio_player.set_visibility(True)
            if player.playing:
                self.audio_player.play()
        else:
            self.audio_player.pause()
            self.audio_player.seek(player.position)
            self.audio_player.set_visibility(False)

    def flush_alerts(self):
        while self.pending_alerts:
            ui.notify(self.pending_alerts.pop(0), type="negative")


@ui.page("/")
def index():
    """Main page of the web application."""
    TranspeakPage(load_settings()).build_ui()


def main(host: str = "127.0.0.1", port: int = 8081) -> int:
    """Main entry point for the web page."""
    logging.basicConfig(level=logging.INFO)
    try:
        ui.run(host=host, port=port, title="transpeak", show=False, reload=False)
        return 0
    except Exception as exc:
        LOGGER.exception("Failed to start web interface")
        print(f"Failed to start web interface: {exc}")
        return 1


if __name__ in {"__main__", "__mp_main__"}:
    import sys
    sys.exit(main())
