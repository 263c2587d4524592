import pytest

from transpeak.backend.app import create_app
from transpeak.models import (
    PageState,
    SynthesisRequest,
    SynthesisResponse,
    TranslationRequest,
    TranslationResponse,
)
from transpeak_core import Settings


@pytest.fixture()
def audio_dir(tmp_path):
    return tmp_path / "audio"


@pytest.fixture()
def flask_app(audio_dir):
    app = create_app(
        {
            "TESTING": True,
            "TRANSPEAK_AUDIO_DIR": str(audio_dir),
            "TRANSPEAK_SETTINGS": Settings(voice="shimmer"),
        }
    )
    yield app


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


class FakeBackend:
    """Records requests and answers with canned responses or errors."""

    def __init__(self) -> None:
        self.translated_text = "Halo dunia"
        self.audio_path = "/static/output_1.mp3"
        self.error: Exception | None = None
        self.calls: list[tuple[str, object]] = []

    def translate(self, req: TranslationRequest) -> TranslationResponse:
        self.calls.append(("translate", req))
        if self.error:
            raise self.error
        return TranslationResponse(translated_text=self.translated_text)

    def synthesize(self, req: SynthesisRequest) -> SynthesisResponse:
        self.calls.append(("synthesize", req))
        if self.error:
            raise self.error
        return SynthesisResponse(audio_url=self.audio_path)

    def speak(self, text: str, lang: str) -> SynthesisResponse:
        self.calls.append(("speak", (text, lang)))
        if self.error:
            raise self.error
        return SynthesisResponse(audio_url=self.audio_path)

    def audio_url(self, path: str) -> str:
        return "http://backend" + path


@pytest.fixture()
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def page_state() -> PageState:
    return PageState(text_input="Hello world", source_language="en", target_language="id")
