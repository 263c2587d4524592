from __future__ import annotations

import re
import types

import pytest

from transpeak_core import LanguageError
from transpeak_core.services import AudioStore, synthesize_speech, translate
from transpeak_core.services.text_utils import clean_translation


class DummyChatMessage:
    def __init__(self, content: str) -> None:
        self.content = content


class DummyChoice:
    def __init__(self, content: str) -> None:
        self.message = DummyChatMessage(content)
        self.index = 0


class DummyChatResponse:
    def __init__(self, content: str) -> None:
        self.choices = [DummyChoice(content)]


class DummySpeechResponse:
    def __init__(self, data: bytes) -> None:
        self._data = data

    def read(self) -> bytes:
        return self._data


def test_translate_uses_openai(monkeypatch):
    captured = {}

    def create(**kwargs):
        captured.update(kwargs)
        return DummyChatResponse('  "hola   mundo"  ')

    def fake_client():
        chat = types.SimpleNamespace(completions=types.SimpleNamespace(create=create))
        return types.SimpleNamespace(chat=chat)

    monkeypatch.setattr("transpeak_core.services.translation.get_openai_client", fake_client)
    result = translate("Hello world", "es", "en")
    assert result == "hola mundo"
    prompt = captured["messages"][0]["content"]
    assert "from English to Spanish" in prompt
    assert prompt.endswith("Hello world")


def test_translate_without_source_lets_model_detect(monkeypatch):
    captured = {}

    def create(**kwargs):
        captured.update(kwargs)
        return DummyChatResponse("Hallo")

    def fake_client():
        chat = types.SimpleNamespace(completions=types.SimpleNamespace(create=create))
        return types.SimpleNamespace(chat=chat)

    monkeypatch.setattr("transpeak_core.services.translation.get_openai_client", fake_client)
    assert translate("Hello", "de-DE") == "Hallo"
    assert "German (Germany)" in captured["messages"][0]["content"]


def test_translate_blank_text_skips_the_api(monkeypatch):
    def fail():
        raise AssertionError("client should not be created")

    monkeypatch.setattr("transpeak_core.services.translation.get_openai_client", fail)
    assert translate("   ", "fr") == ""


def test_translate_rejects_unsupported_language():
    with pytest.raises(LanguageError):
        translate("Hello", "pl")


def test_synthesize_speech_requests_mp3(monkeypatch):
    captured = {}

    def create(**kwargs):
        captured.update(kwargs)
        return DummySpeechResponse(b"ID3audio")

    def fake_client():
        audio = types.SimpleNamespace(speech=types.SimpleNamespace(create=create))
        return types.SimpleNamespace(audio=audio)

    monkeypatch.setattr("transpeak_core.services.speech.get_openai_client", fake_client)
    assert synthesize_speech(" Halo dunia ", "id-ID", "Nova") == b"ID3audio"
    assert captured["input"] == "Halo dunia"
    assert captured["voice"] == "nova"
    assert captured["response_format"] == "mp3"


def test_synthesize_speech_rejects_empty_text():
    with pytest.raises(ValueError):
        synthesize_speech("   ", "en")


def test_clean_translation_keeps_inner_quotes():
    assert clean_translation('"a" and "b"') == '"a" and "b"'
    assert clean_translation("«Bonjour»") == "Bonjour"
    assert clean_translation("line  one\n  line two\n\n\nnext") == "line one\nline two\n\nnext"


def test_audio_store_names_files_uniquely(tmp_path):
    store = AudioStore(tmp_path / "out", url_prefix="static/")
    first = store.save(b"one")
    second = store.save(b"two")
    assert first != second
    assert re.fullmatch(r"/static/output_\d+\.mp3", first)
    assert (tmp_path / "out" / second.rsplit("/", 1)[-1]).read_bytes() == b"two"


def test_audio_store_prunes_oldest_clips(tmp_path):
    store = AudioStore(tmp_path, keep=2)
    for name in ("output_1.mp3", "output_2.mp3", "output_3.mp3"):
        (tmp_path / name).write_bytes(b"old")

    newest = store.save(b"new")

    remaining = sorted(path.name for path in tmp_path.glob("output_*.mp3"))
    assert remaining == sorted(["output_3.mp3", newest.rsplit("/", 1)[-1]])


def test_audio_store_keep_zero_disables_pruning(tmp_path):
    store = AudioStore(tmp_path, keep=0)
    for index in range(3):
        store.save(b"clip%d" % index)
    assert len(list(tmp_path.glob("output_*.mp3"))) == 3


def test_openai_client_uses_settings(monkeypatch):
    from transpeak_core import Settings
    from transpeak_core.services import _client

    created = []
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(_client, "load_dotenv", lambda: None)
    monkeypatch.setattr(
        _client,
        "load_settings",
        lambda: Settings(request_timeout=12.5, openai_base_url="http://llm.local/v1"),
    )
    monkeypatch.setattr(_client, "OpenAI", lambda **kwargs: created.append(kwargs) or "client")
    _client.get_openai_client.cache_clear()
    try:
        assert _client.get_openai_client() == "client"
    finally:
        _client.get_openai_client.cache_clear()

    assert created == [{"api_key": "sk-test", "timeout": 12.5, "base_url": "http://llm.local/v1"}]


def test_openai_client_requires_api_key(monkeypatch):
    from transpeak_core.services import _client

    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr(_client, "load_dotenv", lambda: None)
    _client.get_openai_client.cache_clear()
    with pytest.raises(RuntimeError):
        _client.get_openai_client()
