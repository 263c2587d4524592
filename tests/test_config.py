from __future__ import annotations

from transpeak_core import Settings, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "absent.json")
    assert settings == Settings()
    assert settings.backend_url == "http://127.0.0.1:8080"
    assert settings.autoplay is False


def test_settings_roundtrip(tmp_path):
    path = tmp_path / "cfg" / "settings.json"
    original = Settings(backend_url="http://tts.local:9000", default_target_language="ja-JP", autoplay=True)

    save_settings(original, path)

    assert load_settings(path) == original


def test_invalid_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_from_mapping_accepts_camel_case_and_coerces():
    settings = Settings.from_mapping(
        {
            "backendUrl": "http://example:1234",
            "targetLanguage": "fr",
            "autoplay": "yes",
            "request_timeout": "-3",
        }
    )
    assert settings.backend_url == "http://example:1234"
    assert settings.default_target_language == "fr"
    assert settings.autoplay is True
    assert settings.request_timeout == 30.0
