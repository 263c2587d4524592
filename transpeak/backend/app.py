"""Flask backend serving the translate and synthesize endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from flask import (
    Blueprint,
    Flask,
    Response,
    current_app,
    jsonify,
    request,
    send_from_directory,
)

from transpeak_core import LanguageError, Settings, load_settings, resolve_language
from transpeak_core.config import CONFIG_DIR
from transpeak_core.languages import language_options
from transpeak_core.services import AudioStore, synthesize_speech, translate

LOGGER = logging.getLogger(__name__)
AUDIO_DIR = CONFIG_DIR / "audio"
AUDIO_KEEP = 50
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

ROUTES = Blueprint("routes", __name__)
API = Blueprint("api", __name__, url_prefix="/api")


def create_app(config: dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.config.update(
        MAX_CONTENT_LENGTH=1 * 1024 * 1024,
        TRANSPEAK_AUDIO_DIR=str(AUDIO_DIR),
        TRANSPEAK_AUDIO_KEEP=AUDIO_KEEP,
        TRANSPEAK_ENABLE_CORS=False,
        TRANSPEAK_CORS_ORIGIN="*",
    )
    if config:
        app.config.update(config)

    app.register_blueprint(ROUTES)
    app.register_blueprint(API)

    @app.after_request
    def apply_cors_headers(response: Response) -> Response:
        if app.config.get("TRANSPEAK_ENABLE_CORS"):
            response.headers.setdefault("Access-Control-Allow-Origin", app.config["TRANSPEAK_CORS_ORIGIN"])
            response.headers.setdefault("Access-Control-Allow-Headers", "Content-Type")
            response.headers.setdefault("Access-Control-Allow-Methods", "GET,POST,OPTIONS")
        return response

    app.extensions["transpeak_audio"] = AudioStore(
        Path(app.config["TRANSPEAK_AUDIO_DIR"]), keep=int(app.config["TRANSPEAK_AUDIO_KEEP"])
    )
    if not isinstance(app.config.get("TRANSPEAK_SETTINGS"), Settings):
        app.config["TRANSPEAK_SETTINGS"] = load_settings()
    LOGGER.info("Backend ready; audio files go to %s", app.config["TRANSPEAK_AUDIO_DIR"])
    return app


@ROUTES.post("/translate")
def translate_route() -> Response:
    if request.is_json:
        return _speak_translation()

    text = request.form.get("text", "")
    source_code = request.form.get("sourceLanguage", "")
    target_code = request.form.get("targetLanguage", "")
    if not text or not source_code or not target_code:
        return json_error(
            "missing_fields", "Text, source language, or target language not provided", 400
        )

    try:
        source = resolve_language(source_code)
        target = resolve_language(target_code)
    except LanguageError as exc:
        return json_error("invalid_language", str(exc), 400)

    try:
        translated = translate(text, target, source)
    except Exception as exc:
        LOGGER.exception("Translation call failed")
        return json_error("translation_failed", f"Translation error: {exc}", 502)

    return jsonify({"translatedText": translated})


@ROUTES.post("/synthesize")
def synthesize_route() -> Response:
    text = request.form.get("text", "")
    language_code = request.form.get("language", "")
    if not text or not language_code:
        return json_error("missing_fields", "Text or language not provided", 400)

    try:
        language = resolve_language(language_code)
    except LanguageError as exc:
        return json_error("invalid_language", str(exc), 400)

    result = _synthesize_to_store(text, language)
    if isinstance(result, tuple):
        return result

    response = jsonify({"audioPath": result})
    response.headers.update(NO_CACHE_HEADERS)
    return response


@ROUTES.get("/static/<path:filename>")
def audio_file(filename: str) -> Response:
    response = send_from_directory(current_app.config["TRANSPEAK_AUDIO_DIR"], filename)
    response.headers.update(NO_CACHE_HEADERS)
    return response


@API.get("/health")
def health() -> Response:
    return jsonify({"ok": True})


@API.get("/languages")
def languages() -> Response:
    return jsonify({"languages": language_options()})


def _speak_translation() -> Response:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return json_error("missing_fields", "Expected a JSON object with text and lang", 400)
    text = str(payload.get("text") or "")
    lang_code = str(payload.get("lang") or "")
    if not text or not lang_code:
        return json_error("missing_fields", "Text or language not provided", 400)

    try:
        language = resolve_language(lang_code)
    except LanguageError as exc:
        return json_error("invalid_language", str(exc), 400)

    try:
        translated = translate(text, language)
    except Exception as exc:
        LOGGER.exception("Translation call failed before speaking")
        return json_error("translation_failed", f"Translation error: {exc}", 502)

    result = _synthesize_to_store(translated, language)
    if isinstance(result, tuple):
        return result

    response = jsonify({"audioUrl": result, "translatedText": translated})
    response.headers.update(NO_CACHE_HEADERS)
    return response


def _synthesize_to_store(text: str, language: str) -> str | tuple[Response, int]:
    voice = current_settings().voice
    try:
        audio = synthesize_speech(text, language, voice)
    except ValueError as exc:
        return json_error("invalid_text", str(exc), 400)
    except Exception as exc:
        LOGGER.exception("TTS call failed")
        return json_error("tts_failed", f"Synthesize error: {exc}", 502)

    store: AudioStore = current_app.extensions["transpeak_audio"]
    try:
        audio_path = store.save(audio)
    except OSError as exc:
        LOGGER.exception("Failed to write synthesized audio")
        return json_error("write_failed", f"Write file error: {exc}", 500)

    LOGGER.info("Synthesized %d bytes of %s audio at %s", len(audio), language, audio_path)
    return audio_path


def current_settings() -> Settings:
    settings = current_app.config.get("TRANSPEAK_SETTINGS")
    if isinstance(settings, Settings):
        return settings
    settings = load_settings()
    current_app.config["TRANSPEAK_SETTINGS"] = settings
    return settings


def json_error(code: str, message: str, status: int) -> tuple[Response, int]:
    payload = {"error": {"code": code, "message": message}}
    return jsonify(payload), status


def main(host: str = "0.0.0.0", port: int = 8080) -> int:
    app = create_app()
    LOGGER.info("Server started at http://localhost:%d", port)
    app.run(host=host, port=port)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution
    logging.basicConfig(level=logging.INFO)
    raise SystemExit(main())
