"""Configuration helpers shared by the backend and the web page."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import json
import logging
import os
from typing import Any, Mapping

LOGGER = logging.getLogger(__name__)

CONFIG_DIR = Path(os.environ.get("TRANSPEAK_HOME", Path.home() / ".transpeak"))
SETTINGS_PATH = CONFIG_DIR / "settings.json"

DEFAULT_BACKEND_URL = "http://127.0.0.1:8080"
DEFAULT_TIMEOUT = 30.0


@dataclass(slots=True)
class Settings:
    """Runtime configuration for the translate-and-speak workflow."""

    backend_url: str = DEFAULT_BACKEND_URL
    default_source_language: str = "en"
    default_target_language: str = "id"
    voice: str = "nova"
    autoplay: bool = False
    request_timeout: float = DEFAULT_TIMEOUT
    openai_base_url: str | None = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Settings":
        """Create :class:`Settings` from any mapping, accepting camelCase keys."""
        return cls(
            backend_url=str(payload.get("backend_url", payload.get("backendUrl", DEFAULT_BACKEND_URL)))
            or DEFAULT_BACKEND_URL,
            default_source_language=str(
                payload.get("default_source_language", payload.get("sourceLanguage", "en"))
            )
            or "en",
            default_target_language=str(
                payload.get("default_target_language", payload.get("targetLanguage", "id"))
            )
            or "id",
            voice=str(payload.get("voice", "nova")) or "nova",
            autoplay=_coerce_bool(payload.get("autoplay", False)),
            request_timeout=_coerce_timeout(payload.get("request_timeout", DEFAULT_TIMEOUT)),
            openai_base_url=str(payload.get("openai_base_url") or "") or None,
        )

    def to_mapping(self) -> dict[str, Any]:
        """Serialize to a mapping suitable for JSON dumps."""
        return asdict(self)


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""

    settings_path = path or SETTINGS_PATH
    try:
        raw = settings_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        LOGGER.debug("No settings.json found at %s; using defaults", settings_path)
        return Settings()
    except OSError as exc:  # pragma: no cover - filesystem failure
        LOGGER.warning("Failed reading settings at %s: %s", settings_path, exc)
        return Settings()

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        LOGGER.warning("Invalid JSON in %s: %s", settings_path, exc)
        return Settings()
    if not isinstance(payload, dict):
        LOGGER.warning("Ignoring settings at %s: expected an object", settings_path)
        return Settings()

    return Settings.from_mapping(payload)


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Persist settings to disk in JSON format."""

    settings_path = path or SETTINGS_PATH
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(settings.to_mapping(), indent=2, sort_keys=True)
    settings_path.write_text(payload, encoding="utf-8")
    LOGGER.debug("Saved settings to %s", settings_path)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _coerce_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


__all__ = [
    "Settings",
    "load_settings",
    "save_settings",
    "CONFIG_DIR",
    "SETTINGS_PATH",
]
