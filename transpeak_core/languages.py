# Part of transpeak: Translating text and reading it aloud | Copyright (c) 2025 | License: MIT
"""Languages accepted by the translate and synthesize endpoints."""

from __future__ import annotations

from typing import Final

BASE_LANGUAGES: Final[dict[str, str]] = {
    "id": "Indonesian",
    "en": "English",
    "ja": "Japanese",
    "zh": "Chinese",
    "ar": "Arabic",
    "fr": "French",
    "es": "Spanish",
    "de": "German",
    "ru": "Russian",
    "ko": "Korean",
    "it": "Italian",
    "pt": "Portuguese",
    "nl": "Dutch",
    "sv": "Swedish",
    "no": "Norwegian",
    "da": "Danish",
    "fi": "Finnish",
    "cs": "Czech",
    "tr": "Turkish",
    "he": "Hebrew",
    "el": "Greek",
    "hi": "Hindi",
    "th": "Thai",
    "vi": "Vietnamese",
}

# Polish is only offered as a regional tag.
REGIONAL_LANGUAGES: Final[dict[str, str]] = {
    "id-ID": "Indonesian (Indonesia)",
    "en-US": "English (United States)",
    "ja-JP": "Japanese (Japan)",
    "zh-CN": "Chinese (Mainland China)",
    "ar-XA": "Arabic",
    "fr-FR": "French (France)",
    "es-ES": "Spanish (Spain)",
    "de-DE": "German (Germany)",
    "ru-RU": "Russian (Russia)",
    "ko-KR": "Korean (South Korea)",
    "it-IT": "Italian (Italy)",
    "pt-BR": "Portuguese (Brazil)",
    "nl-NL": "Dutch (Netherlands)",
    "sv-SE": "Swedish (Sweden)",
    "no-NO": "Norwegian (Norway)",
    "da-DK": "Danish (Denmark)",
    "fi-FI": "Finnish (Finland)",
    "pl-PL": "Polish (Poland)",
    "cs-CZ": "Czech (Czech Republic)",
    "tr-TR": "Turkish (Turkey)",
    "he-IL": "Hebrew (Israel)",
    "el-GR": "Greek (Greece)",
    "hi-IN": "Hindi (India)",
    "th-TH": "Thai (Thailand)",
    "vi-VN": "Vietnamese (Vietnam)",
}

SUPPORTED_LANGUAGES: Final[dict[str, str]] = {**BASE_LANGUAGES, **REGIONAL_LANGUAGES}


class LanguageError(ValueError):
    """Raised when a language code is not one of the supported tags."""


def resolve_language(code: str | None) -> str:
    """Return the canonical tag for *code* or raise :class:`LanguageError`."""

    value = (code or "").strip()
    if value not in SUPPORTED_LANGUAGES:
        raise LanguageError(f"Unsupported language: {value or '<empty>'}")
    return value


def language_name(code: str) -> str:
    return SUPPORTED_LANGUAGES[resolve_language(code)]


def language_options() -> list[dict[str, str]]:
    return [{"code": code, "name": name} for code, name in SUPPORTED_LANGUAGES.items()]


__all__ = [
    "BASE_LANGUAGES",
    "REGIONAL_LANGUAGES",
    "SUPPORTED_LANGUAGES",
    "LanguageError",
    "resolve_language",
    "language_name",
    "language_options",
]
