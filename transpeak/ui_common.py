"""Shared UI constants for the web page."""

from __future__ import annotations

from typing import Mapping

from transpeak_core.languages import SUPPORTED_LANGUAGES

LANGUAGE_OPTIONS: Mapping[str, str] = {
    code: f"{name} ({code})" for code, name in SUPPORTED_LANGUAGES.items()
}

__all__ = ["LANGUAGE_OPTIONS"]
