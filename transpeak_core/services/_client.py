"""Cached OpenAI client used by the translation and speech services."""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from openai import OpenAI

from ..config import load_settings

LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_openai_client() -> OpenAI:
    """Build the process-wide OpenAI client.

    The key comes from ``OPENAI_API_KEY``; the request timeout and an optional
    OpenAI-compatible endpoint come from :class:`~transpeak_core.config.Settings`.
    """

    load_dotenv()
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise RuntimeError("OPENAI_API_KEY is not configured")

    settings = load_settings()
    kwargs: dict[str, object] = {"api_key": api_key, "timeout": settings.request_timeout}
    if settings.openai_base_url:
        kwargs["base_url"] = settings.openai_base_url
    LOGGER.debug(
        "Creating OpenAI client (base_url=%s, timeout=%.1fs)",
        settings.openai_base_url or "default",
        settings.request_timeout,
    )
    return OpenAI(**kwargs)


__all__ = ["get_openai_client"]
