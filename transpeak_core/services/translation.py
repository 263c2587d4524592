"""Translation helper functions."""

from __future__ import annotations

import logging
from typing import Final

from ..languages import language_name
from ._client import get_openai_client
from .text_utils import clean_translation

LOGGER = logging.getLogger(__name__)

TRANSLATE_MODEL: Final[str] = "gpt-4o-mini"
CHAT_PROMPT_TEMPLATE: Final[str] = (
    "Translate the following text from {source} to {target}. "
    "Keep the line breaks of the original. "
    "Return only the translated text.\n\n{text}"
)
AUTO_SOURCE: Final[str] = "the language it is written in"


def translate(text: str, target_lang: str, source_lang: str | None = None) -> str:
    """Translate *text* into *target_lang* using the OpenAI chat endpoint.

    Both language codes must be supported tags; a missing *source_lang* lets
    the model detect it.
    """

    target = language_name(target_lang)
    source = language_name(source_lang) if source_lang else AUTO_SOURCE
    LOGGER.info("Translating text from %s to %s", source_lang or "auto", target_lang)
    if not text.strip():
        return ""

    client = get_openai_client()
    prompt = CHAT_PROMPT_TEMPLATE.format(source=source, target=target, text=text)
    response = client.chat.completions.create(
        model=TRANSLATE_MODEL,
        messages=[{"role": "user", "content": prompt}],
    )
    choice = response.choices[0]
    content = getattr(choice.message, "content", None) or ""
    LOGGER.debug("Received translation response (%d chars)", len(content))
    return clean_translation(content)


__all__ = ["translate"]
