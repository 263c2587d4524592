"""Clean-up for text coming back from the translation model."""

from __future__ import annotations

import re

_LINE_SPLIT = re.compile(r"\n\s*\n")
_SPACES = re.compile(r"[ \t]+")
_QUOTE_PAIRS = {'"': '"', "'": "'", "“": "”", "«": "»", "「": "」"}


def clean_translation(text: str) -> str:
    """Trim the reply, drop wrapping quotes and collapse runs of spaces."""

    stripped = _strip_wrapping_quotes(text.strip())
    if not stripped:
        return ""
    blocks = []
    for block in _LINE_SPLIT.split(stripped):
        lines = [_SPACES.sub(" ", line).strip() for line in block.splitlines()]
        joined = "\n".join(line for line in lines if line)
        if joined:
            blocks.append(joined)
    return "\n\n".join(blocks)


def _strip_wrapping_quotes(text: str) -> str:
    if len(text) >= 2 and _QUOTE_PAIRS.get(text[0]) == text[-1]:
        inner = text[1:-1]
        # Keep quotes that belong to the sentence, e.g. '"a" and "b"'.
        if text[0] not in inner and text[-1] not in inner:
            return inner.strip()
    return text


__all__ = ["clean_translation"]
