"""Where synthesized audio is written and how the browser finds it."""

from __future__ import annotations

import logging
import time
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class AudioStore:
    """Writes MP3 payloads as ``output_<nanoseconds>.mp3`` under *directory*.

    Each file gets a fresh name so browsers never replay a cached clip. Only
    the newest *keep* clips are kept; ``keep=0`` disables pruning.
    """

    def __init__(self, directory: Path, url_prefix: str = "/static", keep: int = 50) -> None:
        self.directory = Path(directory)
        self.url_prefix = "/" + url_prefix.strip("/")
        self.keep = max(keep, 0)

    def save(self, audio: bytes) -> str:
        """Persist *audio* and return its URL path."""

        self.directory.mkdir(parents=True, exist_ok=True)
        stamp = time.time_ns()
        path = self.directory / f"output_{stamp}.mp3"
        while path.exists():
            stamp += 1
            path = self.directory / f"output_{stamp}.mp3"
        path.write_bytes(audio)
        LOGGER.debug("Wrote %d bytes of audio to %s", len(audio), path)
        self.prune()
        return f"{self.url_prefix}/{path.name}"

    def prune(self) -> int:
        """Delete the oldest clips beyond ``keep``; return how many were removed."""

        if not self.keep:
            return 0
        clips = sorted(self.directory.glob("output_*.mp3"), key=_stamp)
        removed = 0
        for old in clips[: -self.keep]:
            try:
                old.unlink(missing_ok=True)
                removed += 1
            except OSError:  # pragma: no cover - best effort cleanup
                LOGGER.warning("Failed to remove old audio file: %s", old)
        if removed:
            LOGGER.debug("Pruned %d old audio files from %s", removed, self.directory)
        return removed


def _stamp(path: Path) -> int:
    try:
        return int(path.stem.split("_", 1)[1])
    except (IndexError, ValueError):
        return 0


__all__ = ["AudioStore"]
