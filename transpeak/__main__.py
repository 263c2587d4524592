"""Entry point for the translation backend."""

import logging

from .backend.app import main


def run() -> int:
    logging.basicConfig(level=logging.INFO)
    return main()


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(run())
