"""Package logging: one stderr handler on the root logger, ``wordsearch.*`` names."""

from __future__ import annotations

import logging
from typing import IO, Optional

PACKAGE_LOGGER = "wordsearch"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Replace root handlers with a single handler writing to ``stream``.

    ``stream`` defaults to stderr, which keeps stdout free for the JSON
    puzzle printed by ``main.py``. At DEBUG the generator reports each
    placed, skipped or dropped word; at INFO only one line per puzzle.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name`` (``wordsearch`` by default); installs the handler on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or PACKAGE_LOGGER)
