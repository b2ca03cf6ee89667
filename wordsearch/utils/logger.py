"""Logging setup for the solver and its command-line front end."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DEFAULT_LEVEL = logging.WARNING


def level_from_name(name: Optional[str], default: int = DEFAULT_LEVEL) -> int:
    """Map a ``--log-level`` value such as ``"debug"`` to a logging level.

    Unknown names fall back to ``default`` rather than failing the run.
    """

    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = DEFAULT_LEVEL) -> None:
    """Send all records to stderr in a single-line format.

    Each search logs one DEBUG line per direction tried, so anything below
    WARNING gets verbose on long word lists.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``wordsearch`` namespace."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")
