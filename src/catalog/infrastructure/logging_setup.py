"""Process-wide logging configuration."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send catalog logs to stderr; third-party loggers stay at WARNING.

    An unknown level name falls back to INFO.
    """
    logging.basicConfig(format=LOG_FORMAT, level=logging.WARNING)
    value = logging.getLevelName(level.strip().upper())
    logging.getLogger("catalog").setLevel(value if isinstance(value, int) else logging.INFO)
