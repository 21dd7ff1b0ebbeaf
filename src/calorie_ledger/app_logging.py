"""Logging configuration helpers."""

import logging


def configure_logging(level: str = "INFO") -> None:
    """Configure the ``calorie_ledger`` logger with a single stream handler.

    The level is applied on every call so a rebuilt app picks up new settings.
    Unknown level names fall back to INFO.
    """
    logger = logging.getLogger("calorie_ledger")
    resolved = logging.getLevelName(level.upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
