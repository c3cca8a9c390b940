"""Logging configuration helpers."""

import logging


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("finite")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
