"""Package logger shared by the helpers and the CLI."""

from __future__ import annotations
import logging
from typing import Optional

LOGGER_NAME = "vod_downloader"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(message)s"

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Return the ``vod_downloader`` logger, attaching its handler once."""
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger(LOGGER_NAME)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        _LOGGER = logger
    return _LOGGER


def set_log_level(verbose: bool) -> logging.Logger:
    # DEBUG surfaces spawn/exit traces and swallowed JSON errors
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


__all__ = ["get_logger", "set_log_level", "LOGGER_NAME"]
