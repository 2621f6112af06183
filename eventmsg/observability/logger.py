"""Structured logging for messaging events (publish, subscribe, deliver)."""

import logging
import sys
from typing import Optional

from eventmsg.config import get_settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a logger with a stdout handler; level defaults to the configured log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
            )
        )
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else get_settings().log_level_number)
    return logger
