"""Logging configuration for the path tracer."""

import logging
from typing import Optional

from config import LOG_LEVEL, LOG_FORMAT

HANDLER_NAME = "pathtracer-console"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger with a single console handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to config.LOG_LEVEL.

    Returns:
        The configured root logger.
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(numeric_level)

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler.set_name(HANDLER_NAME)
    logger.addHandler(console_handler)

    return logger
