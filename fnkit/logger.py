"""Logger configuration for the fnkit package."""

import logging
import sys

from fnkit.config import FNKIT_LOG_LEVEL

__all__ = ["logger", "setup_logger"]


def _level_number(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logger(
    name: str = "fnkit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Records propagate to the application's handlers. Without a
    ``format_string`` only a ``NullHandler`` is attached; with one, a stderr
    handler using that format is attached instead.

    Args:
        name: Logger name (``fnkit`` or a dotted child of it)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown
            names fall back to WARNING
        format_string: Format for a dedicated stderr handler

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(_level_number(level or FNKIT_LOG_LEVEL))

    # Only configure if not already configured
    own = (logging.NullHandler, logging.StreamHandler)
    if not any(type(h) in own for h in logger.handlers):
        if format_string:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
            handler.setFormatter(formatter)
        else:
            handler = logging.NullHandler()
        logger.addHandler(handler)

    return logger


# Default logger shared by every fnkit module
logger = setup_logger()
