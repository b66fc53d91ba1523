"""
Centralized logging configuration for shopcart.

Usage:
    from shopcart.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Cart created")
    logger.warning("Rejected item", exc_info=True)
"""

import logging
import sys
from functools import cache

from shopcart.config import get_log_level, is_production

# Default format for logs
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _configure_root_logger() -> None:
    """Configure root logger with a stdout handler."""
    root = logging.getLogger()

    # Only configure if no handlers exist
    if root.handlers:
        return

    level = get_log_level()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if is_production() else LOG_FORMAT))

    root.addHandler(handler)


# Configure once on module import
_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


# Control characters that could forge log lines (CWE-117)
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def sanitize_string_for_logging(value: str | None, max_length: int = 50, ellipsis: str = "...") -> str:
    """Escape control characters and cut `value` to `max_length`; "N/A" if empty."""
    if not value:
        return "N/A"
    safe_value = str(value).translate(_LOG_ESCAPES)
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + ellipsis


def sanitize_id_for_logging(id_value: str | None) -> str:
    """Customer ids are logged by their first 8 chars only."""
    return sanitize_string_for_logging(id_value, max_length=8, ellipsis="")


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
