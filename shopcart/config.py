"""
Environment-driven settings.

Values are read from the process environment; a local `.env` file is loaded
once on import without overriding variables that are already set.
"""
import logging
import os

from dotenv import load_dotenv

load_dotenv(override=False)


def get_log_level() -> int:
    """Get log level from LOG_LEVEL or default to INFO."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def is_production() -> bool:
    """True when running with SHOPCART_ENV=production."""
    return os.environ.get("SHOPCART_ENV", "").lower() == "production"


__all__ = ["get_log_level", "is_production"]
