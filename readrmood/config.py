"""Configuration management"""
import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from readrmood.exceptions import ConfigurationError

load_dotenv()

# Calendar context used for day, weekday and hour-of-day rules
DEFAULT_TIMEZONE: str = os.getenv("READRMOOD_TIMEZONE", "UTC")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# Validation
def validate_config() -> None:
    """Validate configuration values"""
    try:
        ZoneInfo(DEFAULT_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(
            f"READRMOOD_TIMEZONE is not a known timezone: {DEFAULT_TIMEZONE!r}",
            setting="READRMOOD_TIMEZONE",
            cause=e,
        )
    if not isinstance(logging.getLevelName(LOG_LEVEL.upper()), int):
        raise ConfigurationError(
            f"LOG_LEVEL is not a logging level: {LOG_LEVEL!r}",
            setting="LOG_LEVEL",
        )


def configure_logging() -> None:
    """Apply the package log format and level to the root logger"""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    )
