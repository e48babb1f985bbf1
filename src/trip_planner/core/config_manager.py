# File: src/trip_planner/core/config_manager.py
"""
Centralized configuration management for the trip planner core.
Loads settings from environment variables and an optional .env file.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import pytz
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on', 'y', 't')


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent.parent  # Up from src/trip_planner/core/
    LOGS_DIR = Path(os.getenv("TRIP_PLANNER_LOGS_DIR", str(BASE_DIR / "logs")))

    # Display defaults (None means: leave to the caller / built-in rendering)
    DISPLAY_TIMEZONE: Optional[str] = os.getenv("TRIP_PLANNER_TIMEZONE") or None
    DATE_FORMAT: Optional[str] = os.getenv("TRIP_PLANNER_DATE_FORMAT") or None
    TIME_FORMAT: Optional[str] = os.getenv("TRIP_PLANNER_TIME_FORMAT") or None

    # Logging
    LOG_LEVEL = os.getenv("TRIP_PLANNER_LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = _env_flag("TRIP_PLANNER_LOG_TO_FILE")

    # Field limits
    TITLE_MAX_LENGTH = 100
    NOTES_MAX_LENGTH = 2000
    TRIP_NAME_MAX_LENGTH = 100
    TRIP_DESCRIPTION_MAX_LENGTH = 1000
    DEFAULT_TRIP_TIMEZONE = "UTC"

    @classmethod
    def log_level(cls) -> int:
        """Numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def validate(cls) -> bool:
        """Validate that configured values are usable."""
        errors: List[str] = []

        if cls.DISPLAY_TIMEZONE and cls.DISPLAY_TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone in TRIP_PLANNER_TIMEZONE: {cls.DISPLAY_TIMEZONE}")

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            errors.append(f"Unknown log level in TRIP_PLANNER_LOG_LEVEL: {cls.LOG_LEVEL}")

        if errors:
            logger = logging.getLogger(__name__)
            for error in errors:
                logger.error("Configuration Error: %s", error)
            return False

        return True
