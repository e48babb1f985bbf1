# File: src/trip_planner/models/common.py

from datetime import date, datetime
from typing import Optional, Union

import pytz

DateLike = Union[str, date, None]
DateTimeLike = Union[str, datetime, None]


def utcnow() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(pytz.utc)


def parse_iso_datetime(value: DateTimeLike) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    try:
        # fromisoformat only learned the 'Z' suffix in 3.11
        clean_str = value.replace('Z', '+00:00')
        return datetime.fromisoformat(clean_str)
    except ValueError:
        # Fallback for simple date strings without time
        try:
            return datetime.strptime(value, "%Y-%m-%d")
        except ValueError:
            return None


def parse_iso_date(value: DateLike) -> Optional[date]:
    """Parse a calendar date, truncating any time-of-day component."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        parsed = parse_iso_datetime(value)
        return parsed.date() if parsed else None


def format_iso(value: Union[date, datetime, None]) -> Optional[str]:
    return value.isoformat() if value is not None else None
