# File: src/trip_planner/core/formatting.py
"""
Human-readable date range rendering for trip events.

Output depends only on the event and the DisplayOptions passed in. The
formatter never picks a timezone on its own: aware instants are shifted
only when the caller names one, naive instants are rendered as given.
"""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional

import pytz

from trip_planner.core.config_manager import Config
from trip_planner.models.events import AllDayEvent, TimedEvent, UnscheduledEvent

UNSCHEDULED_LABEL = "Unscheduled"
UNKNOWN_LABEL = "Unknown"


@dataclass(frozen=True)
class DisplayOptions:
    """Presentation settings for range formatting.

    timezone: IANA name; aware instants are converted to it before display.
    date_format / time_format: strftime patterns. When unset, dates render
    as ``6/15/2024`` and times as ``9:00:00 AM``.
    """
    timezone: Optional[str] = None
    date_format: Optional[str] = None
    time_format: Optional[str] = None

    def __post_init__(self):
        """Reject unknown timezones up front so formatting itself cannot fail."""
        if self.timezone is not None and self.timezone not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {self.timezone}")

    @property
    def tzinfo(self) -> Optional[tzinfo]:
        return pytz.timezone(self.timezone) if self.timezone else None

    @classmethod
    def from_config(cls) -> 'DisplayOptions':
        return cls(
            timezone=Config.DISPLAY_TIMEZONE,
            date_format=Config.DATE_FORMAT,
            time_format=Config.TIME_FORMAT,
        )

    @classmethod
    def for_trip(cls, trip) -> 'DisplayOptions':
        """Options showing times in the trip's own timezone."""
        return cls(
            timezone=trip.timezone or None,
            date_format=Config.DATE_FORMAT,
            time_format=Config.TIME_FORMAT,
        )

    def localize(self, value: datetime) -> datetime:
        tz = self.tzinfo
        if tz is None or value.tzinfo is None:
            return value
        return value.astimezone(tz)

    def format_date(self, value: date) -> str:
        if self.date_format:
            return value.strftime(self.date_format)
        return f"{value.month}/{value.day}/{value.year}"

    def format_time(self, value: datetime) -> str:
        if self.time_format:
            return value.strftime(self.time_format)
        hour = value.hour % 12 or 12
        suffix = "AM" if value.hour < 12 else "PM"
        return f"{hour}:{value.minute:02d}:{value.second:02d} {suffix}"


def get_event_date_range(event, options: Optional[DisplayOptions] = None) -> str:
    """
    Get the display date range for any event type.

    Args:
        event: The event to describe
        options: Timezone and format settings (defaults to built-in rendering)

    Returns:
        Human-readable date range string
    """
    options = options or DisplayOptions()

    if isinstance(event, UnscheduledEvent):
        return UNSCHEDULED_LABEL

    if isinstance(event, AllDayEvent):
        start = options.format_date(event.start_date)
        if event.is_single_day:
            return start
        return f"{start} - {options.format_date(event.end_date)}"

    if isinstance(event, TimedEvent):
        start = options.localize(event.start_datetime)
        end = options.localize(event.end_datetime)
        start_date = options.format_date(start)
        end_date = options.format_date(end)

        if start.date() == end.date():
            return f"{start_date}, {options.format_time(start)} - {options.format_time(end)}"
        return f"{start_date} {options.format_time(start)} - {end_date} {options.format_time(end)}"

    return UNKNOWN_LABEL
