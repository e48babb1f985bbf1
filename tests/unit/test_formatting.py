# File: tests/unit/test_formatting.py
"""
Unit tests for date range formatting.
"""

import dataclasses
import pytest
from datetime import date, datetime

import pytz

from trip_planner.core.config_manager import Config
from trip_planner.core.formatting import DisplayOptions, get_event_date_range

UTC = pytz.utc


class TestGetEventDateRange:
    """Tests for the default rendering."""

    def test_unscheduled(self, unscheduled_event):
        """Unscheduled events always read 'Unscheduled'."""
        assert get_event_date_range(unscheduled_event) == "Unscheduled"

    def test_single_day_all_day(self, all_day_event):
        """Single-day events show only the date."""
        event = dataclasses.replace(all_day_event, end_date=None)

        assert get_event_date_range(event) == "6/15/2024"

    def test_same_start_end_is_single_day(self, all_day_event):
        """End equal to start renders like a single day."""
        event = dataclasses.replace(all_day_event, end_date=date(2024, 6, 15))

        assert get_event_date_range(event) == "6/15/2024"

    def test_multi_day_all_day(self, all_day_event):
        """Multi-day events show both ends."""
        assert get_event_date_range(all_day_event) == "6/15/2024 - 6/17/2024"

    def test_timed_same_day(self, timed_event):
        """Same-day timed events show the date once."""
        assert get_event_date_range(timed_event) == "6/15/2024, 9:00:00 AM - 12:00:00 PM"

    def test_timed_spanning_days(self, timed_event):
        """Overnight events show date and time on both sides."""
        event = dataclasses.replace(
            timed_event,
            start_datetime=datetime(2024, 6, 15, 22, 0, tzinfo=UTC),
            end_datetime=datetime(2024, 6, 16, 1, 30, tzinfo=UTC),
        )

        assert get_event_date_range(event) == "6/15/2024 10:00:00 PM - 6/16/2024 1:30:00 AM"

    def test_midnight_and_noon(self, timed_event):
        """12-hour clock edge cases."""
        event = dataclasses.replace(
            timed_event,
            start_datetime=datetime(2024, 6, 15, 0, 0, tzinfo=UTC),
            end_datetime=datetime(2024, 6, 15, 12, 0, tzinfo=UTC),
        )

        assert get_event_date_range(event) == "6/15/2024, 12:00:00 AM - 12:00:00 PM"

    def test_unknown_input(self):
        """Anything that is not an event falls back to 'Unknown'."""
        assert get_event_date_range(object()) == "Unknown"

    def test_deterministic(self, timed_event):
        """Same input and options give the same string."""
        options = DisplayOptions(timezone="Asia/Tokyo")

        assert get_event_date_range(timed_event, options) == get_event_date_range(timed_event, options)


class TestDisplayOptions:
    """Tests for timezone and format options."""

    def test_timezone_conversion(self, timed_event):
        """Aware instants are shown in the requested zone."""
        options = DisplayOptions(timezone="America/New_York")

        # 09:00-12:00 UTC is 05:00-08:00 EDT
        assert get_event_date_range(timed_event, options) == "6/15/2024, 5:00:00 AM - 8:00:00 AM"

    def test_timezone_can_split_days(self, timed_event):
        """Conversion decides whether the range crosses midnight."""
        options = DisplayOptions(timezone="Pacific/Auckland")

        # 09:00 UTC is 21:00 NZST; 12:00 UTC is 00:00 the next day
        assert get_event_date_range(timed_event, options) == "6/15/2024 9:00:00 PM - 6/16/2024 12:00:00 AM"

    def test_naive_instants_not_converted(self, timed_event):
        """Naive instants are rendered as given."""
        event = dataclasses.replace(
            timed_event,
            start_datetime=datetime(2024, 6, 15, 9, 0),
            end_datetime=datetime(2024, 6, 15, 10, 0),
        )
        options = DisplayOptions(timezone="Asia/Tokyo")

        assert get_event_date_range(event, options) == "6/15/2024, 9:00:00 AM - 10:00:00 AM"

    def test_custom_formats(self, timed_event, all_day_event):
        """strftime patterns override the default rendering."""
        options = DisplayOptions(date_format="%Y-%m-%d", time_format="%H:%M")

        assert get_event_date_range(timed_event, options) == "2024-06-15, 09:00 - 12:00"
        assert get_event_date_range(all_day_event, options) == "2024-06-15 - 2024-06-17"

    def test_unknown_timezone_rejected(self):
        """Bad timezones fail when building options, not when formatting."""
        with pytest.raises(ValueError, match="Unknown timezone"):
            DisplayOptions(timezone="Nowhere/City")

    def test_for_trip(self, trip, timed_event):
        """Trip options use the trip's timezone."""
        options = DisplayOptions.for_trip(trip)

        assert options.timezone == "Europe/Lisbon"
        assert get_event_date_range(timed_event, options) == "6/15/2024, 10:00:00 AM - 1:00:00 PM"

    def test_from_config(self, monkeypatch):
        """Config values feed the default options."""
        monkeypatch.setattr(Config, "DISPLAY_TIMEZONE", "Europe/Paris")
        monkeypatch.setattr(Config, "DATE_FORMAT", "%d.%m.%Y")

        options = DisplayOptions.from_config()

        assert options.timezone == "Europe/Paris"
        assert options.date_format == "%d.%m.%Y"
