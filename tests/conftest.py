# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable trip events and helpers for all tests.
"""

import pytest
from datetime import date, datetime
from pathlib import Path
import sys

import pytz

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from trip_planner.models import (
    UnscheduledEvent, AllDayEvent, TimedEvent, Trip
)
from trip_planner.bridge import AIEventOperations

UTC = pytz.utc


def utc(year, month, day, hour=0, minute=0):
    """Shorthand for an aware UTC datetime."""
    return datetime(year, month, day, hour, minute, tzinfo=UTC)


# ==================== Clock Fixtures ====================

@pytest.fixture
def created_at():
    """Creation instant shared by the sample events."""
    return utc(2024, 1, 1)


@pytest.fixture
def fixed_now():
    """Deterministic 'current instant' passed to transitions."""
    return utc(2024, 6, 1, 12, 0)


# ==================== Event Fixtures ====================

@pytest.fixture
def unscheduled_event(created_at):
    """Create a backlog event."""
    return UnscheduledEvent(
        id="event-1",
        trip_id="trip-1",
        title="Visit Museum",
        notes="Check opening hours",
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def all_day_event(created_at):
    """Create a three-day all-day event."""
    return AllDayEvent(
        id="event-2",
        trip_id="trip-1",
        title="Festival",
        created_at=created_at,
        updated_at=created_at,
        start_date=date(2024, 6, 15),
        end_date=date(2024, 6, 17),
    )


@pytest.fixture
def timed_event(created_at):
    """Create a morning timed event."""
    return TimedEvent(
        id="event-3",
        trip_id="trip-1",
        title="Walking Tour",
        notes="Meet at the fountain",
        created_at=created_at,
        updated_at=created_at,
        start_datetime=utc(2024, 6, 15, 9),
        end_datetime=utc(2024, 6, 15, 12),
    )


@pytest.fixture
def make_timed(created_at):
    """Factory fixture for timed events on 2024-06-15 (UTC)."""
    def _create(start_hour: int, end_hour: int, event_id: str = "timed", day: int = 15) -> TimedEvent:
        return TimedEvent(
            id=event_id,
            trip_id="trip-1",
            title=f"Block {start_hour}-{end_hour}",
            created_at=created_at,
            updated_at=created_at,
            start_datetime=utc(2024, 6, day, start_hour),
            end_datetime=utc(2024, 6, day, end_hour),
        )

    return _create


@pytest.fixture
def unscheduled_dict():
    """Wire form of a backlog event."""
    return {
        'kind': 'unscheduled',
        'id': 'event-1',
        'tripId': 'trip-1',
        'title': 'Visit Museum',
        'notes': 'Check opening hours',
        'createdAt': '2024-01-01T00:00:00Z',
        'updatedAt': '2024-01-01T00:00:00Z',
    }


@pytest.fixture
def trip(created_at):
    """Create a one-week trip in Lisbon."""
    return Trip(
        id="trip-1",
        workspace_id="ws-1",
        name="Lisbon",
        share_slug="lisbon-2024",
        created_at=created_at,
        updated_at=created_at,
        start_date=date(2024, 6, 14),
        end_date=date(2024, 6, 20),
        timezone="Europe/Lisbon",
    )


# ==================== Bridge Fixtures ====================

@pytest.fixture
def bridge():
    """Fresh domain bridge."""
    return AIEventOperations()


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
