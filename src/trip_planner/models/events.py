# File: src/trip_planner/models/events.py
"""
Trip event variants.

A trip event is exactly one of three shapes, discriminated by ``kind``.
Each shape is its own frozen dataclass carrying only the fields that are
meaningful for it, so a value can never hold stale scheduling data from a
previous state.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import ClassVar, Dict, Optional, Type, Union

from .enums import EventKind


@dataclass(frozen=True, kw_only=True)
class BaseEvent:
    """Fields shared by every trip event."""
    id: str
    trip_id: str
    title: str
    created_at: datetime
    updated_at: datetime
    notes: Optional[str] = None

    kind: ClassVar[EventKind]

    @property
    def is_scheduled(self) -> bool:
        return self.kind is not EventKind.UNSCHEDULED

    def base_fields(self) -> dict:
        """Identity and content fields carried across every transition."""
        return {
            'id': self.id,
            'trip_id': self.trip_id,
            'title': self.title,
            'notes': self.notes,
            'created_at': self.created_at,
        }


@dataclass(frozen=True, kw_only=True)
class UnscheduledEvent(BaseEvent):
    """Event sitting in the backlog without any time constraints."""
    kind: ClassVar[EventKind] = EventKind.UNSCHEDULED


@dataclass(frozen=True, kw_only=True)
class AllDayEvent(BaseEvent):
    """Event occupying one or more whole days."""
    start_date: date
    end_date: Optional[date] = None

    kind: ClassVar[EventKind] = EventKind.ALL_DAY

    @property
    def resolved_end_date(self) -> date:
        """Last day of the event; a missing end date means a single day."""
        return self.end_date if self.end_date is not None else self.start_date

    @property
    def is_single_day(self) -> bool:
        return self.resolved_end_date == self.start_date

    def day_count(self) -> int:
        """Number of calendar days covered, inclusive."""
        return (self.resolved_end_date - self.start_date).days + 1


@dataclass(frozen=True, kw_only=True)
class TimedEvent(BaseEvent):
    """Event with precise start and end instants."""
    start_datetime: datetime
    end_datetime: datetime

    kind: ClassVar[EventKind] = EventKind.TIMED

    @property
    def duration(self) -> timedelta:
        return self.end_datetime - self.start_datetime

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return int(self.duration.total_seconds() / 60)


TripEvent = Union[UnscheduledEvent, AllDayEvent, TimedEvent]

EVENT_CLASSES: Dict[EventKind, Type[BaseEvent]] = {
    EventKind.UNSCHEDULED: UnscheduledEvent,
    EventKind.ALL_DAY: AllDayEvent,
    EventKind.TIMED: TimedEvent,
}
