"""
Trip event scheduling core.

Tagged-variant trip events, their validation, the transitions between the
unscheduled, all-day and timed states, conflict detection and date range
formatting.
"""

from .models import (
    EventKind, ErrorKind, UnscheduledEvent, AllDayEvent, TimedEvent, TripEvent,
    ValidationError, Trip, event_to_dict, event_from_dict,
)
from .core.exceptions import EventValidationError
from .core.validation import validate_event, find_violations, is_valid
from .core.scheduling import (
    create_event, schedule_as_all_day, schedule_as_timed,
    convert_to_timed, convert_to_all_day, unschedule_event,
)
from .core.conflicts import has_scheduling_conflict, find_conflicts, conflicts_with
from .core.formatting import DisplayOptions, get_event_date_range

__version__ = "0.1.0"

__all__ = [
    "EventKind",
    "ErrorKind",
    "UnscheduledEvent",
    "AllDayEvent",
    "TimedEvent",
    "TripEvent",
    "ValidationError",
    "Trip",
    "event_to_dict",
    "event_from_dict",
    "EventValidationError",
    "validate_event",
    "find_violations",
    "is_valid",
    "create_event",
    "schedule_as_all_day",
    "schedule_as_timed",
    "convert_to_timed",
    "convert_to_all_day",
    "unschedule_event",
    "has_scheduling_conflict",
    "find_conflicts",
    "conflicts_with",
    "DisplayOptions",
    "get_event_date_range",
]
