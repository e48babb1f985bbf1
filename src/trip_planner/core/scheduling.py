# File: src/trip_planner/core/scheduling.py
"""
Event scheduling transitions.

Pure functions moving an event between the unscheduled, all-day and timed
states. Each builds a fresh value through the target variant's constructor,
stamps ``updated_at`` and re-validates before returning. The input event is
never modified; a failed transition raises EventValidationError.

    unscheduled --schedule_as_all_day--> allDay
    unscheduled --schedule_as_timed-->   timed
    allDay      --convert_to_timed-->    timed
    timed       --convert_to_all_day-->  allDay
    allDay      --unschedule_event-->    unscheduled
    timed       --unschedule_event-->    unscheduled

Calling a transition on an event already in its target state re-enters
that state with the new data.
"""

from datetime import date, datetime
from typing import Optional, Tuple, Type

from trip_planner.core.exceptions import EventValidationError, invalid_kind
from trip_planner.core.validation import validate_event
from trip_planner.models.common import parse_iso_date, parse_iso_datetime, utcnow
from trip_planner.models.events import (
    AllDayEvent, BaseEvent, TimedEvent, TripEvent, UnscheduledEvent,
)
from trip_planner.utils.logger import setup_logger

logger = setup_logger(__name__)

# Which transition to suggest when the source kind is wrong
_ALTERNATIVES = {
    ('schedule_as_all_day', TimedEvent): 'convert_to_all_day',
    ('schedule_as_timed', AllDayEvent): 'convert_to_timed',
    ('convert_to_timed', UnscheduledEvent): 'schedule_as_timed',
    ('convert_to_all_day', UnscheduledEvent): 'schedule_as_all_day',
}


def _as_date(value):
    """Coerce ISO strings and datetimes to a date; other values are left for validation."""
    parsed = parse_iso_date(value)
    return parsed if parsed is not None or value == "" else value


def _as_datetime(value):
    parsed = parse_iso_datetime(value) if isinstance(value, str) else None
    return parsed if parsed is not None or value == "" else value


def _require_kind(event: BaseEvent, transition: str, accepted: Tuple[Type[BaseEvent], ...]) -> None:
    if isinstance(event, accepted):
        return
    kind = getattr(event, 'kind', None)
    kind_name = kind.value if kind is not None else type(event).__name__
    message = f"{transition} cannot be applied to a {kind_name} event"
    alternative = _ALTERNATIVES.get((transition, type(event)))
    if alternative:
        message += f"; use {alternative} instead"
    raise invalid_kind(message)


def _finish(candidate: TripEvent, transition: str, source: BaseEvent) -> TripEvent:
    try:
        result = validate_event(candidate)
    except EventValidationError as e:
        logger.warning(f"{transition} rejected for event {source.id}: {e.message}")
        raise
    logger.debug(f"{transition}: event {source.id} {source.kind.value} -> {result.kind.value}")
    return result


def create_event(
    id: str,
    trip_id: str,
    title: str,
    notes: Optional[str] = None,
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    start_datetime: Optional[datetime] = None,
    end_datetime: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> TripEvent:
    """
    Create a brand-new validated event.

    The variant follows the scheduling data supplied: none gives an
    unscheduled event, dates give an all-day event and instants give a
    timed event.

    Raises:
        EventValidationError: if date and instant data are mixed, or the
            resulting event breaks a rule.
    """
    start_date = _as_date(start_date)
    end_date = _as_date(end_date)
    start_datetime = _as_datetime(start_datetime)
    end_datetime = _as_datetime(end_datetime)
    now = now or utcnow()
    has_dates = start_date is not None or end_date is not None
    has_instants = start_datetime is not None or end_datetime is not None

    if has_dates and has_instants:
        raise invalid_kind("An event cannot have both all-day dates and timed instants")

    common = dict(id=id, trip_id=trip_id, title=title, notes=notes, created_at=now, updated_at=now)

    if has_instants:
        candidate = TimedEvent(start_datetime=start_datetime, end_datetime=end_datetime, **common)
    elif has_dates:
        candidate = AllDayEvent(
            start_date=start_date,
            end_date=end_date if end_date is not None else start_date,
            **common,
        )
    else:
        candidate = UnscheduledEvent(**common)

    try:
        event = validate_event(candidate)
    except EventValidationError as e:
        logger.warning(f"create_event rejected for event {id}: {e.message}")
        raise
    logger.debug(f"Created {event.kind.value} event {event.id} for trip {event.trip_id}")
    return event


def schedule_as_all_day(
    event: TripEvent,
    start_date: date,
    end_date: Optional[date] = None,
    *,
    now: Optional[datetime] = None,
) -> AllDayEvent:
    """
    Schedule an unscheduled event as an all-day event.

    Args:
        event: The unscheduled event to schedule
        start_date: First day of the event
        end_date: Last day of the event (defaults to start_date)
        now: Timestamp for updated_at (defaults to the current instant)

    Returns:
        New all-day event
    """
    _require_kind(event, 'schedule_as_all_day', (UnscheduledEvent, AllDayEvent))
    start_date = _as_date(start_date)
    end_date = _as_date(end_date)
    candidate = AllDayEvent(
        **event.base_fields(),
        updated_at=now or utcnow(),
        start_date=start_date,
        end_date=end_date if end_date is not None else start_date,
    )
    return _finish(candidate, 'schedule_as_all_day', event)


def schedule_as_timed(
    event: TripEvent,
    start_datetime: datetime,
    end_datetime: datetime,
    *,
    now: Optional[datetime] = None,
) -> TimedEvent:
    """
    Schedule an unscheduled event with specific start and end times.

    Returns:
        New timed event
    """
    _require_kind(event, 'schedule_as_timed', (UnscheduledEvent, TimedEvent))
    start_datetime = _as_datetime(start_datetime)
    end_datetime = _as_datetime(end_datetime)
    candidate = TimedEvent(
        **event.base_fields(),
        updated_at=now or utcnow(),
        start_datetime=start_datetime,
        end_datetime=end_datetime,
    )
    return _finish(candidate, 'schedule_as_timed', event)


def convert_to_timed(
    event: TripEvent,
    start_datetime: datetime,
    end_datetime: datetime,
    *,
    now: Optional[datetime] = None,
) -> TimedEvent:
    """Convert an all-day event to a timed event, dropping its dates."""
    _require_kind(event, 'convert_to_timed', (AllDayEvent, TimedEvent))
    start_datetime = _as_datetime(start_datetime)
    end_datetime = _as_datetime(end_datetime)
    candidate = TimedEvent(
        **event.base_fields(),
        updated_at=now or utcnow(),
        start_datetime=start_datetime,
        end_datetime=end_datetime,
    )
    return _finish(candidate, 'convert_to_timed', event)


def convert_to_all_day(
    event: TripEvent,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    *,
    now: Optional[datetime] = None,
) -> AllDayEvent:
    """
    Convert a timed event to an all-day event.

    Args:
        event: The timed event to convert
        start_date: First day (defaults to the calendar date of start_datetime)
        end_date: Last day (defaults to the resolved start date)
        now: Timestamp for updated_at (defaults to the current instant)

    Returns:
        New all-day event without the instant fields
    """
    _require_kind(event, 'convert_to_all_day', (TimedEvent, AllDayEvent))
    start_date = _as_date(start_date)
    end_date = _as_date(end_date)

    if start_date is None:
        # Truncate to the date as stored; no timezone conversion
        start_date = event.start_datetime.date() if isinstance(event, TimedEvent) else event.start_date

    candidate = AllDayEvent(
        **event.base_fields(),
        updated_at=now or utcnow(),
        start_date=start_date,
        end_date=end_date if end_date is not None else start_date,
    )
    return _finish(candidate, 'convert_to_all_day', event)


def unschedule_event(event: TripEvent, *, now: Optional[datetime] = None) -> UnscheduledEvent:
    """Move a scheduled event back to the backlog, discarding all scheduling fields."""
    _require_kind(event, 'unschedule_event', (AllDayEvent, TimedEvent, UnscheduledEvent))
    candidate = UnscheduledEvent(**event.base_fields(), updated_at=now or utcnow())
    return _finish(candidate, 'unschedule_event', event)
