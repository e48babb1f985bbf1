# File: src/trip_planner/core/validation.py
"""
Validation engine for trip events.

Enforces the rules the dataclasses alone cannot express: required fields,
title/notes length limits and start/end ordering. Accepts either a
constructed event or its wire dictionary.
"""

from datetime import date, datetime
from typing import Any, List, Mapping, Optional, Union

from trip_planner.core.config_manager import Config
from trip_planner.core.exceptions import EventValidationError
from trip_planner.models.api import ValidationError
from trip_planner.models.enums import ErrorKind, EventKind
from trip_planner.models.events import AllDayEvent, TimedEvent, TripEvent, UnscheduledEvent
from trip_planner.models.serialization import (
    REQUIRED_KEYS, build_event, lookup, parse_wire_value, wire_key,
)
from trip_planner.utils.logger import setup_logger

logger = setup_logger(__name__)

Candidate = Union[TripEvent, Mapping[str, Any]]

_EVENT_TYPES = (UnscheduledEvent, AllDayEvent, TimedEvent)

_REQUIRED_ATTRIBUTES = {
    EventKind.UNSCHEDULED: ('id', 'trip_id', 'title', 'created_at', 'updated_at'),
    EventKind.ALL_DAY: ('id', 'trip_id', 'title', 'created_at', 'updated_at', 'start_date'),
    EventKind.TIMED: ('id', 'trip_id', 'title', 'created_at', 'updated_at', 'start_datetime', 'end_datetime'),
}

_OPTIONAL_ATTRIBUTES = {
    EventKind.UNSCHEDULED: (),
    EventKind.ALL_DAY: ('end_date',),
    EventKind.TIMED: (),
}

# Title and notes are typed by the length rules
_ATTRIBUTE_TYPES = {
    'id': str,
    'trip_id': str,
    'created_at': datetime,
    'updated_at': datetime,
    'start_date': date,
    'end_date': date,
    'start_datetime': datetime,
    'end_datetime': datetime,
}


def resolve_kind(value: Any) -> Optional[EventKind]:
    """Return the EventKind for ``value`` or None when it is outside the closed set."""
    if isinstance(value, EventKind):
        return value
    try:
        return EventKind(value)
    except (TypeError, ValueError):
        return None


def _missing(field: str) -> ValidationError:
    return ValidationError(field=field, message=f"{field} is required", kind=ErrorKind.MISSING_FIELD)


def _mapping_violations(data: Mapping[str, Any]) -> List[ValidationError]:
    """Checks that must pass before a dictionary can become an event."""
    kind = resolve_kind(data.get('kind'))
    if kind is None:
        return [ValidationError(
            field='kind',
            message=f"Invalid event kind: {data.get('kind')!r}",
            kind=ErrorKind.INVALID_KIND,
        )]

    violations = []
    for key in REQUIRED_KEYS[kind]:
        raw = lookup(data, key)
        if raw is None or parse_wire_value(key, raw) is None:
            violations.append(_missing(key))
    return violations


def _has_type(attribute: str, value: Any) -> bool:
    expected = _ATTRIBUTE_TYPES.get(attribute)
    if expected is None:
        return True
    # datetime subclasses date; a calendar date must not carry a time
    if expected is date and isinstance(value, datetime):
        return False
    return isinstance(value, expected)


def _missing_fields(event: TripEvent) -> List[ValidationError]:
    """Attributes that are required but absent, or set to a value of the wrong type."""
    violations = []
    for attribute in _REQUIRED_ATTRIBUTES[event.kind]:
        value = getattr(event, attribute, None)
        if value is None or not _has_type(attribute, value):
            violations.append(_missing(wire_key(attribute, event.kind)))
    for attribute in _OPTIONAL_ATTRIBUTES[event.kind]:
        value = getattr(event, attribute, None)
        if value is not None and not _has_type(attribute, value):
            violations.append(_missing(wire_key(attribute, event.kind)))
    return violations


def _not_text(field: str, label: str) -> ValidationError:
    return ValidationError(field=field, message=f"{label} must be a string", kind=ErrorKind.LENGTH_VIOLATION)


def _length_violations(event: TripEvent) -> List[ValidationError]:
    violations = []
    title = event.title if event.title is not None else ''

    if not isinstance(title, str):
        violations.append(_not_text('title', 'Title'))
    elif len(title) < 1:
        violations.append(ValidationError(
            field='title', message="Title is required", kind=ErrorKind.LENGTH_VIOLATION,
        ))
    elif len(title) > Config.TITLE_MAX_LENGTH:
        violations.append(ValidationError(
            field='title',
            message=f"Title must be {Config.TITLE_MAX_LENGTH} characters or less",
            kind=ErrorKind.LENGTH_VIOLATION,
        ))

    if event.notes is None:
        pass
    elif not isinstance(event.notes, str):
        violations.append(_not_text('notes', 'Notes'))
    elif len(event.notes) > Config.NOTES_MAX_LENGTH:
        violations.append(ValidationError(
            field='notes',
            message=f"Notes must be {Config.NOTES_MAX_LENGTH} characters or less",
            kind=ErrorKind.LENGTH_VIOLATION,
        ))

    return violations


def _order_violations(event: TripEvent) -> List[ValidationError]:
    if isinstance(event, AllDayEvent):
        if event.end_date is not None and event.start_date is not None and event.end_date < event.start_date:
            return [ValidationError(
                field='endDate',
                message="End date must be after or equal to start date",
                kind=ErrorKind.INVALID_ORDER,
            )]

    elif isinstance(event, TimedEvent):
        if event.start_datetime is None or event.end_datetime is None:
            return []
        try:
            ordered = event.end_datetime > event.start_datetime
        except TypeError:
            return [ValidationError(
                field='endDateTime',
                message="Start and end times must both be timezone-aware or both naive",
                kind=ErrorKind.INVALID_ORDER,
            )]
        if not ordered:
            return [ValidationError(
                field='endDateTime',
                message="End time must be after start time",
                kind=ErrorKind.INVALID_ORDER,
            )]

    return []


def find_violations(candidate: Candidate) -> List[ValidationError]:
    """Return every rule the candidate violates (empty when valid)."""
    if isinstance(candidate, Mapping):
        violations = _mapping_violations(candidate)
        if violations:
            return violations
        candidate = build_event(resolve_kind(candidate['kind']), candidate)

    if not isinstance(candidate, _EVENT_TYPES):
        return [ValidationError(
            field='kind',
            message=f"Unsupported event type: {type(candidate).__name__}",
            kind=ErrorKind.INVALID_KIND,
        )]

    missing = _missing_fields(candidate)
    if missing:
        return missing

    return _length_violations(candidate) + _order_violations(candidate)


def validate_event(candidate: Candidate) -> TripEvent:
    """
    Validate a candidate event.

    Args:
        candidate: A constructed event, or its wire dictionary

    Returns:
        The validated event (dictionaries are converted to their variant)

    Raises:
        EventValidationError: describing the first violated rule
    """
    violations = find_violations(candidate)
    if violations:
        logger.debug("Event failed validation: %s", "; ".join(str(v) for v in violations))
        raise EventValidationError(violations)

    if isinstance(candidate, Mapping):
        return build_event(resolve_kind(candidate['kind']), candidate)
    return candidate


def is_valid(candidate: Candidate) -> bool:
    return not find_violations(candidate)
