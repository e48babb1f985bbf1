# File: src/trip_planner/models/serialization.py
"""
Conversion between event dataclasses and their dictionary wire form.

The wire form uses the camelCase keys shared with the persistence layer and
external clients. Dates are ``YYYY-MM-DD`` strings and instants are ISO 8601.
"""

from typing import Any, Dict, Mapping, Tuple

from .common import format_iso, parse_iso_date, parse_iso_datetime
from .enums import EventKind
from .events import AllDayEvent, BaseEvent, TimedEvent, TripEvent, UnscheduledEvent

# Python attribute -> wire key
BASE_KEYS: Dict[str, str] = {
    'id': 'id',
    'trip_id': 'tripId',
    'title': 'title',
    'notes': 'notes',
    'created_at': 'createdAt',
    'updated_at': 'updatedAt',
}

VARIANT_KEYS: Dict[EventKind, Dict[str, str]] = {
    EventKind.UNSCHEDULED: {},
    EventKind.ALL_DAY: {'start_date': 'startDate', 'end_date': 'endDate'},
    EventKind.TIMED: {'start_datetime': 'startDateTime', 'end_datetime': 'endDateTime'},
}

REQUIRED_KEYS: Dict[EventKind, Tuple[str, ...]] = {
    EventKind.UNSCHEDULED: ('id', 'tripId', 'title', 'createdAt', 'updatedAt'),
    EventKind.ALL_DAY: ('id', 'tripId', 'title', 'createdAt', 'updatedAt', 'startDate'),
    EventKind.TIMED: ('id', 'tripId', 'title', 'createdAt', 'updatedAt', 'startDateTime', 'endDateTime'),
}

# Wire keys holding calendar dates rather than instants
DATE_KEYS = frozenset({'startDate', 'endDate'})


def wire_key(attribute: str, kind: EventKind) -> str:
    """Map a Python attribute name to its wire key."""
    return BASE_KEYS.get(attribute) or VARIANT_KEYS[kind].get(attribute, attribute)


def lookup(data: Mapping[str, Any], key: str) -> Any:
    """Read a wire key, also accepting the snake_case attribute name."""
    if key in data:
        return data[key]
    for keys in (BASE_KEYS, *VARIANT_KEYS.values()):
        for attribute, wire in keys.items():
            if wire == key and attribute in data:
                return data[attribute]
    return None


def event_to_dict(event: BaseEvent) -> Dict[str, Any]:
    """Convert an event to its wire dictionary."""
    result: Dict[str, Any] = {
        'kind': event.kind.value,
        'id': event.id,
        'tripId': event.trip_id,
        'title': event.title,
        'createdAt': format_iso(event.created_at),
        'updatedAt': format_iso(event.updated_at),
    }
    if event.notes is not None:
        result['notes'] = event.notes

    if isinstance(event, AllDayEvent):
        result['startDate'] = format_iso(event.start_date)
        if event.end_date is not None:
            result['endDate'] = format_iso(event.end_date)
    elif isinstance(event, TimedEvent):
        result['startDateTime'] = format_iso(event.start_datetime)
        result['endDateTime'] = format_iso(event.end_datetime)
    elif not isinstance(event, UnscheduledEvent):
        raise TypeError(f"Unknown event type: {type(event).__name__}")

    return result


def parse_wire_value(key: str, value: Any) -> Any:
    """Coerce a raw wire value for ``key`` into its Python type."""
    if key in DATE_KEYS:
        return parse_iso_date(value)
    if key in ('createdAt', 'updatedAt', 'startDateTime', 'endDateTime'):
        return parse_iso_datetime(value)
    return value


def build_event(kind: EventKind, data: Mapping[str, Any]) -> TripEvent:
    """Construct the variant for ``kind`` from wire data without validating it."""
    fields = {
        attribute: parse_wire_value(key, lookup(data, key))
        for attribute, key in {**BASE_KEYS, **VARIANT_KEYS[kind]}.items()
    }
    if kind is EventKind.UNSCHEDULED:
        return UnscheduledEvent(**fields)
    if kind is EventKind.ALL_DAY:
        return AllDayEvent(**fields)
    return TimedEvent(**fields)


def event_from_dict(data: Mapping[str, Any]) -> TripEvent:
    """Create a validated event from its wire dictionary.

    Raises:
        EventValidationError: if the data does not describe a valid event.
    """
    from trip_planner.core.validation import validate_event

    return validate_event(data)
