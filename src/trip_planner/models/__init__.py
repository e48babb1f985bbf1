from .enums import EventKind, ErrorKind, BridgeErrorType
from .common import parse_iso_date, parse_iso_datetime, utcnow
from .events import BaseEvent, UnscheduledEvent, AllDayEvent, TimedEvent, TripEvent, EVENT_CLASSES
from .serialization import event_to_dict, event_from_dict
from .api import ValidationError, BridgeError, BridgeResult
from .trip import Trip

__all__ = [
    "EventKind",
    "ErrorKind",
    "BridgeErrorType",
    "parse_iso_date",
    "parse_iso_datetime",
    "utcnow",
    "BaseEvent",
    "UnscheduledEvent",
    "AllDayEvent",
    "TimedEvent",
    "TripEvent",
    "EVENT_CLASSES",
    "event_to_dict",
    "event_from_dict",
    "ValidationError",
    "BridgeError",
    "BridgeResult",
    "Trip"
]
