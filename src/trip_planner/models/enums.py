# File: src/trip_planner/models/enums.py

from enum import Enum


class EventKind(str, Enum):
    """Scheduling state of a trip event."""
    UNSCHEDULED = "unscheduled"  # Backlog, no time constraints
    ALL_DAY = "allDay"           # Whole day(s), no times
    TIMED = "timed"              # Precise start/end instants


class ErrorKind(str, Enum):
    """Which business rule a candidate event violated."""
    MISSING_FIELD = "missing_field"
    LENGTH_VIOLATION = "length_violation"
    INVALID_KIND = "invalid_kind"
    INVALID_ORDER = "invalid_order"


class BridgeErrorType(str, Enum):
    """Error classes reported in the bridge envelope."""
    VALIDATION = "validation"
    BUSINESS_LOGIC = "business_logic"
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
