# File: src/trip_planner/bridge/domain_bridge.py
"""
Domain bridge for assistants and external integrations.

Wraps every core operation in a BridgeResult envelope instead of raising,
and coerces ISO strings into dates and datetimes. No business rules live
here; failures from the core are only classified and passed through.
"""

from typing import Any, Mapping, Optional, Union

from trip_planner.core.conflicts import has_scheduling_conflict
from trip_planner.core.exceptions import EventValidationError
from trip_planner.core.formatting import DisplayOptions, get_event_date_range
from trip_planner.core.scheduling import (
    convert_to_all_day, convert_to_timed, create_event, schedule_as_all_day,
    schedule_as_timed, unschedule_event,
)
from trip_planner.core.validation import resolve_kind, validate_event
from trip_planner.models.api import BridgeError, BridgeResult
from trip_planner.models.common import DateLike, DateTimeLike, parse_iso_date, parse_iso_datetime
from trip_planner.models.enums import BridgeErrorType, EventKind
from trip_planner.models.events import (
    AllDayEvent, TimedEvent, TripEvent, UnscheduledEvent,
)
from trip_planner.utils.logger import LoggerMixin

EventInput = Union[TripEvent, Mapping[str, Any]]


class AIEventOperations(LoggerMixin):
    """Envelope-returning wrappers around the event scheduling functions."""

    # ==================== Helpers ====================

    def _failure(self, error_type: BridgeErrorType, message: str,
                 field: Optional[str] = None, code: Optional[str] = None) -> BridgeResult:
        self.logger.warning(f"Bridge {error_type.value} error: {message}")
        return BridgeResult.fail(BridgeError(type=error_type, message=message, field=field, code=code))

    def _from_error(self, error_type: BridgeErrorType, error: Exception) -> BridgeResult:
        if isinstance(error, EventValidationError):
            return self._failure(error_type, error.message, field=error.field, code=error.kind.value)
        return self._failure(error_type, str(error))

    @staticmethod
    def _as_event(event: EventInput) -> TripEvent:
        if isinstance(event, (UnscheduledEvent, AllDayEvent, TimedEvent)):
            return event
        # Wire dicts are converted; anything else fails as invalid_kind
        return validate_event(event)

    # ==================== Validation ====================

    def validate_event_data(self, event_data: Any) -> BridgeResult[TripEvent]:
        """Validate event data (event or wire dictionary) against the rules."""
        try:
            return BridgeResult.ok(validate_event(event_data))
        except EventValidationError as e:
            return self._from_error(BridgeErrorType.VALIDATION, e)

    def get_event_kind(self, event_data: Any) -> Optional[str]:
        """Kind of a valid event, or None if the data is not a valid event."""
        try:
            return validate_event(event_data).kind.value
        except EventValidationError:
            return None

    def create_unscheduled_event(self, event_data: Mapping[str, Any]) -> BridgeResult[UnscheduledEvent]:
        """Create a new backlog event from id, tripId, title and optional notes."""
        if not isinstance(event_data, Mapping):
            return self._failure(
                BridgeErrorType.VALIDATION,
                f"Event data must be an object, got {type(event_data).__name__}",
            )
        try:
            event = create_event(
                id=event_data.get('id'),
                trip_id=event_data.get('tripId', event_data.get('trip_id')),
                title=event_data.get('title'),
                notes=event_data.get('notes'),
            )
        except EventValidationError as e:
            return self._from_error(BridgeErrorType.VALIDATION, e)
        return BridgeResult.ok(event)

    # ==================== Transitions ====================

    def schedule_as_all_day(self, event: EventInput, start_date: DateLike,
                            end_date: DateLike = None) -> BridgeResult[AllDayEvent]:
        """Schedule an unscheduled event as all-day."""
        try:
            scheduled = schedule_as_all_day(
                self._as_event(event), parse_iso_date(start_date), parse_iso_date(end_date),
            )
        except (EventValidationError, ValueError, TypeError) as e:
            return self._from_error(BridgeErrorType.BUSINESS_LOGIC, e)
        return BridgeResult.ok(scheduled)

    def schedule_as_timed(self, event: EventInput, start_datetime: DateTimeLike,
                          end_datetime: DateTimeLike) -> BridgeResult[TimedEvent]:
        """Schedule an unscheduled event as timed."""
        try:
            scheduled = schedule_as_timed(
                self._as_event(event), parse_iso_datetime(start_datetime), parse_iso_datetime(end_datetime),
            )
        except (EventValidationError, ValueError, TypeError) as e:
            return self._from_error(BridgeErrorType.BUSINESS_LOGIC, e)
        return BridgeResult.ok(scheduled)

    def convert_event(self, event: EventInput, target_kind: Union[str, EventKind],
                      schedule_data: Optional[Mapping[str, Any]] = None) -> BridgeResult[TripEvent]:
        """
        Convert an event to another scheduling kind.

        schedule_data may carry startDate/endDate (for allDay) or
        startDateTime/endDateTime (for timed). Converting to the event's
        current kind returns it unchanged.
        """
        schedule_data = schedule_data or {}
        kind = resolve_kind(target_kind)
        if kind is None:
            return self._failure(
                BridgeErrorType.VALIDATION,
                f"Invalid target event kind: {target_kind}",
                field='targetKind',
            )

        try:
            current = self._as_event(event)
            if current.kind is kind:
                return BridgeResult.ok(current)

            if kind is EventKind.UNSCHEDULED:
                return BridgeResult.ok(unschedule_event(current))

            if kind is EventKind.ALL_DAY:
                start_date = parse_iso_date(schedule_data.get('startDate'))
                end_date = parse_iso_date(schedule_data.get('endDate'))
                if isinstance(current, TimedEvent):
                    return BridgeResult.ok(convert_to_all_day(current, start_date, end_date))
                if start_date is None:
                    return self._failure(
                        BridgeErrorType.VALIDATION,
                        "Start date required to convert unscheduled event to all-day",
                        field='startDate',
                    )
                return BridgeResult.ok(schedule_as_all_day(current, start_date, end_date))

            start_datetime = parse_iso_datetime(schedule_data.get('startDateTime'))
            end_datetime = parse_iso_datetime(schedule_data.get('endDateTime'))
            if start_datetime is None or end_datetime is None:
                return self._failure(
                    BridgeErrorType.VALIDATION,
                    f"Start and end date-times required to convert {current.kind.value} event to timed",
                    field='startDateTime',
                )
            if isinstance(current, AllDayEvent):
                return BridgeResult.ok(convert_to_timed(current, start_datetime, end_datetime))
            return BridgeResult.ok(schedule_as_timed(current, start_datetime, end_datetime))

        except (EventValidationError, ValueError, TypeError) as e:
            return self._from_error(BridgeErrorType.BUSINESS_LOGIC, e)

    # ==================== Queries ====================

    def check_conflict(self, event1: EventInput, event2: EventInput) -> BridgeResult[bool]:
        """Check for a scheduling conflict between two events."""
        try:
            return BridgeResult.ok(has_scheduling_conflict(self._as_event(event1), self._as_event(event2)))
        except (EventValidationError, TypeError) as e:
            return self._from_error(BridgeErrorType.BUSINESS_LOGIC, e)

    def get_date_range(self, event: EventInput,
                       options: Optional[DisplayOptions] = None) -> BridgeResult[str]:
        """Human-readable date range for an event."""
        try:
            return BridgeResult.ok(get_event_date_range(self._as_event(event), options))
        except EventValidationError as e:
            return self._from_error(BridgeErrorType.BUSINESS_LOGIC, e)
