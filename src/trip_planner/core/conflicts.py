# File: src/trip_planner/core/conflicts.py
"""
Conflict detection between trip events.

Only timed events can conflict. All-day events work at day granularity and
are never reported as time conflicts. Intervals are half-open, so an event
ending exactly when another starts does not conflict with it.
"""

from typing import Iterable, List, Tuple

from trip_planner.models.events import TimedEvent, TripEvent


def has_scheduling_conflict(event1: TripEvent, event2: TripEvent) -> bool:
    """
    Check if two events' time ranges overlap.

    Raises:
        TypeError: if one timed event uses naive instants and the other
            timezone-aware ones, since they cannot be ordered.
    """
    if not isinstance(event1, TimedEvent) or not isinstance(event2, TimedEvent):
        return False

    return (
        event1.start_datetime < event2.end_datetime
        and event2.start_datetime < event1.end_datetime
    )


def find_conflicts(events: Iterable[TripEvent]) -> List[Tuple[TripEvent, TripEvent]]:
    """
    Find overlapping event pairs (a, b), each pair appearing once with a
    before b in input order.
    """
    timed = [e for e in events if isinstance(e, TimedEvent)]
    conflicts: List[Tuple[TripEvent, TripEvent]] = []

    # O(n^2) is fine for the number of events on a single trip
    for i, first in enumerate(timed):
        for second in timed[i + 1:]:
            if has_scheduling_conflict(first, second):
                conflicts.append((first, second))

    return conflicts


def conflicts_with(event: TripEvent, others: Iterable[TripEvent]) -> List[TripEvent]:
    """Return the events in ``others`` that overlap ``event``, ignoring itself."""
    return [
        other for other in others
        if other.id != event.id and has_scheduling_conflict(event, other)
    ]
