# File: timeline_layout/processors/event_filters.py
"""
Event helpers shared by the timeline and the date picker.

An event belongs to a day when its start time falls on that day.
"""

from collections import Counter
from datetime import date
from typing import Dict, List, Optional, Sequence

from timeline_layout.core.config_manager import Config
from timeline_layout.utils.date_utils import DateLike, is_same_day
from timeline_layout.models import Event


def filter_events_for_date(day: DateLike, events: Sequence[Event]) -> List[Event]:
    """Events starting on ``day``, in input order."""
    return [event for event in events if is_same_day(event.start_time, day)]


def count_events_for_day(day: DateLike, events: Sequence[Event]) -> int:
    return sum(1 for event in events if is_same_day(event.start_time, day))


def count_events_by_day(events: Sequence[Event]) -> Dict[date, int]:
    """Number of events per start day, for marking days on a month grid."""
    return dict(Counter(event.start_time.date() for event in events))


def filter_events_for_lane(lane_id: str, events: Sequence[Event]) -> List[Event]:
    return [event for event in events if event.lane_key == lane_id]


def get_overlapping_events(event: Event, events: Sequence[Event]) -> List[Event]:
    """Events sharing any time with ``event``, excluding events equal to it."""
    return [
        other for other in events
        if other != event and event.overlaps_with(other)
    ]


def does_event_overlap(event: Event, events: Sequence[Event]) -> bool:
    return any(other != event and event.overlaps_with(other) for other in events)


def event_dot_count(count: int, max_dots: Optional[int] = None) -> int:
    """Markers to draw under a day cell: one per event, capped."""
    limit = Config.MAX_EVENT_DOTS if max_dots is None else max_dots
    return max(0, min(count, limit))
