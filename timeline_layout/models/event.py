# File: timeline_layout/models/event.py

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional

from .common import coerce_datetime
from .errors import InvalidEventError

DEFAULT_EVENT_COLOR = "#2196F3"
DEFAULT_EVENT_DURATION = timedelta(hours=1)


@dataclass(frozen=True)
class Event:
    """
    A timed calendar event placed on the day timeline.

    Events are immutable values. Equality and hashing cover every field, so
    two structurally identical events collapse to one entry during layout.
    """
    title: str
    start_time: datetime
    end_time: Optional[datetime] = None
    lane_key: Optional[str] = None
    color: str = DEFAULT_EVENT_COLOR
    description: Optional[str] = None
    id: Optional[str] = None

    def __post_init__(self):
        """Default the end time and reject empty or inverted ranges."""
        if self.start_time is None:
            raise InvalidEventError(f"Event start time is required: {self.title}")

        if self.end_time is None:
            object.__setattr__(self, 'end_time', self.start_time + DEFAULT_EVENT_DURATION)

        if self.end_time <= self.start_time:
            raise InvalidEventError(f"Event end time must be after start time: {self.title}")

    def duration_minutes(self) -> int:
        """Calculate event duration in whole minutes."""
        return int((self.end_time - self.start_time).total_seconds() // 60)

    def overlaps_with(self, other: 'Event') -> bool:
        """Half-open overlap: an event ending as another starts does not overlap it."""
        return self.start_time < other.end_time and other.start_time < self.end_time

    def with_changes(self, **changes) -> 'Event':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'start_time': self.start_time.isoformat(),
            'end_time': self.end_time.isoformat(),
            'lane_key': self.lane_key,
            'color': self.color,
            'description': self.description,
        }


def event_from_dict(data: dict) -> Event:
    """Create an Event from a dictionary, accepting a few common key aliases."""
    start = coerce_datetime(data.get('start_time') or data.get('start'))
    end = coerce_datetime(data.get('end_time') or data.get('end'))
    title = str(data.get('title') or data.get('summary') or 'Untitled Event')

    if start is None:
        raise InvalidEventError(f"Event start time is missing or unreadable: {title}")

    lane_key = data.get('lane_key') or data.get('column_id') or data.get('lane')

    return Event(
        title=title,
        start_time=start,
        end_time=end,
        lane_key=str(lane_key) if lane_key else None,
        color=str(data.get('color') or DEFAULT_EVENT_COLOR),
        description=data.get('description'),
        id=str(data['id']) if data.get('id') is not None else None,
    )
