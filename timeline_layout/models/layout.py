# File: timeline_layout/models/layout.py
"""
Derived values produced by a layout pass.
None of these are persisted; every pass rebuilds them from its inputs.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from .errors import ViewportConfigurationError
from .event import Event


@dataclass(frozen=True)
class OverlapInfo:
    """Overlap metadata for one event within its lane."""
    is_overlapping: bool = False
    overlap_index: int = 0
    total_overlapping: int = 1
    same_start: bool = False  # index/total are position/size inside the same-start subset

    def to_dict(self) -> dict:
        return {
            'is_overlapping': self.is_overlapping,
            'overlap_index': self.overlap_index,
            'total_overlapping': self.total_overlapping,
            'same_start': self.same_start,
        }


@dataclass(frozen=True)
class LayoutRect:
    """Rectangle in viewport units."""
    top: float
    height: float
    left: float
    width: float

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width

    def to_dict(self) -> dict:
        return {'top': self.top, 'height': self.height, 'left': self.left, 'width': self.width}


@dataclass(frozen=True)
class VisibleHours:
    """Visible hour window [start, end) of the timeline."""
    start: int = 0
    end: int = 24

    def __post_init__(self):
        if not (0 <= self.start < self.end <= 24):
            raise ViewportConfigurationError(
                f"Visible hours must satisfy 0 <= start < end <= 24, got [{self.start}, {self.end})"
            )

    @property
    def hour_count(self) -> int:
        return self.end - self.start

    @property
    def span_minutes(self) -> int:
        return self.hour_count * 60


@dataclass(frozen=True)
class Viewport:
    """Size of the timeline area events are laid out in."""
    height: float
    width: float

    def __post_init__(self):
        if self.height < 0 or self.width < 0:
            raise ViewportConfigurationError(
                f"Viewport dimensions cannot be negative: {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class LaneSlice:
    """Horizontal slice of the viewport owned by one lane."""
    lane_id: str
    index: int
    left: float
    width: float


@dataclass(frozen=True)
class PositionedEvent:
    """An event together with its rectangle and overlap metadata."""
    event: Event
    rect: LayoutRect
    overlap_info: OverlapInfo
    lane_id: str

    def to_dict(self) -> dict:
        return {
            'event': self.event.to_dict(),
            'rect': self.rect.to_dict(),
            'overlap_info': self.overlap_info.to_dict(),
            'lane_id': self.lane_id,
        }


@dataclass(frozen=True)
class LayoutResult:
    """Output of one layout pass, handed to the renderer."""
    rects: Tuple[PositionedEvent, ...] = field(default_factory=tuple)
    now_indicator_top: Optional[float] = None
    lane_ids: Tuple[str, ...] = field(default_factory=tuple)

    def for_lane(self, lane_id: str) -> Tuple[PositionedEvent, ...]:
        """Positioned events belonging to one lane."""
        return tuple(p for p in self.rects if p.lane_id == lane_id)

    def find(self, event: Event) -> Optional[PositionedEvent]:
        """Positioned entry for an event, or None if it was excluded."""
        for positioned in self.rects:
            if positioned.event == event:
                return positioned
        return None

    def to_dict(self) -> dict:
        return {
            'rects': [p.to_dict() for p in self.rects],
            'now_indicator_top': self.now_indicator_top,
            'lane_ids': list(self.lane_ids),
        }


@dataclass(frozen=True)
class TimeLabel:
    """A label on the time gutter."""
    time: datetime
    text: str
    top: float
    height: float
    is_current: bool = False
