from .enums import OverlapStrategy, TimeLabelType
from .errors import (
    LayoutError,
    LaneConfigurationError,
    ViewportConfigurationError,
    InvalidEventError,
)
from .common import parse_iso_datetime, coerce_datetime
from .event import Event, event_from_dict, DEFAULT_EVENT_COLOR, DEFAULT_EVENT_DURATION
from .lane import Lane, lane_from_dict, DEFAULT_LANE_ID
from .layout import (
    OverlapInfo,
    LayoutRect,
    VisibleHours,
    Viewport,
    LaneSlice,
    PositionedEvent,
    LayoutResult,
    TimeLabel,
)

__all__ = [
    "OverlapStrategy",
    "TimeLabelType",
    "LayoutError",
    "LaneConfigurationError",
    "ViewportConfigurationError",
    "InvalidEventError",
    "parse_iso_datetime",
    "coerce_datetime",
    "Event",
    "event_from_dict",
    "DEFAULT_EVENT_COLOR",
    "DEFAULT_EVENT_DURATION",
    "Lane",
    "lane_from_dict",
    "DEFAULT_LANE_ID",
    "OverlapInfo",
    "LayoutRect",
    "VisibleHours",
    "Viewport",
    "LaneSlice",
    "PositionedEvent",
    "LayoutResult",
    "TimeLabel"
]
