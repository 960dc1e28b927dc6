"""
Day timeline layout engine.

Resolves overlapping events of a selected day into lane-aware rectangles
that a renderer can paint directly.
"""

from timeline_layout.models import (
    Event,
    Lane,
    OverlapInfo,
    LayoutRect,
    LayoutResult,
    PositionedEvent,
    Viewport,
    VisibleHours,
    OverlapStrategy,
    TimeLabelType,
    LayoutError,
    LaneConfigurationError,
    ViewportConfigurationError,
    InvalidEventError,
    event_from_dict,
    lane_from_dict,
)
from timeline_layout.core.layout_engine import LayoutEngine, LayoutEngineFactory, layout

__version__ = "0.1.0"

__all__ = [
    "Event",
    "Lane",
    "OverlapInfo",
    "LayoutRect",
    "LayoutResult",
    "PositionedEvent",
    "Viewport",
    "VisibleHours",
    "OverlapStrategy",
    "TimeLabelType",
    "LayoutError",
    "LaneConfigurationError",
    "ViewportConfigurationError",
    "InvalidEventError",
    "event_from_dict",
    "lane_from_dict",
    "LayoutEngine",
    "LayoutEngineFactory",
    "layout",
]
