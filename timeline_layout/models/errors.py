# File: timeline_layout/models/errors.py
"""
Exception types raised by the timeline layout engine.
"""


class LayoutError(Exception):
    """Base class for all layout engine errors."""


class LaneConfigurationError(LayoutError, ValueError):
    """Lane set violates the 0 or 2-10 lane rule, or repeats a lane id."""


class ViewportConfigurationError(LayoutError, ValueError):
    """Viewport size, visible hour window or strategy is not usable."""


class InvalidEventError(LayoutError, ValueError):
    """Event cannot be built (missing start, or end not after start)."""
