# File: timeline_layout/models/enums.py

from enum import Enum


class OverlapStrategy(Enum):
    """Column assignment strategies for overlapping events."""
    GREEDY = "greedy"  # First-fit against overlapping predecessors
    SWEEP = "sweep"    # Active-set sweep, cluster-wide column count


class TimeLabelType(Enum):
    """Time label density on the timeline gutter."""
    HOUR_ONLY = "hour_only"
    HOUR_AND_HALF = "hour_and_half"
