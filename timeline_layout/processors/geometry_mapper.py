# File: timeline_layout/processors/geometry_mapper.py
"""
Geometry mapping module.
Converts event times and overlap metadata into viewport rectangles.
"""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from timeline_layout.utils.logger import setup_logger
from timeline_layout.utils.date_utils import DateLike, is_within_day, minutes_since_day_start
from timeline_layout.models import (
    Event,
    LaneSlice,
    LayoutRect,
    OverlapInfo,
    Viewport,
    ViewportConfigurationError,
    VisibleHours,
)

logger = setup_logger(__name__)


class GeometryMapper:
    """Maps events onto a viewport showing a fixed hour window."""

    def __init__(
        self,
        viewport: Viewport,
        visible_hours: VisibleHours = VisibleHours(),
        lane_padding: float = 0.0
    ):
        """
        Initialize geometry mapper.

        Args:
            viewport: Height and width of the timeline area
            visible_hours: Hour window mapped onto the viewport height
            lane_padding: Horizontal inset applied to both sides of each lane
        """
        if lane_padding < 0:
            raise ViewportConfigurationError(f"Lane padding cannot be negative: {lane_padding}")

        self.viewport = viewport
        self.visible_hours = visible_hours
        self.lane_padding = lane_padding

    @property
    def minute_height(self) -> float:
        return self.viewport.height / self.visible_hours.span_minutes

    @property
    def hour_height(self) -> float:
        return self.minute_height * 60

    def time_offset(self, moment: datetime, anchor: DateLike) -> float:
        """Vertical position of ``moment`` relative to the top of the hour window."""
        minutes = minutes_since_day_start(moment, anchor) - self.visible_hours.start * 60
        return minutes * self.minute_height

    def lane_slices(self, lane_ids: Sequence[str]) -> List[LaneSlice]:
        """Split the viewport width equally between the rendered lanes."""
        if not lane_ids:
            return []

        lane_width = self.viewport.width / len(lane_ids)
        inner_width = max(lane_width - 2 * self.lane_padding, 0.0)

        return [
            LaneSlice(
                lane_id=lane_id,
                index=index,
                left=index * lane_width + self.lane_padding,
                width=inner_width,
            )
            for index, lane_id in enumerate(lane_ids)
        ]

    def map_event(
        self,
        event: Event,
        overlap_info: OverlapInfo,
        lane: LaneSlice,
        selected_date: DateLike
    ) -> Optional[LayoutRect]:
        """
        Compute the rectangle for one event.

        Events starting before or ending after the selected day are excluded
        (None), never clipped. Events inside the day but outside the visible
        hour window keep their off-viewport coordinates.

        Args:
            event: Event to place
            overlap_info: Slot and group size from the overlap resolver
            lane: Horizontal slice of the event's lane
            selected_date: Day being laid out

        Returns:
            LayoutRect, or None when the event is outside the day
        """
        if not is_within_day(event.start_time, event.end_time, selected_date):
            logger.debug(f"Excluding '{event.title}': outside {selected_date:%Y-%m-%d}")
            return None

        start_minutes = minutes_since_day_start(event.start_time, selected_date)
        end_minutes = minutes_since_day_start(event.end_time, selected_date)

        width = lane.width / overlap_info.total_overlapping
        return LayoutRect(
            top=self.time_offset(event.start_time, selected_date),
            height=(end_minutes - start_minutes) * self.minute_height,
            left=lane.left + width * overlap_info.overlap_index,
            width=width,
        )

    def hour_grid_lines(self) -> List[float]:
        """Top offsets of the hour separators, both window edges included."""
        return [index * self.hour_height for index in range(self.visible_hours.hour_count + 1)]

    def content_height(self, hour_row_height: float) -> float:
        """Scroll container height needed to show the window at a fixed row height."""
        return self.visible_hours.hour_count * hour_row_height


def proportional_position(
    event_start: datetime,
    event_end: datetime,
    window_start: datetime,
    window_end: datetime,
    container_height: float,
    container_width: float
) -> Dict[str, float]:
    """
    Position an event as a fraction of an arbitrary time window.

    Returns:
        Dictionary with 'top', 'height' and 'width' (the full container width)

    Raises:
        ViewportConfigurationError: If the window does not end after it starts
    """
    window_minutes = (window_end - window_start).total_seconds() / 60
    if window_minutes <= 0:
        raise ViewportConfigurationError(
            f"Time window must end after it starts: {window_start} - {window_end}"
        )

    start_minutes = (event_start - window_start).total_seconds() / 60
    duration_minutes = (event_end - event_start).total_seconds() / 60

    return {
        'top': (start_minutes / window_minutes) * container_height,
        'height': (duration_minutes / window_minutes) * container_height,
        'width': container_width,
    }
