# File: timeline_layout/core/layout_engine.py
"""
Layout facade for the day timeline.
Coordinates lane partitioning, overlap resolution and geometry mapping.

Each pass is a pure function of its inputs: nothing is cached between
calls, so the engine can be shared freely.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from timeline_layout.core.config_manager import Config
from timeline_layout.utils.logger import LoggerMixin, setup_logger
from timeline_layout.utils.date_utils import DateLike, current_time, is_same_day, is_within_day
from timeline_layout.processors.lane_partitioner import partition_events, validate_lanes
from timeline_layout.processors.overlap_resolver import OverlapResolver
from timeline_layout.processors.geometry_mapper import GeometryMapper
from timeline_layout.processors.event_filters import filter_events_for_date
from timeline_layout.models import (
    Event,
    Lane,
    LayoutResult,
    OverlapStrategy,
    PositionedEvent,
    Viewport,
    VisibleHours,
)

logger = setup_logger(__name__)


class LayoutEngine(LoggerMixin):
    """
    Lays out the events of one day into lane-aware, non-overlapping rectangles.

    Pipeline per pass:
        1. Validate lanes (fails fast on a bad lane set)
        2. Keep the events starting on the selected day that fit inside it
        3. Partition them by lane
        4. Resolve overlaps per lane
        5. Map every event to a rectangle
        6. Position the "now" indicator (unless disabled)
    """

    def __init__(
        self,
        visible_hours: VisibleHours = VisibleHours(),
        strategy: OverlapStrategy = OverlapStrategy.GREEDY,
        lane_padding: float = 0.0,
        timezone: Optional[str] = None,
        show_now_indicator: bool = True
    ):
        """
        Initialize the engine.

        Args:
            visible_hours: Default hour window for passes that do not pass one
            strategy: Overlap strategy used by the resolver
            lane_padding: Horizontal inset on both sides of each lane
            timezone: Timezone used to read the current time for the indicator
            show_now_indicator: Whether passes compute the "now" indicator at all
        """
        self.visible_hours = visible_hours
        self.resolver = OverlapResolver(strategy)
        self.lane_padding = lane_padding
        self.timezone = timezone
        self.show_now_indicator = show_now_indicator

    def layout(
        self,
        events: Sequence[Event],
        selected_date: DateLike,
        lanes: Sequence[Lane],
        viewport: Viewport,
        visible_hours: Optional[VisibleHours] = None,
        now: Optional[datetime] = None
    ) -> LayoutResult:
        """
        Run one layout pass.

        Args:
            events: All known events; only those starting on ``selected_date`` are laid out
            selected_date: Day being displayed
            lanes: Lane definitions (0 or 2-10)
            viewport: Timeline area size
            visible_hours: Hour window, defaults to the engine's
            now: Current time for the indicator (read from the clock when omitted)

        Returns:
            LayoutResult with positioned events ordered by lane, then input order

        Raises:
            LaneConfigurationError: If the lane set is invalid
        """
        validate_lanes(lanes)
        hours = visible_hours or self.visible_hours

        day_events = filter_events_for_date(selected_date, events)
        # Only events inside the day window reach the lanes
        drawable = [
            event for event in day_events
            if is_within_day(event.start_time, event.end_time, selected_date)
        ]
        partitions = partition_events(drawable, lanes)
        mapper = GeometryMapper(viewport, hours, self.lane_padding)
        slices = mapper.lane_slices(list(partitions))

        positioned: List[PositionedEvent] = []
        for lane_slice in slices:
            lane_events = partitions[lane_slice.lane_id]
            overlap_infos = self.resolver.resolve(lane_events, selected_date)

            for event in dict.fromkeys(lane_events):
                info = overlap_infos.get(event)
                if info is None:
                    continue
                rect = mapper.map_event(event, info, lane_slice, selected_date)
                if rect is None:
                    continue
                positioned.append(PositionedEvent(event, rect, info, lane_slice.lane_id))

        now = now or current_time(self.timezone)
        now_indicator_top = None
        # The indicator only shows on a day that has events
        if self.show_now_indicator and day_events and is_same_day(selected_date, now):
            now_indicator_top = mapper.time_offset(now, now)

        self.logger.debug(
            f"Layout for {selected_date:%Y-%m-%d}: {len(positioned)}/{len(day_events)} events "
            f"placed across {len(slices)} lanes"
        )

        return LayoutResult(
            rects=tuple(positioned),
            now_indicator_top=now_indicator_top,
            lane_ids=tuple(partitions),
        )


def layout(
    events: Sequence[Event],
    selected_date: DateLike,
    lanes: Sequence[Lane] = (),
    viewport: Viewport = Viewport(height=24 * 60.0, width=400.0),
    visible_hours: VisibleHours = VisibleHours(),
    now: Optional[datetime] = None,
    strategy: OverlapStrategy = OverlapStrategy.GREEDY,
    show_now_indicator: bool = True
) -> LayoutResult:
    """Single layout pass with a throwaway engine."""
    engine = LayoutEngine(
        visible_hours=visible_hours, strategy=strategy, show_now_indicator=show_now_indicator
    )
    return engine.layout(events, selected_date, lanes, viewport, visible_hours, now=now)


class LayoutEngineFactory:
    """Factory for creating LayoutEngine instances from configuration."""

    @staticmethod
    def create() -> LayoutEngine:
        """
        Create a LayoutEngine using Config settings.

        Raises:
            ValueError: If configuration is invalid
        """
        logger.info("Creating LayoutEngine via factory")

        if not Config.validate():
            raise ValueError("Timeline configuration validation failed. Check your .env settings.")

        return LayoutEngine(
            visible_hours=Config.visible_hours(),
            strategy=Config.overlap_strategy(),
            lane_padding=Config.lane_padding(),
            timezone=Config.TIMEZONE,
            show_now_indicator=Config.SHOW_NOW_INDICATOR,
        )
