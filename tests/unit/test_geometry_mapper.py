# File: tests/unit/test_geometry_mapper.py
"""
Unit tests for mapping events onto the viewport.
"""

import pytest
from datetime import date, datetime

from timeline_layout.processors.geometry_mapper import GeometryMapper, proportional_position
from timeline_layout.models import (
    LaneSlice, LayoutRect, OverlapInfo, Viewport, VisibleHours, ViewportConfigurationError
)


@pytest.fixture
def full_lane():
    return LaneSlice(lane_id="default", index=0, left=0.0, width=300.0)


class TestMapEvent:
    """Tests for single-event rectangles."""

    def test_full_day_mapping(self, viewport, full_day, full_lane, make_event, layout_day):
        mapper = GeometryMapper(viewport, full_day)
        event = make_event("Focus", "09:00", "10:30")

        rect = mapper.map_event(event, OverlapInfo(), full_lane, layout_day)

        assert rect == LayoutRect(top=540.0, height=90.0, left=0.0, width=300.0)

    def test_partial_hour_window(self, office_hours, full_lane, make_event, layout_day):
        mapper = GeometryMapper(Viewport(height=1200.0, width=300.0), office_hours)
        event = make_event("Focus", "09:00", "10:00")

        rect = mapper.map_event(event, OverlapInfo(), full_lane, layout_day)

        assert mapper.minute_height == pytest.approx(2.0)
        assert rect.top == pytest.approx(120.0)
        assert rect.height == pytest.approx(120.0)

    def test_event_before_hour_window_is_not_clipped(self, office_hours, full_lane, make_event, layout_day):
        mapper = GeometryMapper(Viewport(height=1200.0, width=300.0), office_hours)

        rect = mapper.map_event(make_event("Early", "06:00", "07:00"), OverlapInfo(), full_lane, layout_day)

        assert rect.top == pytest.approx(-240.0)
        assert rect.height == pytest.approx(120.0)

    def test_overlap_slot_splits_lane(self, viewport, full_day, make_event, layout_day):
        mapper = GeometryMapper(viewport, full_day)
        lane = LaneSlice(lane_id="work", index=1, left=100.0, width=100.0)

        rect = mapper.map_event(make_event("B", "09:30", "10:30"), OverlapInfo(True, 1, 2), lane, layout_day)

        assert rect.width == pytest.approx(50.0)
        assert rect.left == pytest.approx(150.0)

    def test_same_start_siblings_split_evenly(self, viewport, full_day, full_lane, make_event, layout_day):
        mapper = GeometryMapper(viewport, full_day)

        rect = mapper.map_event(
            make_event("C", "09:30"), OverlapInfo(True, 2, 3, same_start=True), full_lane, layout_day
        )

        assert rect.width == pytest.approx(100.0)
        assert rect.left == pytest.approx(200.0)

    def test_event_ending_at_midnight(self, viewport, full_day, full_lane, make_event, layout_day):
        mapper = GeometryMapper(viewport, full_day)

        rect = mapper.map_event(make_event("Last", "23:00"), OverlapInfo(), full_lane, layout_day)

        assert rect.top == pytest.approx(1380.0)
        assert rect.height == pytest.approx(60.0)

    def test_events_outside_day_are_excluded(self, viewport, full_day, full_lane, make_event, layout_day):
        mapper = GeometryMapper(viewport, full_day)
        starts_before = make_event("Overnight", "23:00", "23:59", day=date(2025, 11, 17)).with_changes(
            end_time=datetime(2025, 11, 18, 1, 0)
        )
        ends_after = make_event("Late", "23:30", "23:45").with_changes(
            end_time=datetime(2025, 11, 19, 0, 30)
        )

        assert mapper.map_event(starts_before, OverlapInfo(), full_lane, layout_day) is None
        assert mapper.map_event(ends_after, OverlapInfo(), full_lane, layout_day) is None


class TestLaneSlices:
    """Tests for horizontal lane division."""

    def test_equal_slices(self, viewport, full_day):
        slices = GeometryMapper(viewport, full_day).lane_slices(["a", "b", "c"])

        assert [s.left for s in slices] == pytest.approx([0.0, 100.0, 200.0])
        assert all(s.width == pytest.approx(100.0) for s in slices)
        assert [s.index for s in slices] == [0, 1, 2]

    def test_padding_insets_each_lane(self, viewport, full_day):
        slices = GeometryMapper(viewport, full_day, lane_padding=4.0).lane_slices(["a", "b", "c"])

        assert [s.left for s in slices] == pytest.approx([4.0, 104.0, 204.0])
        assert all(s.width == pytest.approx(92.0) for s in slices)

    def test_no_lanes(self, viewport, full_day):
        assert GeometryMapper(viewport, full_day).lane_slices([]) == []

    def test_negative_padding_raises(self, viewport, full_day):
        with pytest.raises(ViewportConfigurationError):
            GeometryMapper(viewport, full_day, lane_padding=-1.0)


class TestGridHelpers:
    """Tests for grid lines, offsets and proportional placement."""

    def test_hour_grid_lines(self, office_hours):
        lines = GeometryMapper(Viewport(height=1000.0, width=100.0), office_hours).hour_grid_lines()

        assert len(lines) == 11
        assert lines[0] == 0.0
        assert lines[1] == pytest.approx(100.0)
        assert lines[-1] == pytest.approx(1000.0)

    def test_content_height(self, viewport, full_day):
        assert GeometryMapper(viewport, full_day).content_height(60.0) == pytest.approx(1440.0)

    def test_time_offset(self, viewport, office_hours, layout_day):
        mapper = GeometryMapper(viewport, office_hours)  # 1440 / 600 minutes

        assert mapper.time_offset(datetime(2025, 11, 18, 13, 0), layout_day) == pytest.approx(300 * 2.4)

    def test_proportional_position(self):
        position = proportional_position(
            datetime(2025, 11, 18, 6, 0),
            datetime(2025, 11, 18, 12, 0),
            datetime(2025, 11, 18, 0, 0),
            datetime(2025, 11, 19, 0, 0),
            container_height=1440.0,
            container_width=200.0,
        )

        assert position == {'top': 360.0, 'height': 360.0, 'width': 200.0}

    def test_proportional_position_keeps_partial_minutes(self):
        position = proportional_position(
            datetime(2025, 11, 18, 0, 0, 30),
            datetime(2025, 11, 18, 0, 1, 0),
            datetime(2025, 11, 18, 0, 0),
            datetime(2025, 11, 18, 0, 2),
            container_height=100.0,
            container_width=50.0,
        )

        assert position['top'] == pytest.approx(25.0)
        assert position['height'] == pytest.approx(25.0)

    def test_proportional_position_empty_window_raises(self):
        moment = datetime(2025, 11, 18, 9, 0)

        with pytest.raises(ViewportConfigurationError, match="must end after it starts"):
            proportional_position(moment, moment, moment, moment, 100.0, 50.0)
