# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events, lanes and viewports for all tests.
"""

import pytest
from datetime import datetime, date, timedelta
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from timeline_layout.models import (
    Event, Lane, Viewport, VisibleHours, OverlapInfo, LayoutResult
)


# ==================== Date Fixtures ====================

@pytest.fixture
def layout_day():
    """The day every fixture event is placed on."""
    return date(2025, 11, 18)


@pytest.fixture
def fixed_now():
    """A 'now' on the layout day, 14:30."""
    return datetime(2025, 11, 18, 14, 30)


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event(layout_day):
    """Factory fixture for events on the layout day, times given as 'HH:MM'."""
    def _create(
        title: str,
        start: str,
        end: str = None,
        lane_key: str = None,
        day: date = None
    ) -> Event:
        base = datetime.combine(day or layout_day, datetime.min.time())

        def _at(hhmm: str) -> datetime:
            hours, minutes = hhmm.split(':')
            return base + timedelta(hours=int(hours), minutes=int(minutes))

        return Event(
            title=title,
            start_time=_at(start),
            end_time=_at(end) if end else None,
            lane_key=lane_key,
        )

    return _create


@pytest.fixture
def scenario_events(make_event):
    """A overlaps B and C; B and C share a start time."""
    return [
        make_event("A", "09:00", "10:00", lane_key="work"),
        make_event("B", "09:30", "10:30", lane_key="work"),
        make_event("C", "09:30", "09:45", lane_key="work"),
    ]


@pytest.fixture
def busy_morning(make_event):
    """A denser set of overlapping events for property checks."""
    return [
        make_event("Standup", "09:00", "09:15"),
        make_event("Review", "09:00", "10:00"),
        make_event("Pairing", "09:10", "11:00"),
        make_event("Coffee", "09:50", "10:20"),
        make_event("Planning", "10:00", "11:30"),
        make_event("Call", "10:15", "10:45"),
        make_event("Lunch", "12:00", "13:00"),
        make_event("Design", "12:30", "14:00"),
        make_event("Sync", "13:00", "13:30"),
    ]


# ==================== Lane Fixtures ====================

@pytest.fixture
def work_lanes():
    """Two defined lanes."""
    return [Lane(id="work", title="Work"), Lane(id="personal")]


# ==================== Viewport Fixtures ====================

@pytest.fixture
def viewport():
    """Full-day viewport where one minute is one unit high."""
    return Viewport(height=1440.0, width=300.0)


@pytest.fixture
def full_day():
    return VisibleHours(0, 24)


@pytest.fixture
def office_hours():
    return VisibleHours(8, 18)


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# ==================== Helper Functions ====================

@pytest.fixture
def assert_no_shared_slots():
    """Helper asserting overlapping, non-sibling events never share a slot."""
    def _assert(infos: dict):
        events = list(infos)
        for i, a in enumerate(events):
            info_a = infos[a]
            assert info_a.total_overlapping >= 1
            assert 0 <= info_a.overlap_index < info_a.total_overlapping

            for b in events[i + 1:]:
                info_b = infos[b]
                if info_a.same_start or info_b.same_start:
                    continue
                if a.overlaps_with(b):
                    assert info_a.overlap_index != info_b.overlap_index, \
                        f"{a.title} and {b.title} overlap but share slot {info_a.overlap_index}"

    return _assert


@pytest.fixture
def assert_lane_tiled():
    """Helper asserting every rectangle tiles its lane width."""
    def _assert(result: LayoutResult, lane_width: float):
        for positioned in result.rects:
            info: OverlapInfo = positioned.overlap_info
            assert positioned.rect.width * info.total_overlapping == pytest.approx(lane_width)

    return _assert
