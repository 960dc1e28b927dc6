# File: timeline_layout/processors/time_labels.py
"""
Time gutter labels.
Builds hour (and optionally half-hour) labels positioned alongside the timeline.
"""

from datetime import datetime, time
from typing import Callable, List, Optional

from timeline_layout.utils.date_utils import DateLike, is_same_day
from timeline_layout.models import TimeLabel, TimeLabelType, VisibleHours


def default_label_text(moment: datetime) -> str:
    """24-hour 'HH:MM' text."""
    return f"{moment.hour:02d}:{moment.minute:02d}"


def build_time_labels(
    visible_hours: VisibleHours,
    height: float,
    label_type: TimeLabelType = TimeLabelType.HOUR_ONLY,
    day: Optional[DateLike] = None,
    now: Optional[datetime] = None,
    highlight_current_hour: bool = False,
    formatter: Optional[Callable[[datetime], str]] = None
) -> List[TimeLabel]:
    """
    Build the labels for the time gutter.

    Args:
        visible_hours: Hour window shown by the timeline
        height: Height of the gutter, matching the timeline viewport
        label_type: Hour-only or hour-and-half labels
        day: Day the labels belong to (defaults to the day of ``now``)
        now: Current time, used for highlighting (defaults to datetime.now())
        highlight_current_hour: Mark the label covering ``now``
        formatter: Custom text builder, e.g. for 12-hour clocks

    Returns:
        Labels ordered top to bottom
    """
    now = now or datetime.now()
    day = day or now
    render = formatter or default_label_text
    hour_height = height / visible_hours.hour_count
    highlight = highlight_current_hour and is_same_day(day, now)

    labels: List[TimeLabel] = []
    for index, hour in enumerate(range(visible_hours.start, visible_hours.end)):
        hour_time = datetime.combine(day, time(hour))
        top = index * hour_height

        if label_type == TimeLabelType.HOUR_AND_HALF:
            half_height = hour_height / 2
            half_time = datetime.combine(day, time(hour, 30))
            labels.append(TimeLabel(
                time=hour_time,
                text=render(hour_time),
                top=top,
                height=half_height,
                is_current=highlight and now.hour == hour and now.minute < 30,
            ))
            labels.append(TimeLabel(
                time=half_time,
                text=render(half_time),
                top=top + half_height,
                height=half_height,
                is_current=highlight and now.hour == hour and now.minute >= 30,
            ))
        else:
            labels.append(TimeLabel(
                time=hour_time,
                text=render(hour_time),
                top=top,
                height=hour_height,
                is_current=highlight and now.hour == hour,
            ))

    return labels
