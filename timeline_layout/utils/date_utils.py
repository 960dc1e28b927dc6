# File: timeline_layout/utils/date_utils.py
"""
Date and time helpers for the day timeline.

Day boundaries, minute offsets used for vertical positioning, plus the
calendar naming and labelling helpers the planner header relies on.
"""

from datetime import date, datetime, time, timedelta, tzinfo as tzinfo_type
from typing import Dict, List, Optional, Union
import pytz

DateLike = Union[date, datetime]

DEFAULT_MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]
DEFAULT_WEEKDAY_NAMES = ['Mo', 'Tu', 'We', 'Th', 'Fr', 'Sa', 'Su']
DEFAULT_DAY_LABELS = {'today': 'Today', 'tomorrow': 'Tomorrow', 'yesterday': 'Yesterday'}


def day_start(value: DateLike, tzinfo: Optional[tzinfo_type] = None) -> datetime:
    """
    Midnight (00:00:00) of the given day.

    Without ``tzinfo`` a datetime keeps its own tzinfo. With one, only the
    calendar day of ``value`` counts and midnight is taken in ``tzinfo``.
    """
    if tzinfo is None and isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(_calendar_day(value), time.min, tzinfo=tzinfo)


def day_end(value: DateLike, tzinfo: Optional[tzinfo_type] = None) -> datetime:
    """Midnight of the following day, used as the exclusive upper bound."""
    return day_start(value, tzinfo) + timedelta(days=1)


def _calendar_day(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def _day_start_for(moment: datetime, day: DateLike) -> datetime:
    """Midnight of ``day`` in the timezone of ``moment``, so the two compare."""
    return datetime.combine(_calendar_day(day), time.min, tzinfo=moment.tzinfo)


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return a.year == b.year and a.month == b.month and a.day == b.day


def minutes_since_day_start(moment: datetime, anchor: DateLike) -> int:
    """Whole minutes between midnight of ``anchor`` and ``moment``."""
    return int((moment - _day_start_for(moment, anchor)).total_seconds() // 60)


def is_within_day(start: datetime, end: datetime, day: DateLike) -> bool:
    """True when [start, end) lies inside the day window; end may equal next midnight."""
    midnight = _day_start_for(start, day)
    return not (start < midnight) and not (end > midnight + timedelta(days=1))


def day_difference(a: DateLike, b: DateLike) -> int:
    """Calendar days from ``a`` to ``b`` (negative when ``b`` is earlier)."""
    return (day_start(b).date() - day_start(a).date()).days


def month_name(value: DateLike, month_names: Optional[List[str]] = None) -> str:
    return (month_names or DEFAULT_MONTH_NAMES)[value.month - 1]


def weekday_name(value: DateLike, weekday_names: Optional[List[str]] = None) -> str:
    return (weekday_names or DEFAULT_WEEKDAY_NAMES)[value.weekday()]


def week_of_month(value: DateLike) -> int:
    """1-based week number within the month, weeks starting on Monday."""
    first_weekday = date(value.year, value.month, 1).isoweekday()
    return ((value.day + first_weekday - 2) // 7) + 1


def format_date(value: DateLike, fmt: str = "%b %d, %Y") -> str:
    """strftime with a 'Month D, YYYY' fallback for formats the platform rejects."""
    try:
        return value.strftime(fmt)
    except ValueError:
        return f"{month_name(value)} {value.day}, {value.year}"


def day_label(
    selected: DateLike,
    today: DateLike,
    labels: Optional[Dict[str, str]] = None,
    fmt: str = "%b %d, %Y"
) -> str:
    """
    Title for the selected day relative to today.

    Args:
        selected: Day being displayed
        today: Reference day
        labels: Overrides for the 'today', 'tomorrow' and 'yesterday' texts
        fmt: strftime format used for any other day

    Returns:
        'Today', 'Tomorrow', 'Yesterday' or the formatted date
    """
    names = {**DEFAULT_DAY_LABELS, **(labels or {})}
    difference = day_difference(today, selected)

    if difference == 0:
        return names['today']
    if difference == 1:
        return names['tomorrow']
    if difference == -1:
        return names['yesterday']
    return format_date(selected, fmt)


def current_time(timezone_name: Optional[str] = None) -> datetime:
    """Current time, localized to ``timezone_name`` when one is given."""
    if not timezone_name:
        return datetime.now()
    return datetime.now(pytz.timezone(timezone_name))
