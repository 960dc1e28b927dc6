# File: timeline_layout/models/common.py

from datetime import date, datetime, time
from typing import Optional, Union


def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Parse ISO date strings with 'Z' or offsets; date-only strings become midnight."""
    if not date_str:
        return None
    try:
        # fromisoformat() before 3.11 rejects a trailing 'Z'
        return datetime.fromisoformat(date_str.replace('Z', '+00:00'))
    except ValueError:
        try:
            return datetime.strptime(date_str, "%Y-%m-%d")
        except ValueError:
            return None


def coerce_datetime(value: Union[str, date, datetime, None]) -> Optional[datetime]:
    """Accept a datetime, a plain date or an ISO string and return a datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return parse_iso_datetime(str(value))
