"""
Timezone utilities for CalItems.

All item timestamps are stored as timezone-aware UTC datetimes.
"""

from datetime import datetime, date
from typing import Optional, Union
import pytz


def utc_now() -> datetime:
    """Current time as a UTC datetime."""
    return datetime.now(pytz.UTC)


def to_utc_datetime(dt: Union[datetime, date]) -> datetime:
    """
    Convert a datetime or date to a UTC datetime.

    Args:
        dt: A datetime (aware or naive) or a date.

    Returns:
        A timezone-aware datetime in UTC.
        Naive datetimes are taken to be UTC already.
        Dates become midnight UTC of that day.
    """
    if isinstance(dt, date) and not isinstance(dt, datetime):
        dt = datetime.combine(dt, datetime.min.time())

    if dt.tzinfo is None:
        return pytz.UTC.localize(dt)
    return dt.astimezone(pytz.UTC)


def optional_utc_datetime(dt: Optional[Union[datetime, date]]) -> Optional[datetime]:
    """Like to_utc_datetime, passing None through."""
    if dt is None:
        return None
    return to_utc_datetime(dt)
