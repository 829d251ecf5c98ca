"""
Calendar Utilities - Centralized "today" and day range handling
"""
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

import pytz


def get_tz(name: Optional[str] = None):
    """
    Get the timezone used to decide what "today" is

    Args:
        name: IANA timezone name, or None for the system local time

    Returns:
        pytz timezone, or None for the system local time

    Raises:
        pytz.UnknownTimeZoneError: If the name is not a known timezone
    """
    if not name:
        return None
    return pytz.timezone(name)


def get_now(tz_name: Optional[str] = None) -> datetime:
    """Current datetime, in the configured timezone when there is one"""
    tz = get_tz(tz_name)
    if tz is None:
        return datetime.now()
    return datetime.now(tz)


def get_today(tz_name: Optional[str] = None) -> date:
    """
    Get today's local calendar date

    Args:
        tz_name: Optional IANA timezone name overriding the system local time

    Returns:
        date object for today
    """
    return get_now(tz_name).date()


def days_before(day: date, days: int) -> date:
    """`day` minus `days`, clamped to the first representable date"""
    if days >= (day - date.min).days:
        return date.min
    return day - timedelta(days=days)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive"""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
