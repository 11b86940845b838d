"""
Local-Calendar Date/Time Helpers

Achievement rules look at calendar days, weekdays and hours. Those only have
a meaning inside a timezone, so every helper here takes the timezone
explicitly instead of reading the process default.

RULES:
- Aware datetimes are converted into the given timezone
- Naive datetimes are taken as wall-clock time already in that timezone
- Unknown timezone names fall back to UTC
"""

import logging
from datetime import date, datetime, tzinfo
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from readrmood import config

logger = logging.getLogger(__name__)

TimezoneLike = Union[str, tzinfo, None]

# Saturday and Sunday in datetime.weekday() numbering
WEEKEND_DAYS = frozenset({5, 6})


def resolve_timezone(tz: TimezoneLike = None) -> tzinfo:
    """
    Turn a timezone name or object into a tzinfo

    Args:
        tz: IANA name, tzinfo instance, or None for the configured default

    Returns:
        tzinfo for the requested zone, or UTC if the name is unknown
    """
    if isinstance(tz, tzinfo):
        return tz

    tz_str = tz or config.DEFAULT_TIMEZONE
    try:
        return ZoneInfo(tz_str)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.error(f"Invalid timezone '{tz_str}', falling back to UTC: {e}")
        return ZoneInfo("UTC")


def now_utc() -> datetime:
    """Current datetime in UTC (timezone-aware)"""
    return datetime.now(ZoneInfo("UTC"))


def to_local(dt: datetime, tz: tzinfo) -> datetime:
    """Express `dt` in `tz`, treating naive values as already local"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def local_day(dt: datetime, tz: tzinfo) -> date:
    """Calendar day of `dt` in `tz`, time of day discarded"""
    return to_local(dt, tz).date()


def local_hour(dt: datetime, tz: tzinfo) -> int:
    """Hour of day (0-23) of `dt` in `tz`"""
    return to_local(dt, tz).hour


def is_weekend(dt: datetime, tz: tzinfo) -> bool:
    """Whether `dt` falls on a Saturday or Sunday in `tz`"""
    return to_local(dt, tz).weekday() in WEEKEND_DAYS


def is_in_hour_window(hour: int, start_hour: int, end_hour: int) -> bool:
    """
    Check an hour against a window that may wrap past midnight

    start_hour <= end_hour: [start_hour, end_hour) on the same day.
    start_hour > end_hour: hour >= start_hour or hour < end_hour (e.g. 23 -> 5).
    """
    if start_hour <= end_hour:
        return start_hour <= hour < end_hour
    return hour >= start_hour or hour < end_hour


def days_between(start: date, end: date) -> int:
    """Whole calendar days from `start` to `end`"""
    return (end - start).days
