"""
Reading Streak System

A streak is a run of consecutive calendar days with at least one reading
session. Several sessions on the same day count as a single day.

Days are taken in the reader's local calendar, so the timezone is passed in
explicitly by the caller.
"""

from typing import Iterable, List
from datetime import date, tzinfo
import logging

from readrmood.models.activity import ReadingSession
from readrmood.utils.datetime_helpers import days_between, local_day

logger = logging.getLogger(__name__)


def reading_days(sessions: Iterable[ReadingSession], tz: tzinfo) -> List[date]:
    """
    Distinct local days that have at least one session

    Returns:
        Days sorted ascending
    """
    return sorted({local_day(session.start, tz) for session in sessions})


def longest_consecutive_day_streak(sessions: Iterable[ReadingSession], tz: tzinfo) -> int:
    """
    Length of the longest run of consecutive reading days

    Logic:
    - Reduce every session start to its local calendar day
    - Walk the distinct days in ascending order
    - A day exactly one after the previous extends the run, anything else resets it to 1

    Args:
        sessions: Reading sessions in any order
        tz: Calendar context for day boundaries

    Returns:
        Longest run length, 0 when there are no sessions
    """
    days = reading_days(sessions, tz)
    if not days:
        return 0

    longest = 0
    current = 0
    previous = None

    for day in days:
        if previous is not None and days_between(previous, day) == 1:
            current += 1
        else:
            current = 1
        longest = max(longest, current)
        previous = day

    logger.debug(f"Longest streak {longest} days across {len(days)} reading days")
    return longest
