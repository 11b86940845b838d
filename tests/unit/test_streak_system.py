"""Unit tests for Streak System (readrmood/gamification/streak_system.py)"""
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from readrmood.gamification.streak_system import longest_consecutive_day_streak, reading_days
from readrmood.models.activity import ReadingSession


# ============================================================================
# Longest Streak Tests
# ============================================================================

def test_longest_streak_empty(utc):
    """Test that no sessions means no streak"""
    assert longest_consecutive_day_streak([], utc) == 0


def test_longest_streak_single_session(utc, make_session):
    """Test that one session is a one-day streak"""
    assert longest_consecutive_day_streak([make_session()], utc) == 1


def test_longest_streak_gap_breaks_run(utc, make_session):
    """Test Jan 1, 2, 3 and 5 give a streak of 3, not 4"""
    sessions = [make_session(day=d) for d in (1, 2, 3, 5)]

    assert longest_consecutive_day_streak(sessions, utc) == 3


def test_longest_streak_same_day_counts_once(utc, make_session):
    """Test multiple sessions on one day do not lengthen the streak"""
    sessions = [
        make_session(day=1, hour=8),
        make_session(day=1, hour=20),
        make_session(day=2, hour=9),
    ]

    assert longest_consecutive_day_streak(sessions, utc) == 2


def test_longest_streak_unordered_input(utc, make_session):
    """Test session order does not matter"""
    sessions = [make_session(day=d) for d in (10, 3, 11, 1, 12, 2, 13)]

    assert longest_consecutive_day_streak(sessions, utc) == 4


def test_longest_streak_across_month_boundary(utc, make_session):
    """Test Jan 31 to Feb 1 is consecutive"""
    sessions = [make_session(month=1, day=31), make_session(month=2, day=1)]

    assert longest_consecutive_day_streak(sessions, utc) == 2


def test_longest_streak_uses_local_days():
    """Test day boundaries follow the given timezone"""
    # 23:30 and 00:30 UTC are two UTC days but the same day in New York
    sessions = [
        ReadingSession(start=datetime(2024, 1, 1, 23, 30, tzinfo=timezone.utc), minutes=10),
        ReadingSession(start=datetime(2024, 1, 2, 0, 30, tzinfo=timezone.utc), minutes=10),
    ]

    assert longest_consecutive_day_streak(sessions, ZoneInfo("UTC")) == 2
    assert longest_consecutive_day_streak(sessions, ZoneInfo("America/New_York")) == 1


# ============================================================================
# Reading Days Tests
# ============================================================================

def test_reading_days_sorted_and_distinct(utc, make_session):
    """Test reading days are unique and ascending"""
    sessions = [make_session(day=3), make_session(day=1), make_session(day=3, hour=18)]

    assert reading_days(sessions, utc) == [date(2024, 1, 1), date(2024, 1, 3)]
