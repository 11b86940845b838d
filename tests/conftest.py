"""Global test fixtures and utilities for readrmood tests"""
import pytest
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from readrmood.gamification.achievement_system import AchievementEngine
from readrmood.gamification.catalog import DEFAULT_CATALOG
from readrmood.models.activity import Book, MoodKind, ReadingMood, ReadingSession


FIXED_NOW = datetime(2024, 3, 1, 9, 30, 0, tzinfo=timezone.utc)


# ============================================================================
# Calendar & Clock Fixtures
# ============================================================================

@pytest.fixture
def utc():
    """Pinned calendar context"""
    return ZoneInfo("UTC")


@pytest.fixture
def fixed_now():
    """Timestamp returned by the test clock"""
    return FIXED_NOW


@pytest.fixture
def engine(utc, fixed_now):
    """Engine over the default catalog with pinned timezone and clock"""
    return AchievementEngine(DEFAULT_CATALOG, tz=utc, clock=lambda: fixed_now)


# ============================================================================
# Activity Factories
# ============================================================================

@pytest.fixture
def make_session():
    """Build a ReadingSession starting at the given UTC wall-clock time"""
    def _make(year=2024, month=1, day=1, hour=12, minutes=10, pages=5):
        return ReadingSession(
            start=datetime(year, month, day, hour, 0, tzinfo=timezone.utc),
            minutes=minutes,
            pages=pages,
        )
    return _make


@pytest.fixture
def make_mood():
    """Build a ReadingMood logged at noon UTC on the given day"""
    def _make(mood: MoodKind, year=2024, month=1, day=1, hour=12):
        return ReadingMood(
            date=datetime(year, month, day, hour, 0, tzinfo=timezone.utc),
            mood=mood,
        )
    return _make


@pytest.fixture
def make_books():
    """Build n books"""
    def _make(n: int):
        return [Book(title=f"Book {i}") for i in range(n)]
    return _make
