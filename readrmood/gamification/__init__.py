"""
Achievement evaluation for ReadrMood

This module decides which achievements a reader has unlocked from:
- Books added to the library
- Reading sessions (minutes, pages, start time)
- Logged reading moods

Evaluation is a pure function of the activity history and the stored state.
"""

from readrmood.gamification.catalog import AchievementCatalog, DEFAULT_CATALOG
from readrmood.gamification.streak_system import longest_consecutive_day_streak, reading_days
from readrmood.gamification.achievement_system import AchievementEngine

__all__ = [
    "AchievementCatalog",
    "DEFAULT_CATALOG",
    "longest_consecutive_day_streak",
    "reading_days",
    "AchievementEngine",
]
