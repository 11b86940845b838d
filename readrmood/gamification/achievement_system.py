"""
Achievement System

Decides which catalog achievements a reader has earned from their activity
history (books, reading sessions, mood logs).

Features:
- Full recomputation on every call, whatever activity changed
- Monotonic unlocks: an unlocked achievement is never locked again
- State always mirrors the catalog (unknown codes dropped, missing ones locked)
- Progress tracking for locked achievements
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, assert_never
from datetime import datetime, tzinfo
import logging

from readrmood.gamification.catalog import DEFAULT_CATALOG, AchievementCatalog
from readrmood.gamification.streak_system import longest_consecutive_day_streak
from readrmood.models.achievement import (
    Achievement,
    AchievementProgress,
    AchievementRule,
    AchievementSummary,
    BooksAddedRule,
    DistinctMoodsRule,
    EvaluationResult,
    FirstMoodRule,
    NightSessionsRule,
    SessionMinutesAtLeastRule,
    StreakDaysRule,
    TotalMinutesRule,
    TotalPagesRule,
    TotalSessionsRule,
    WeekendSessionsRule,
)
from readrmood.models.activity import Book, MoodKind, ReadingMood, ReadingSession
from readrmood.utils.datetime_helpers import (
    TimezoneLike,
    is_in_hour_window,
    is_weekend,
    local_hour,
    now_utc,
    resolve_timezone,
    to_local,
)

logger = logging.getLogger(__name__)


class AchievementEngine:
    """
    Stateless evaluator for an achievement catalog

    Args:
        catalog: Definitions to evaluate, in output order
        tz: Calendar context for day, weekday and hour rules
            (None uses READRMOOD_TIMEZONE)
        clock: Source of the unlock timestamp
    """

    def __init__(
        self,
        catalog: AchievementCatalog = DEFAULT_CATALOG,
        tz: TimezoneLike = None,
        clock: Callable[[], datetime] = now_utc
    ):
        self.catalog = catalog
        self.tz: tzinfo = resolve_timezone(tz)
        self.clock = clock

    def evaluate(
        self,
        books: Iterable[Book],
        sessions: Iterable[ReadingSession],
        moods: Iterable[ReadingMood],
        current_state: Iterable[Achievement]
    ) -> EvaluationResult:
        """
        Recompute every catalog rule and merge the result into the current state

        Args:
            books: Reader's library
            sessions: All logged reading sessions
            moods: All logged moods
            current_state: Previously stored achievement records (may be empty,
                stale, or contain duplicate or unknown codes)

        Returns:
            EvaluationResult(updated, newly_unlocked), both in catalog order.
            `updated` holds exactly one record per catalog code.
        """
        books = list(books)
        sessions = list(sessions)
        moods = list(moods)

        # Later duplicates overwrite earlier ones
        state_by_code: Dict[str, Achievement] = {ach.code: ach for ach in current_state}
        newly_unlocked: List[Achievement] = []
        unlocked_at: Optional[datetime] = None

        for definition in self.catalog:
            satisfied = self.check_rule(definition.rule, books, sessions, moods)
            existing = state_by_code.get(definition.code)
            if existing is None:
                existing = Achievement.locked(definition)

            if satisfied and not existing.is_unlocked:
                if unlocked_at is None:
                    unlocked_at = self.clock()
                unlocked = existing.unlock(unlocked_at)
                state_by_code[definition.code] = unlocked
                newly_unlocked.append(unlocked)

                logger.info(
                    f"Unlocked achievement: {definition.code} "
                    f"({definition.title}) +{definition.points} points"
                )
            else:
                state_by_code[definition.code] = existing

        updated = [state_by_code[code] for code in self.catalog.codes]

        logger.debug(
            f"Evaluated {len(self.catalog)} achievements over {len(books)} books, "
            f"{len(sessions)} sessions, {len(moods)} moods: {len(newly_unlocked)} newly unlocked"
        )

        return EvaluationResult(updated=updated, newly_unlocked=newly_unlocked)

    def evaluate_on_new_session(
        self,
        session: ReadingSession,
        books: Iterable[Book],
        sessions: Iterable[ReadingSession],
        moods: Iterable[ReadingMood],
        current_state: Iterable[Achievement]
    ) -> EvaluationResult:
        """Re-evaluate after `session` was logged; `sessions` already includes it"""
        return self.evaluate(books, sessions, moods, current_state)

    def evaluate_on_new_mood(
        self,
        mood: ReadingMood,
        books: Iterable[Book],
        sessions: Iterable[ReadingSession],
        moods: Iterable[ReadingMood],
        current_state: Iterable[Achievement]
    ) -> EvaluationResult:
        """Re-evaluate after `mood` was logged; `moods` already includes it"""
        return self.evaluate(books, sessions, moods, current_state)

    def evaluate_on_books_changed(
        self,
        books: Iterable[Book],
        sessions: Iterable[ReadingSession],
        moods: Iterable[ReadingMood],
        current_state: Iterable[Achievement]
    ) -> EvaluationResult:
        """Re-evaluate after a book was added or removed"""
        return self.evaluate(books, sessions, moods, current_state)

    def check_rule(
        self,
        rule: AchievementRule,
        books: Sequence[Book],
        sessions: Sequence[ReadingSession],
        moods: Sequence[ReadingMood]
    ) -> bool:
        """Whether the activity history satisfies `rule`"""
        match rule:
            case TotalSessionsRule(min=minimum):
                return len(sessions) >= minimum

            case TotalMinutesRule(min=minimum):
                return _total_minutes(sessions) >= minimum

            case TotalPagesRule(min=minimum):
                return _total_pages(sessions) >= minimum

            case StreakDaysRule(min=minimum):
                return longest_consecutive_day_streak(sessions, self.tz) >= minimum

            case BooksAddedRule(min=minimum):
                return len(books) >= minimum

            case SessionMinutesAtLeastRule(min=minimum):
                # Raw minutes, no clamping
                return any(s.minutes >= minimum for s in sessions)

            case WeekendSessionsRule(min=minimum):
                return self._weekend_count(sessions) >= minimum

            case NightSessionsRule(min=minimum, start_hour=start_hour, end_hour=end_hour):
                return self._night_count(sessions, start_hour, end_hour) >= minimum

            case FirstMoodRule(kind=kind):
                first = _first_mood(moods, self.tz)
                return first is not None and first == kind

            case DistinctMoodsRule(min=minimum):
                return _distinct_mood_count(moods) >= minimum

            case _:
                assert_never(rule)

    def rule_progress(
        self,
        rule: AchievementRule,
        books: Sequence[Book],
        sessions: Sequence[ReadingSession],
        moods: Sequence[ReadingMood]
    ) -> tuple[int, int]:
        """
        Current and required amounts for `rule`

        Returns:
            (current, required). First-mood rules report (1, 1) when met,
            otherwise (0, 1).
        """
        match rule:
            case TotalSessionsRule(min=minimum):
                return len(sessions), minimum

            case TotalMinutesRule(min=minimum):
                return _total_minutes(sessions), minimum

            case TotalPagesRule(min=minimum):
                return _total_pages(sessions), minimum

            case StreakDaysRule(min=minimum):
                return longest_consecutive_day_streak(sessions, self.tz), minimum

            case BooksAddedRule(min=minimum):
                return len(books), minimum

            case SessionMinutesAtLeastRule(min=minimum):
                longest = max((s.minutes for s in sessions), default=0)
                return max(0, longest), minimum

            case WeekendSessionsRule(min=minimum):
                return self._weekend_count(sessions), minimum

            case NightSessionsRule(min=minimum, start_hour=start_hour, end_hour=end_hour):
                return self._night_count(sessions, start_hour, end_hour), minimum

            case FirstMoodRule(kind=kind):
                return (1 if _first_mood(moods, self.tz) == kind else 0), 1

            case DistinctMoodsRule(min=minimum):
                return _distinct_mood_count(moods), minimum

            case _:
                assert_never(rule)

    def get_achievement_progress(
        self,
        books: Iterable[Book],
        sessions: Iterable[ReadingSession],
        moods: Iterable[ReadingMood],
        current_state: Iterable[Achievement]
    ) -> List[AchievementProgress]:
        """
        Progress toward each locked achievement

        Returns:
            Locked achievements sorted closest to completion first; ties keep
            catalog order.
        """
        books = list(books)
        sessions = list(sessions)
        moods = list(moods)
        state_by_code = {ach.code: ach for ach in current_state}

        progress = []
        for definition in self.catalog:
            record = state_by_code.get(definition.code)
            if record is not None and record.is_unlocked:
                continue

            current, required = self.rule_progress(definition.rule, books, sessions, moods)
            if required > 0:
                percentage = min(100, current * 100 // required)
            else:
                percentage = 100

            progress.append(AchievementProgress(
                code=definition.code,
                current=current,
                required=required,
                percentage=percentage,
                description=f"{current}/{required}",
            ))

        progress.sort(key=lambda p: p.percentage, reverse=True)
        return progress

    def summarize(self, state: Iterable[Achievement]) -> AchievementSummary:
        """Unlocked count and points earned, counting catalog codes only"""
        unlocked_codes = {ach.code for ach in state if ach.is_unlocked}
        unlocked = [d for d in self.catalog if d.code in unlocked_codes]

        return AchievementSummary(
            total_unlocked=len(unlocked),
            total_achievements=len(self.catalog),
            total_points=sum(d.points for d in unlocked),
            unlocked_codes=[d.code for d in unlocked],
        )

    def _weekend_count(self, sessions: Sequence[ReadingSession]) -> int:
        return sum(1 for s in sessions if is_weekend(s.start, self.tz))

    def _night_count(self, sessions: Sequence[ReadingSession], start_hour: int, end_hour: int) -> int:
        return sum(
            1 for s in sessions
            if is_in_hour_window(local_hour(s.start, self.tz), start_hour, end_hour)
        )


# ============================================
# Activity Aggregates
# ============================================

def _total_minutes(sessions: Sequence[ReadingSession]) -> int:
    return sum(max(0, s.minutes) for s in sessions)


def _total_pages(sessions: Sequence[ReadingSession]) -> int:
    return sum(max(0, s.pages) for s in sessions)


def _first_mood(moods: Sequence[ReadingMood], tz: tzinfo) -> Optional[MoodKind]:
    """Mood of the earliest-dated record; on equal dates the first in input order wins"""
    if not moods:
        return None
    return min(moods, key=lambda m: to_local(m.date, tz)).mood


def _distinct_mood_count(moods: Sequence[ReadingMood]) -> int:
    return len({m.mood for m in moods})
