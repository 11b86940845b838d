"""
Achievement Catalog

The fixed, ordered list of achievement definitions. Catalog order is the
output order of every achievement-state collection.

Default catalog:
- Sessions and streaks (first_steps, tiny_habit, weekly_flow)
- Volume (pages and minutes read)
- Library size (books added)
- Session shape (long sessions, night sessions, weekend sessions)
- Moods (distinct moods, first logged mood)
"""

from collections import Counter
from typing import Iterable, Iterator, List, Optional, Sequence
import logging

from readrmood.exceptions import CatalogError
from readrmood.models.achievement import (
    Achievement,
    AchievementDefinition,
    BooksAddedRule,
    DistinctMoodsRule,
    FirstMoodRule,
    NightSessionsRule,
    SessionMinutesAtLeastRule,
    StreakDaysRule,
    TotalMinutesRule,
    TotalPagesRule,
    TotalSessionsRule,
    WeekendSessionsRule,
)
from readrmood.models.activity import MoodKind

logger = logging.getLogger(__name__)


class AchievementCatalog:
    """Immutable, ordered collection of achievement definitions"""

    def __init__(self, definitions: Iterable[AchievementDefinition]):
        self._definitions: tuple[AchievementDefinition, ...] = tuple(definitions)

        duplicates = [code for code, n in Counter(d.code for d in self._definitions).items() if n > 1]
        if duplicates:
            raise CatalogError(
                f"Duplicate achievement codes in catalog: {', '.join(duplicates)}",
                codes=duplicates,
            )

        self._by_code = {d.code: d for d in self._definitions}
        logger.debug(f"Loaded achievement catalog with {len(self._definitions)} definitions")

    @property
    def definitions(self) -> Sequence[AchievementDefinition]:
        return self._definitions

    @property
    def codes(self) -> List[str]:
        return [d.code for d in self._definitions]

    def definition(self, code: str) -> Optional[AchievementDefinition]:
        """Definition for `code`, or None if the catalog has no such entry"""
        return self._by_code.get(code)

    def initial_state(self) -> List[Achievement]:
        """
        Locked state for every definition, in catalog order

        Used when a reader has no stored achievement state yet.
        """
        return [Achievement.locked(d) for d in self._definitions]

    def total_points(self) -> int:
        return sum(d.points for d in self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[AchievementDefinition]:
        return iter(self._definitions)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __repr__(self) -> str:
        return f"AchievementCatalog({len(self)} definitions)"


DEFAULT_DEFINITIONS: List[AchievementDefinition] = [
    AchievementDefinition(
        code="first_steps",
        title="First Steps",
        detail="Log your first reading session.",
        rule=TotalSessionsRule(min=1),
        icon="figure.walk.circle.fill",
        points=10,
    ),
    AchievementDefinition(
        code="tiny_habit",
        title="Tiny Habit",
        detail="Read 3 days in a row.",
        rule=StreakDaysRule(min=3),
        icon="leaf.fill",
        points=15,
    ),
    AchievementDefinition(
        code="weekly_flow",
        title="Weekly Flow",
        detail="Read 7 days in a row.",
        rule=StreakDaysRule(min=7),
        icon="calendar.badge.checkmark",
        points=25,
    ),
    AchievementDefinition(
        code="page_turner_100",
        title="Page Turner",
        detail="Read 100 pages in total.",
        rule=TotalPagesRule(min=100),
        icon="book.pages.fill",
        points=15,
    ),
    AchievementDefinition(
        code="deep_diver_500",
        title="Deep Diver",
        detail="Read 500 pages in total.",
        rule=TotalPagesRule(min=500),
        icon="books.vertical.fill",
        points=30,
    ),
    AchievementDefinition(
        code="time_keeper_300",
        title="Time Keeper",
        detail="Read for 300 minutes in total.",
        rule=TotalMinutesRule(min=300),
        icon="clock.badge.checkmark",
        points=20,
    ),
    AchievementDefinition(
        code="marathon_reader_1200",
        title="Marathon Reader",
        detail="Read for 1200 minutes in total.",
        rule=TotalMinutesRule(min=1200),
        icon="stopwatch.fill",
        points=40,
    ),
    AchievementDefinition(
        code="library_starter",
        title="Library Starter",
        detail="Add 3 books to your library.",
        rule=BooksAddedRule(min=3),
        icon="books.vertical",
        points=15,
    ),
    AchievementDefinition(
        code="library_builder",
        title="Library Builder",
        detail="Add 10 books to your library.",
        rule=BooksAddedRule(min=10),
        icon="books.vertical.circle.fill",
        points=30,
    ),
    AchievementDefinition(
        code="focus_burst",
        title="Focus Burst",
        detail="Complete a single session of 30 minutes or longer.",
        rule=SessionMinutesAtLeastRule(min=30),
        icon="timer",
        points=20,
    ),
    AchievementDefinition(
        code="night_owl",
        title="Night Owl",
        detail="Complete 3 sessions between 23:00 and 05:00.",
        rule=NightSessionsRule(min=3, start_hour=23, end_hour=5),
        icon="moon.stars.fill",
        points=20,
    ),
    AchievementDefinition(
        code="weekend_reader",
        title="Weekend Reader",
        detail="Complete 4 sessions on Saturday or Sunday.",
        rule=WeekendSessionsRule(min=4),
        icon="sun.max.trianglebadge.exclamationmark",
        points=15,
    ),
    AchievementDefinition(
        code="mood_explorer",
        title="Mood Explorer",
        detail="Log 4 distinct reading moods.",
        rule=DistinctMoodsRule(min=4),
        icon="face.smiling.inverse",
        points=20,
    ),
    AchievementDefinition(
        code="zen_chapter",
        title="Zen Chapter",
        detail="First logged mood is Calm.",
        rule=FirstMoodRule(kind=MoodKind.CALM),
        icon="water.waves",
        points=10,
    ),
    AchievementDefinition(
        code="laser_focus",
        title="Laser Focus",
        detail="First logged mood is Focused.",
        rule=FirstMoodRule(kind=MoodKind.FOCUSED),
        icon="target",
        points=10,
    ),
]

DEFAULT_CATALOG = AchievementCatalog(DEFAULT_DEFINITIONS)
