"""Achievement models: rule taxonomy, catalog definitions and unlock state"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Literal, NamedTuple, Optional, Union
from datetime import datetime

from readrmood.models.activity import MoodKind


class _Rule(BaseModel):
    model_config = ConfigDict(frozen=True)


class TotalSessionsRule(_Rule):
    """Logged at least `min` sessions"""
    type: Literal["total_sessions"] = "total_sessions"
    min: int = Field(ge=0)


class TotalMinutesRule(_Rule):
    """Read at least `min` minutes in total"""
    type: Literal["total_minutes"] = "total_minutes"
    min: int = Field(ge=0)


class TotalPagesRule(_Rule):
    """Read at least `min` pages in total"""
    type: Literal["total_pages"] = "total_pages"
    min: int = Field(ge=0)


class StreakDaysRule(_Rule):
    """Read on at least `min` consecutive days"""
    type: Literal["streak_days"] = "streak_days"
    min: int = Field(ge=0)


class BooksAddedRule(_Rule):
    """Added at least `min` books to the library"""
    type: Literal["books_added"] = "books_added"
    min: int = Field(ge=0)


class SessionMinutesAtLeastRule(_Rule):
    """Completed one session lasting `min` minutes or more"""
    type: Literal["session_minutes_at_least"] = "session_minutes_at_least"
    min: int = Field(ge=0)


class WeekendSessionsRule(_Rule):
    """Started at least `min` sessions on a Saturday or Sunday"""
    type: Literal["weekend_sessions"] = "weekend_sessions"
    min: int = Field(ge=0)


class NightSessionsRule(_Rule):
    """
    Started at least `min` sessions inside the night window

    The window is [start_hour, end_hour) on the same day when
    start_hour <= end_hour, otherwise it wraps past midnight.
    """
    type: Literal["night_sessions"] = "night_sessions"
    min: int = Field(ge=0)
    start_hour: int = Field(ge=0, le=23)
    end_hour: int = Field(ge=0, le=23)


class FirstMoodRule(_Rule):
    """The earliest logged mood is `kind`"""
    type: Literal["first_mood"] = "first_mood"
    kind: MoodKind


class DistinctMoodsRule(_Rule):
    """Logged at least `min` different moods"""
    type: Literal["distinct_moods"] = "distinct_moods"
    min: int = Field(ge=0)


AchievementRule = Annotated[
    Union[
        TotalSessionsRule,
        TotalMinutesRule,
        TotalPagesRule,
        StreakDaysRule,
        BooksAddedRule,
        SessionMinutesAtLeastRule,
        WeekendSessionsRule,
        NightSessionsRule,
        FirstMoodRule,
        DistinctMoodsRule,
    ],
    Field(discriminator="type"),
]


class AchievementDefinition(BaseModel):
    """Catalog entry pairing a stable code with its unlock rule"""
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    title: str
    detail: str
    rule: AchievementRule
    icon: str
    points: int = Field(default=10, ge=0)


class Achievement(BaseModel):
    """A reader's state for one catalog achievement"""
    model_config = ConfigDict(frozen=True)

    code: str
    title: str
    description: str
    is_unlocked: bool = False
    unlocked_at: Optional[datetime] = None

    @classmethod
    def locked(cls, definition: AchievementDefinition) -> "Achievement":
        """Fresh locked record for a catalog definition"""
        return cls(
            code=definition.code,
            title=definition.title,
            description=definition.detail,
        )

    def unlock(self, at: datetime) -> "Achievement":
        """Return an unlocked copy stamped with `at`"""
        return self.model_copy(update={"is_unlocked": True, "unlocked_at": at})


class EvaluationResult(NamedTuple):
    """Outcome of one evaluation pass"""
    updated: list[Achievement]
    newly_unlocked: list[Achievement]


class AchievementProgress(BaseModel):
    """Progress toward a locked achievement"""
    code: str
    current: int
    required: int
    percentage: int = Field(ge=0, le=100)
    description: str


class AchievementSummary(BaseModel):
    """Totals across a reader's achievement state"""
    total_unlocked: int
    total_achievements: int
    total_points: int
    unlocked_codes: list[str] = Field(default_factory=list)
