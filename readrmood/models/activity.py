"""
Reading activity models consumed by the achievement engine

Rules read only the book count, session start/minutes/pages, and mood
date/kind. Ids, titles, authors, book links and notes are host fields carried
through unchanged so callers can pass their stored records directly.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from uuid import UUID, uuid4

from readrmood.utils.datetime_helpers import now_utc


class MoodKind(str, Enum):
    """Moods a reader can log after a session"""
    CALM = "calm"
    FOCUSED = "focused"
    CURIOUS = "curious"
    COZY = "cozy"
    INSPIRED = "inspired"
    MELANCHOLY = "melancholy"
    EXCITED = "excited"
    SLEEPY = "sleepy"


class Book(BaseModel):
    """Book in the reader's library; only the count of books matters to rules"""
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    title: str = ""
    author: Optional[str] = None
    added_at: datetime = Field(default_factory=now_utc)


class ReadingSession(BaseModel):
    """
    A single reading session

    minutes and pages are kept as entered, negatives included.
    Totals clamp them to zero when accumulating.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    start: datetime
    minutes: int = 0
    pages: int = 0
    book_id: Optional[UUID] = None


class ReadingMood(BaseModel):
    """Mood logged by the reader"""
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    date: datetime
    mood: MoodKind
    note: Optional[str] = None
