"""
Learning Item - Scheduling State and Calendar Helpers

Defines the reviewable unit (a user's association with one vocabulary entry)
and the small time helpers shared by the scheduling modules.

Key concepts:
- Stage: position in the introducing -> recalling -> practicing -> mastered pipeline
- Ease factor: multiplier controlling how quickly intervals grow (1.3 - 2.5)
- Interval: days until the next scheduled review
- Repetitions: consecutive successful reviews since the last failure
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union
import math
import uuid

from vocab_trainer.schemas import CEFRLevel, LearningItemRecord, parse_cefr_level
from vocab_trainer.srs.constants import (
    INITIAL_EASE,
    INITIAL_INTERVAL,
    INITIAL_PRIORITY,
    INITIAL_REPETITIONS,
    INITIAL_STAGE,
    Stage,
)
from vocab_trainer.srs.errors import InvalidArgumentError


@dataclass
class LearningItem:
    """
    Scheduling state for one vocabulary entry in a user's collection.

    The engine treats instances as snapshots: engine functions never mutate
    the item they are given.
    """
    id: str
    added_at: datetime

    stage: Stage = INITIAL_STAGE
    ease_factor: float = INITIAL_EASE
    interval: int = INITIAL_INTERVAL
    repetitions: int = INITIAL_REPETITIONS
    next_due_date: Optional[datetime] = None

    # Lifetime counters
    correct_count: int = 0
    incorrect_count: int = 0

    last_practiced_at: Optional[datetime] = None
    last_introduced_at: Optional[datetime] = None
    last_recalled_at: Optional[datetime] = None

    difficulty_tier: Optional[CEFRLevel] = None

    # Derived; stored for display and sorting only
    priority_score: int = INITIAL_PRIORITY

    vocabulary_id: Optional[str] = None
    version: int = 0  # Persistence token for optimistic concurrency

    def __post_init__(self):
        """Normalize enum and timestamp fields."""
        self.stage = Stage(self.stage)
        self.difficulty_tier = parse_cefr_level(self.difficulty_tier)
        self.added_at = ensure_utc(self.added_at)
        self.next_due_date = ensure_utc(self.next_due_date)
        self.last_practiced_at = ensure_utc(self.last_practiced_at)
        self.last_introduced_at = ensure_utc(self.last_introduced_at)
        self.last_recalled_at = ensure_utc(self.last_recalled_at)

    @property
    def total_attempts(self) -> int:
        return self.correct_count + self.incorrect_count


@dataclass(frozen=True)
class AttemptRecord:
    """Outcome of one exercise attempt."""
    correct: bool
    attempts_taken: int = 1

    def __post_init__(self):
        if self.attempts_taken < 1:
            raise InvalidArgumentError(
                f"attempts_taken must be >= 1, got {self.attempts_taken}"
            )


# ---- Time helpers ----

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a timestamp to an aware UTC datetime.

    Naive datetimes (e.g. read back from SQLite) are interpreted as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def days_between(earlier: datetime, later: datetime) -> int:
    """
    Whole UTC calendar days from earlier to later.

    Negative when earlier is actually after later.
    """
    return (ensure_utc(later).date() - ensure_utc(earlier).date()).days


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


# ---- Construction ----

def new_learning_item(
    added_at: Optional[datetime] = None,
    item_id: Optional[str] = None,
    vocabulary_id: Optional[str] = None,
    difficulty_tier: Union[CEFRLevel, str, None] = None
) -> LearningItem:
    """
    Initialize state for an entry that just joined a user's collection.

    Args:
        added_at: Creation time (defaults to now)
        item_id: Identifier (defaults to a random UUID)
        vocabulary_id: Lexicon entry this item tracks
        difficulty_tier: Optional CEFR label of the entry

    Returns:
        LearningItem in the introducing stage with initial values
    """
    return LearningItem(
        id=item_id or str(uuid.uuid4()),
        added_at=added_at or utc_now(),
        vocabulary_id=vocabulary_id,
        difficulty_tier=difficulty_tier,
    )


def from_record(row: Union[Mapping[str, Any], LearningItemRecord]) -> LearningItem:
    """
    Build a LearningItem from a storage row or API payload.

    This is the only place where field names are translated.
    """
    record = row if isinstance(row, LearningItemRecord) else LearningItemRecord.model_validate(dict(row))
    try:
        stage = Stage(record.stage)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown stage {record.stage!r} for item {record.id}") from exc

    return LearningItem(
        id=record.id,
        added_at=record.added_at,
        stage=stage,
        ease_factor=record.ease_factor,
        interval=record.interval,
        repetitions=record.repetitions,
        next_due_date=record.next_due_date,
        correct_count=record.correct_count,
        incorrect_count=record.incorrect_count,
        last_practiced_at=record.last_practiced_at,
        last_introduced_at=record.last_introduced_at,
        last_recalled_at=record.last_recalled_at,
        difficulty_tier=record.difficulty_tier,
        priority_score=record.priority_score,
        vocabulary_id=record.vocabulary_id,
        version=record.version,
    )
