"""
Priority Scoring

Ranks items for review. Higher score = presented earlier.

The score starts from a stage base (replacing, not adding to, any running
total) and is then adjusted by independent, additive terms:
- due-date pressure (overdue, due today, or not yet due)
- ease penalty (harder items score higher)
- error rate
- newness (added in the last week)
- staleness (not practiced for over two weeks)
- difficulty tier (easier CEFR levels score higher)

The result is clamped to [0, 100] and rounded half-up.
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional, Union

from vocab_trainer.schemas import CEFRLevel, parse_cefr_level
from vocab_trainer.srs.constants import (
    DIFFICULTY_TIER_BONUS,
    DUE_TODAY_BONUS,
    EASE_MAX,
    EASE_PENALTY_WEIGHT,
    ERROR_RATE_WEIGHT,
    NEW_ITEM_POINTS_PER_DAY,
    NEW_ITEM_WINDOW_DAYS,
    NOT_DUE_PENALTY_PER_DAY,
    OVERDUE_MAX_BONUS,
    OVERDUE_POINTS_PER_DAY,
    PRIORITY_MAX,
    PRIORITY_MIN,
    STAGE_BASE_SCORE,
    STALE_AFTER_DAYS,
    STALE_MAX_BONUS,
    STALE_POINTS_PER_DAY,
    Stage,
)
from vocab_trainer.srs.errors import InvalidArgumentError
from vocab_trainer.srs.learning_item import (
    LearningItem,
    days_between,
    ensure_utc,
    round_half_up,
    utc_now,
)


# ---- Individual terms ----

def due_date_adjustment(next_due_date: Optional[datetime], now: datetime) -> float:
    """
    Due-date pressure.

    Overdue: +10 per day, at most +50
    Due today: +30
    Not yet due: -2 per day remaining
    No due date: 0
    """
    if next_due_date is None:
        return 0

    days_overdue = days_between(next_due_date, now)
    if days_overdue > 0:
        return min(OVERDUE_MAX_BONUS, days_overdue * OVERDUE_POINTS_PER_DAY)
    if days_overdue == 0:
        return DUE_TODAY_BONUS
    return -abs(days_overdue) * NOT_DUE_PENALTY_PER_DAY


def ease_adjustment(ease: float) -> float:
    return (EASE_MAX - ease) * EASE_PENALTY_WEIGHT


def error_rate_adjustment(correct_count: int, incorrect_count: int) -> float:
    total = correct_count + incorrect_count
    if total <= 0:
        return 0
    return (incorrect_count / total) * ERROR_RATE_WEIGHT


def newness_adjustment(added_at: datetime, now: datetime) -> float:
    days_since_added = days_between(added_at, now)
    if days_since_added < NEW_ITEM_WINDOW_DAYS:
        return (NEW_ITEM_WINDOW_DAYS - days_since_added) * NEW_ITEM_POINTS_PER_DAY
    return 0


def staleness_adjustment(last_practiced_at: Optional[datetime], now: datetime) -> float:
    if last_practiced_at is None:
        return 0
    days_since_practice = days_between(last_practiced_at, now)
    if days_since_practice > STALE_AFTER_DAYS:
        return min(STALE_MAX_BONUS, (days_since_practice - STALE_AFTER_DAYS) * STALE_POINTS_PER_DAY)
    return 0


def difficulty_tier_adjustment(difficulty_tier: Union[CEFRLevel, str, None]) -> float:
    # Absent or unrecognized tiers contribute nothing
    level = parse_cefr_level(difficulty_tier)
    if level is None:
        return 0
    return DIFFICULTY_TIER_BONUS.get(level, 0)


def clamp_priority(score: float) -> int:
    return max(PRIORITY_MIN, min(PRIORITY_MAX, round_half_up(score)))


# ---- Main API ----

def compute_priority(
    stage: Union[Stage, str],
    next_due_date: Optional[datetime],
    ease: float,
    repetitions: int,
    incorrect_count: int,
    correct_count: int,
    last_practiced_at: Optional[datetime],
    added_at: datetime,
    difficulty_tier: Union[CEFRLevel, str, None] = None,
    now: Optional[datetime] = None
) -> int:
    """
    Compute the review priority of an item.

    Overdue and stale bonuses are independent and can both apply to the
    same item.

    Args:
        stage: Current learning stage
        next_due_date: Next scheduled review (None for never-reviewed items)
        ease: Current ease factor
        repetitions: Current streak (accepted for interface parity; not scored)
        incorrect_count: Lifetime failed attempts
        correct_count: Lifetime successful attempts
        last_practiced_at: Last attempt time, if any
        added_at: When the item joined the collection
        difficulty_tier: Optional CEFR label
        now: Scoring time (defaults to now, UTC)

    Returns:
        Integer priority in [0, 100]

    Raises:
        InvalidArgumentError: On an unknown stage or negative counters
    """
    try:
        stage = Stage(stage)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown stage {stage!r}") from exc
    if correct_count < 0 or incorrect_count < 0:
        raise InvalidArgumentError(
            f"Attempt counters must be >= 0, got correct={correct_count} incorrect={incorrect_count}"
        )
    now = ensure_utc(now) if now is not None else utc_now()

    score: float = STAGE_BASE_SCORE[stage]
    score += due_date_adjustment(ensure_utc(next_due_date), now)
    score += ease_adjustment(ease)
    score += error_rate_adjustment(correct_count, incorrect_count)
    score += newness_adjustment(ensure_utc(added_at), now)
    score += staleness_adjustment(ensure_utc(last_practiced_at), now)
    score += difficulty_tier_adjustment(difficulty_tier)

    return clamp_priority(score)


def priority_for_item(item: LearningItem, now: Optional[datetime] = None) -> int:
    """
    Compute priority from a LearningItem snapshot.

    The stored priority_score is never read.
    """
    return compute_priority(
        stage=item.stage,
        next_due_date=item.next_due_date,
        ease=item.ease_factor,
        repetitions=item.repetitions,
        incorrect_count=item.incorrect_count,
        correct_count=item.correct_count,
        last_practiced_at=item.last_practiced_at,
        added_at=item.added_at,
        difficulty_tier=item.difficulty_tier,
        now=now,
    )
