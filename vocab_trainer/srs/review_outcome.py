"""
Review Outcome - SM-2 Derived Schedule Updates

Computes the next ease factor, interval, repetition count and due date
after a single attempt.

Key principles:
- Success grows the interval; the first two successes use fixed intervals (1, 3 days)
- Ease reflects how much effort the success took (attempts in the exercise)
- Failure resets repetitions and brings the item back tomorrow
- Ease never leaves [EASE_MIN, EASE_MAX]
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
import logging

from vocab_trainer.srs.constants import (
    BOOTSTRAP_INTERVALS,
    EASE_DELTA_BY_ATTEMPTS,
    EASE_DELTA_FAILURE,
    EASE_MAX,
    EASE_MIN,
    FAILURE_INTERVAL,
)
from vocab_trainer.srs.errors import InvalidArgumentError
from vocab_trainer.srs.learning_item import ensure_utc, round_half_up, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewSchedule:
    """Updated scheduling fields after one attempt."""
    ease: float
    interval: int
    repetitions: int
    next_due_date: datetime


def clamp_ease(ease: float) -> float:
    return max(EASE_MIN, min(EASE_MAX, ease))


def update_ease_on_success(prior_ease: float, attempts_taken: int) -> float:
    """
    Adjust ease after a successful attempt.

    1 try: +0.10 (capped at EASE_MAX)
    2 tries: -0.05 (floored at EASE_MIN)
    3+ tries: -0.15 (floored at EASE_MIN)
    """
    delta = EASE_DELTA_BY_ATTEMPTS[min(attempts_taken, 3)]
    return clamp_ease(prior_ease + delta)


def update_ease_on_failure(prior_ease: float) -> float:
    return clamp_ease(prior_ease + EASE_DELTA_FAILURE)


def next_interval_on_success(
    repetitions: int,
    prior_interval: int,
    ease: float,
    allow_zero_interval: bool = False
) -> int:
    """
    Interval (days) after a success that brought the streak to `repetitions`.

    Formula for repetitions >= 3:
        interval = round(prior_interval * ease)

    The new ease is used, not the prior one. A zero prior interval (an item
    that skipped the 1- and 3-day bootstrap) would give 0 here; that result
    is raised to 1 unless allow_zero_interval is set.

    Args:
        repetitions: Streak length including this success
        prior_interval: Interval before this attempt
        ease: Ease factor after this attempt
        allow_zero_interval: Reproduce the unguarded zero interval

    Returns:
        Interval in days
    """
    if repetitions in BOOTSTRAP_INTERVALS:
        return BOOTSTRAP_INTERVALS[repetitions]

    interval = round_half_up(prior_interval * ease)
    if interval < 1:
        logger.warning(
            "[SCHEDULE] Zero-base interval at repetitions=%d (prior_interval=%d); %s",
            repetitions,
            prior_interval,
            "keeping 0 as requested" if allow_zero_interval else "raising to 1",
        )
        if not allow_zero_interval:
            interval = 1
    return interval


def _validate_priors(
    attempts_taken: int,
    prior_ease: float,
    prior_interval: int,
    prior_repetitions: int
) -> None:
    if attempts_taken < 1:
        raise InvalidArgumentError(f"attempts_taken must be >= 1, got {attempts_taken}")
    if not EASE_MIN <= prior_ease <= EASE_MAX:
        raise InvalidArgumentError(
            f"prior_ease must be within [{EASE_MIN}, {EASE_MAX}], got {prior_ease}"
        )
    if prior_interval < 0:
        raise InvalidArgumentError(f"prior_interval must be >= 0, got {prior_interval}")
    if prior_repetitions < 0:
        raise InvalidArgumentError(f"prior_repetitions must be >= 0, got {prior_repetitions}")


def compute_next_schedule(
    correct: bool,
    attempts_taken: int,
    prior_ease: float,
    prior_interval: int,
    prior_repetitions: int,
    now: Optional[datetime] = None,
    allow_zero_interval: bool = False
) -> ReviewSchedule:
    """
    Compute the next review schedule from the latest attempt.

    On success:
        repetitions += 1, ease adjusted by attempts taken,
        interval = 1, 3, then round(prior_interval * ease)
    On failure:
        repetitions = 0, interval = 1, ease -= 0.2
        (attempts_taken is not used)

    next_due_date = now + interval calendar days (UTC).

    Args:
        correct: Whether the attempt succeeded
        attempts_taken: Tries used in the exercise (>= 1)
        prior_ease: Ease before this attempt, within [1.3, 2.5]
        prior_interval: Interval before this attempt (>= 0)
        prior_repetitions: Streak before this attempt (>= 0)
        now: Attempt time (defaults to now, UTC)
        allow_zero_interval: Keep a zero interval from a zero prior interval

    Returns:
        ReviewSchedule with the updated fields

    Raises:
        InvalidArgumentError: If any prior is outside its domain
    """
    _validate_priors(attempts_taken, prior_ease, prior_interval, prior_repetitions)
    now = ensure_utc(now) if now is not None else utc_now()

    if correct:
        repetitions = prior_repetitions + 1
        ease = update_ease_on_success(prior_ease, attempts_taken)
        interval = next_interval_on_success(
            repetitions, prior_interval, ease, allow_zero_interval=allow_zero_interval
        )
    else:
        repetitions = 0
        interval = FAILURE_INTERVAL
        ease = update_ease_on_failure(prior_ease)

    return ReviewSchedule(
        ease=ease,
        interval=interval,
        repetitions=repetitions,
        next_due_date=now + timedelta(days=interval),
    )
