"""
Stage Transitions

Decides whether an item moves to an adjacent learning stage after an attempt.

    introducing -> recalling     after the first success
    recalling   -> practicing    streak >= 3, ease >= 2.0, success rate >= 75%
    recalling   -> introducing   >= 5 attempts, success rate < 40%
    practicing  -> mastered      streak >= 5, ease >= 2.3, success rate >= 85%
    practicing  -> recalling     >= 5 attempts, success rate < 50%
    mastered    -> practicing    >= 3 attempts, success rate < 70%

Advance conditions are checked before regress conditions. Only adjacent
stages are ever returned.
"""

from __future__ import annotations
from typing import Optional, Union

from vocab_trainer.srs.constants import (
    INTRODUCING_ADVANCE_REPETITIONS,
    MASTERED_REGRESS_MIN_ATTEMPTS,
    MASTERED_REGRESS_SUCCESS_RATE,
    PRACTICING_ADVANCE_EASE,
    PRACTICING_ADVANCE_REPETITIONS,
    PRACTICING_ADVANCE_SUCCESS_RATE,
    PRACTICING_REGRESS_MIN_ATTEMPTS,
    PRACTICING_REGRESS_SUCCESS_RATE,
    RECALLING_ADVANCE_EASE,
    RECALLING_ADVANCE_REPETITIONS,
    RECALLING_ADVANCE_SUCCESS_RATE,
    RECALLING_REGRESS_MIN_ATTEMPTS,
    RECALLING_REGRESS_SUCCESS_RATE,
    STAGE_ORDER,
    Stage,
)
from vocab_trainer.srs.errors import InvalidArgumentError


def success_rate(correct_count: int, incorrect_count: int) -> float:
    """Lifetime success rate; 0 when nothing has been attempted."""
    total = correct_count + incorrect_count
    return correct_count / total if total > 0 else 0.0


def evaluate_transition(
    stage: Union[Stage, str],
    repetitions: int,
    ease: float,
    correct_count: int,
    incorrect_count: int
) -> Optional[Stage]:
    """
    Determine if an item should move to another stage.

    Args:
        stage: Current stage
        repetitions: Current streak (after the latest attempt)
        ease: Current ease factor (after the latest attempt)
        correct_count: Lifetime successes (including the latest attempt)
        incorrect_count: Lifetime failures (including the latest attempt)

    Returns:
        The new stage, or None if the item stays where it is
    """
    try:
        stage = Stage(stage)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown stage {stage!r}") from exc
    if correct_count < 0 or incorrect_count < 0 or repetitions < 0:
        raise InvalidArgumentError("repetitions and attempt counters must be >= 0")

    total = correct_count + incorrect_count
    rate = success_rate(correct_count, incorrect_count)

    if stage == Stage.INTRODUCING:
        if repetitions >= INTRODUCING_ADVANCE_REPETITIONS:
            return Stage.RECALLING

    elif stage == Stage.RECALLING:
        if (
            repetitions >= RECALLING_ADVANCE_REPETITIONS
            and ease >= RECALLING_ADVANCE_EASE
            and rate >= RECALLING_ADVANCE_SUCCESS_RATE
        ):
            return Stage.PRACTICING
        if total >= RECALLING_REGRESS_MIN_ATTEMPTS and rate < RECALLING_REGRESS_SUCCESS_RATE:
            return Stage.INTRODUCING

    elif stage == Stage.PRACTICING:
        if (
            repetitions >= PRACTICING_ADVANCE_REPETITIONS
            and ease >= PRACTICING_ADVANCE_EASE
            and rate >= PRACTICING_ADVANCE_SUCCESS_RATE
        ):
            return Stage.MASTERED
        if total >= PRACTICING_REGRESS_MIN_ATTEMPTS and rate < PRACTICING_REGRESS_SUCCESS_RATE:
            return Stage.RECALLING

    elif stage == Stage.MASTERED:
        if total >= MASTERED_REGRESS_MIN_ATTEMPTS and rate < MASTERED_REGRESS_SUCCESS_RATE:
            return Stage.PRACTICING

    return None


def is_promotion(before: Union[Stage, str], after: Union[Stage, str]) -> bool:
    return STAGE_ORDER[Stage(after)] > STAGE_ORDER[Stage(before)]


def is_demotion(before: Union[Stage, str], after: Union[Stage, str]) -> bool:
    return STAGE_ORDER[Stage(after)] < STAGE_ORDER[Stage(before)]
