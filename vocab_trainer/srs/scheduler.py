"""
Scheduler - Attempt Processing

Pure scheduling pipeline for one attempt (no database calls).

Main workflow:
1. Load the item (caller's responsibility)
2. Compute the next schedule from the attempt
3. Update lifetime counters and practice timestamps
4. Evaluate a stage transition on the updated state
5. Recompute the priority score
6. Return the updated item + event data dict

Callers must not run two attempts against the same item concurrently;
the persistence layer enforces this with a version check.
"""

from __future__ import annotations
from dataclasses import replace
from datetime import datetime
from typing import Optional, Tuple, Union

from vocab_trainer.srs.constants import SessionMode, Stage
from vocab_trainer.srs.errors import InvalidArgumentError
from vocab_trainer.srs.learning_item import AttemptRecord, LearningItem, ensure_utc, utc_now
from vocab_trainer.srs.priority import priority_for_item
from vocab_trainer.srs.review_outcome import compute_next_schedule
from vocab_trainer.srs.transitions import evaluate_transition


def process_attempt(
    item: LearningItem,
    attempt: AttemptRecord,
    mode: Union[SessionMode, str, None] = None,
    now: Optional[datetime] = None,
    allow_zero_interval: bool = False
) -> Tuple[LearningItem, dict]:
    """
    Apply one attempt to an item and return the updated copy + event data.

    The input item is not modified.

    Args:
        item: Current item snapshot
        attempt: Attempt outcome
        mode: Session mode the attempt was made in (sets mode timestamps)
        now: Attempt time (defaults to now, UTC)
        allow_zero_interval: Passed through to compute_next_schedule

    Returns:
        Tuple of (updated_item, event_data_dict)
        event_data_dict (with session_id set) is ready to pass to
        database.save_attempt() or database.log_session_item()

    Raises:
        InvalidArgumentError: If the mode is not a session mode
    """
    now = ensure_utc(now) if now is not None else utc_now()
    if mode is not None:
        try:
            mode = SessionMode(mode)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown session mode {mode!r}") from exc

    schedule = compute_next_schedule(
        correct=attempt.correct,
        attempts_taken=attempt.attempts_taken,
        prior_ease=item.ease_factor,
        prior_interval=item.interval,
        prior_repetitions=item.repetitions,
        now=now,
        allow_zero_interval=allow_zero_interval,
    )

    updated = replace(
        item,
        ease_factor=schedule.ease,
        interval=schedule.interval,
        repetitions=schedule.repetitions,
        next_due_date=schedule.next_due_date,
        correct_count=item.correct_count + (1 if attempt.correct else 0),
        incorrect_count=item.incorrect_count + (0 if attempt.correct else 1),
        last_practiced_at=now,
    )

    if mode == SessionMode.INTRODUCING:
        updated.last_introduced_at = now
    elif mode == SessionMode.RECALLING:
        updated.last_recalled_at = now

    new_stage: Optional[Stage] = evaluate_transition(
        stage=updated.stage,
        repetitions=updated.repetitions,
        ease=updated.ease_factor,
        correct_count=updated.correct_count,
        incorrect_count=updated.incorrect_count,
    )
    if new_stage is not None:
        updated.stage = new_stage

    updated.priority_score = priority_for_item(updated, now=now)

    event_data = {
        'learning_item_id': item.id,
        'mode': mode.value if mode is not None else None,
        'correct': attempt.correct,
        'attempts': attempt.attempts_taken,
        'practiced_at': now,
        'stage_before': item.stage.value,
        'stage_after': updated.stage.value,
        'stage_changed': new_stage is not None,
        'ease_before': item.ease_factor,
        'ease_after': updated.ease_factor,
        'interval_after': updated.interval,
        'repetitions_after': updated.repetitions,
        'priority_after': updated.priority_score,
        'session_id': None,  # Will be set by caller
    }

    return updated, event_data
