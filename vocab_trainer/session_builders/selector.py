"""
Session Selector - Priority-Ranked Session Creation

Creates study sessions from a user's item pool:
1. Filter to the stages eligible for the requested mode
2. Score every eligible item with a freshly computed priority
3. Sort by priority (highest first); ties keep pool order
4. Take the first N (5 for quick, 20 for complete)

Practice sessions also surface mastered items for maintenance.
"""

from __future__ import annotations
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional, Union

from vocab_trainer.srs.constants import (
    MODE_ELIGIBLE_STAGES,
    SESSION_SIZE_LIMITS,
    SessionMode,
    SessionSize,
    Stage,
)
from vocab_trainer.srs.errors import InvalidArgumentError
from vocab_trainer.srs.learning_item import LearningItem, ensure_utc, utc_now
from vocab_trainer.srs.priority import priority_for_item


def parse_session_mode(mode: Union[SessionMode, str]) -> SessionMode:
    try:
        return SessionMode(mode)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown session mode {mode!r}") from exc


def parse_session_size(size: Union[SessionSize, str]) -> SessionSize:
    try:
        return SessionSize(size)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown session size {size!r}") from exc


def eligible_stages(mode: Union[SessionMode, str]) -> tuple[Stage, ...]:
    """Stages an item may be in to appear in a session of this mode."""
    return MODE_ELIGIBLE_STAGES[parse_session_mode(mode)]


def session_limit(size: Union[SessionSize, str]) -> int:
    return SESSION_SIZE_LIMITS[parse_session_size(size)]


def rank_items(
    items: Iterable[LearningItem],
    mode: Union[SessionMode, str],
    now: Optional[datetime] = None
) -> list[tuple[LearningItem, int]]:
    """
    Score and sort the items eligible for a mode.

    Returns:
        List of (item, priority) pairs, highest priority first.
        Equal priorities keep their input order.
    """
    now = ensure_utc(now) if now is not None else utc_now()
    stages = eligible_stages(mode)

    scored = [
        (item, priority_for_item(item, now=now))
        for item in items
        if item.stage in stages
    ]
    # sorted() is stable, so ties keep pool order
    return sorted(scored, key=lambda pair: -pair[1])


def select_session(
    items: Iterable[LearningItem],
    mode: Union[SessionMode, str],
    size: Union[SessionSize, str],
    now: Optional[datetime] = None
) -> list[LearningItem]:
    """
    Select the items for one study session.

    Args:
        items: The user's item pool
        mode: Session mode (introducing, recalling, practicing)
        size: Session size (quick = 5, complete = 20)
        now: Selection time (defaults to now, UTC)

    Returns:
        Copies of the selected items carrying their fresh priority_score.
        Empty when nothing is eligible (nothing to study in this mode).
    """
    limit = session_limit(size)
    ranked = rank_items(items, mode, now=now)
    return [replace(item, priority_score=score) for item, score in ranked[:limit]]


def select_specific(
    items: Iterable[LearningItem],
    item_id: str,
    now: Optional[datetime] = None
) -> list[LearningItem]:
    """
    Build a single-item session for one chosen item, regardless of stage.

    Returns:
        A one-element list, or an empty list if the id is not in the pool
    """
    for item in items:
        if item.id == item_id:
            return [replace(item, priority_score=priority_for_item(item, now=now))]
    return []
