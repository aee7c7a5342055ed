"""
Service layer to assemble study analytics.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from vocab_trainer.analytics.metrics import (
    compute_correct_counts,
    compute_due_breakdown,
    compute_stage_distribution,
    compute_stage_moves,
    items_df,
    session_items_df,
)
from vocab_trainer.analytics.types import DueCounts, SessionStats
from vocab_trainer.srs.learning_item import LearningItem, utc_now


def build_session_stats(session: dict, items: list[dict]) -> SessionStats:
    """
    Summarize a session from its row and its logged attempts.

    Args:
        session: Session dict from database.get_session_record()
        items: Attempt dicts from database.get_session_items()
    """
    df = session_items_df(items)
    correct, incorrect = compute_correct_counts(df)
    moved_up, moved_down = compute_stage_moves(df)
    total = correct + incorrect

    # Sessions are single-mode; fall back to the first attempt's mode
    mode = session.get("mode") or (items[0]["mode"] if items else "introducing")

    return SessionStats(
        session_id=session["id"],
        session_type=session["session_type"],
        mode=mode,
        total_items=total,
        correct_items=correct,
        incorrect_items=incorrect,
        accuracy=correct / total if total else 0.0,
        duration_seconds=session.get("duration_seconds") or 0,
        started_at=session["started_at"],
        completed_at=session.get("completed_at"),
        moved_up=moved_up,
        moved_down=moved_down,
    )


def stage_distribution(items: Iterable[LearningItem]) -> dict[str, int]:
    return compute_stage_distribution(items_df(items))


def due_counts(items: Iterable[LearningItem], now: Optional[datetime] = None) -> DueCounts:
    breakdown = compute_due_breakdown(items_df(items), now or utc_now())
    return DueCounts(**breakdown)
