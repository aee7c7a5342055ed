"""
Metric computations for study analytics.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

import pandas as pd

from vocab_trainer.srs.constants import STAGE_ORDER, Stage
from vocab_trainer.srs.learning_item import LearningItem, ensure_utc


SESSION_ITEM_COLUMNS = ["learning_item_id", "correct", "attempts", "stage_before", "stage_after"]


def session_items_df(items: list[dict]) -> pd.DataFrame:
    """
    Build a dataframe of logged session attempts.
    """
    if not items:
        return pd.DataFrame(columns=SESSION_ITEM_COLUMNS)
    return pd.DataFrame(items)[SESSION_ITEM_COLUMNS].copy()


def compute_correct_counts(items_df: pd.DataFrame) -> tuple[int, int]:
    """
    (correct, incorrect) attempt counts.
    """
    if items_df.empty:
        return 0, 0
    correct = int(items_df["correct"].astype(bool).sum())
    return correct, int(len(items_df)) - correct


def compute_stage_moves(items_df: pd.DataFrame) -> tuple[int, int]:
    """
    Count promotions and demotions recorded in a session.

    Each attempt's stage_before/stage_after pair is compared by pipeline order.
    """
    if items_df.empty:
        return 0, 0
    order = {stage.value: rank for stage, rank in STAGE_ORDER.items()}
    delta = items_df["stage_after"].map(order) - items_df["stage_before"].map(order)
    return int((delta > 0).sum()), int((delta < 0).sum())


def items_df(items: Iterable[LearningItem]) -> pd.DataFrame:
    """
    Build a dataframe of item snapshots (stage and due date).
    """
    rows = [
        {"id": item.id, "stage": item.stage.value, "next_due_date": item.next_due_date}
        for item in items
    ]
    df = pd.DataFrame(rows, columns=["id", "stage", "next_due_date"])
    df["next_due_date"] = pd.to_datetime(df["next_due_date"], utc=True)
    return df


def compute_stage_distribution(df: pd.DataFrame) -> dict[str, int]:
    """
    Item count per stage, with every stage present.
    """
    counts = df["stage"].value_counts().reindex([s.value for s in Stage], fill_value=0)
    return {stage: int(count) for stage, count in counts.items()}


def compute_due_breakdown(df: pd.DataFrame, now: datetime) -> dict[str, int]:
    """
    Split items into overdue / due today / not due / unscheduled by UTC day.
    """
    today = pd.Timestamp(ensure_utc(now)).floor("D")
    scheduled = df["next_due_date"].dropna().dt.floor("D")
    return {
        "overdue": int((scheduled < today).sum()),
        "due_today": int((scheduled == today).sum()),
        "not_due": int((scheduled > today).sum()),
        "unscheduled": int(df["next_due_date"].isna().sum()),
    }
