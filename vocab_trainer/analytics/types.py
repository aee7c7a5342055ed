"""
Types for study analytics.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SessionStats:
    """
    Summary of one study session.
    """
    session_id: str
    session_type: str
    mode: str
    total_items: int
    correct_items: int
    incorrect_items: int
    accuracy: float
    duration_seconds: int
    started_at: datetime
    completed_at: Optional[datetime]
    moved_up: int
    moved_down: int


@dataclass(frozen=True)
class DueCounts:
    """
    Pool breakdown by due status on a given day.
    """
    overdue: int
    due_today: int
    not_due: int
    unscheduled: int
