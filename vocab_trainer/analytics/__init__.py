"""
Analytics package exports.
"""

from vocab_trainer.analytics.service import build_session_stats, due_counts, stage_distribution
from vocab_trainer.analytics.types import DueCounts, SessionStats

__all__ = [
    "build_session_stats",
    "due_counts",
    "stage_distribution",
    "DueCounts",
    "SessionStats",
]
