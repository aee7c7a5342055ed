"""Tests for study analytics."""

from datetime import timedelta

from conftest import NOW, days_ago, make_item
from vocab_trainer.analytics import build_session_stats, due_counts, stage_distribution


def attempt(correct, before="introducing", after="introducing"):
    return {
        "learning_item_id": "item-1",
        "mode": "introducing",
        "correct": correct,
        "attempts": 1,
        "stage_before": before,
        "stage_after": after,
    }


SESSION = {
    "id": "s-1",
    "session_type": "quick",
    "mode": "recalling",
    "started_at": NOW,
    "completed_at": NOW + timedelta(seconds=90),
    "duration_seconds": 90,
}


# ============================================================================
# Session stats
# ============================================================================

class TestSessionStats:
    def test_counts_and_moves(self):
        items = [
            attempt(True, "recalling", "practicing"),
            attempt(False, "recalling", "introducing"),
            attempt(True, "recalling", "recalling"),
            attempt(False, "practicing", "recalling"),
        ]
        stats = build_session_stats(SESSION, items)
        assert stats.total_items == 4
        assert stats.correct_items == 2
        assert stats.incorrect_items == 2
        assert stats.accuracy == 0.5
        assert stats.moved_up == 1
        assert stats.moved_down == 2
        assert stats.duration_seconds == 90
        assert stats.mode == "recalling"

    def test_empty_session(self):
        stats = build_session_stats({**SESSION, "completed_at": None, "duration_seconds": None}, [])
        assert stats.total_items == 0
        assert stats.accuracy == 0.0
        assert stats.moved_up == stats.moved_down == 0
        assert stats.duration_seconds == 0


# ============================================================================
# Pool breakdowns
# ============================================================================

class TestPoolBreakdowns:
    def test_stage_distribution_lists_every_stage(self):
        items = [
            make_item("a"),
            make_item("b", stage="recalling"),
            make_item("c", stage="recalling"),
        ]
        assert stage_distribution(items) == {
            "introducing": 1,
            "recalling": 2,
            "practicing": 0,
            "mastered": 0,
        }

    def test_due_counts_by_calendar_day(self):
        items = [
            make_item("late", next_due_date=days_ago(2)),
            make_item("today-early", next_due_date=NOW.replace(hour=0, minute=5)),
            make_item("today-late", next_due_date=NOW.replace(hour=23)),
            make_item("tomorrow", next_due_date=NOW + timedelta(days=1)),
            make_item("new"),
        ]
        counts = due_counts(items, now=NOW)
        assert counts.overdue == 1
        assert counts.due_today == 2
        assert counts.not_due == 1
        assert counts.unscheduled == 1

    def test_empty_pool(self):
        counts = due_counts([], now=NOW)
        assert (counts.overdue, counts.due_today, counts.not_due, counts.unscheduled) == (0, 0, 0, 0)
        assert stage_distribution([]) == {
            "introducing": 0,
            "recalling": 0,
            "practicing": 0,
            "mastered": 0,
        }
