"""Tests for session selection."""

from datetime import timedelta

import pytest

from conftest import NOW, days_ago, make_item
from vocab_trainer.session_builders import (
    eligible_stages,
    parse_session_mode,
    parse_session_size,
    rank_items,
    select_session,
    select_specific,
    session_limit,
)
from vocab_trainer.srs.constants import SessionMode, SessionSize, Stage
from vocab_trainer.srs.errors import InvalidArgumentError


@pytest.fixture
def pool():
    return [
        make_item("intro-old", stage=Stage.INTRODUCING),
        make_item("intro-overdue", stage=Stage.INTRODUCING, next_due_date=days_ago(1)),
        make_item("recall-1", stage=Stage.RECALLING, next_due_date=NOW + timedelta(days=3)),
        make_item("recall-2", stage=Stage.RECALLING, next_due_date=days_ago(2)),
        make_item("practice-1", stage=Stage.PRACTICING, next_due_date=days_ago(4)),
        make_item("mastered-1", stage=Stage.MASTERED, next_due_date=days_ago(5)),
        make_item("mastered-2", stage=Stage.MASTERED, next_due_date=NOW + timedelta(days=20)),
    ]


class TestEligibility:
    def test_mode_stage_map(self):
        assert eligible_stages(SessionMode.INTRODUCING) == (Stage.INTRODUCING,)
        assert eligible_stages("recalling") == (Stage.RECALLING,)
        assert set(eligible_stages(SessionMode.PRACTICING)) == {Stage.PRACTICING, Stage.MASTERED}

    def test_unknown_mode(self):
        with pytest.raises(InvalidArgumentError):
            eligible_stages("mastered")

    def test_limits(self):
        assert session_limit(SessionSize.QUICK) == 5
        assert session_limit("complete") == 20

    def test_unknown_size(self):
        with pytest.raises(InvalidArgumentError, match="huge"):
            session_limit("huge")

    def test_parse_names(self):
        assert parse_session_mode("recalling") is SessionMode.RECALLING
        assert parse_session_size(SessionSize.QUICK) is SessionSize.QUICK
        with pytest.raises(InvalidArgumentError):
            parse_session_mode("revise")


class TestSelectSession:
    def test_filters_and_ranks(self, pool):
        selected = select_session(pool, SessionMode.RECALLING, SessionSize.COMPLETE, now=NOW)
        assert [item.id for item in selected] == ["recall-2", "recall-1"]

    def test_practice_includes_mastered(self, pool):
        selected = select_session(pool, SessionMode.PRACTICING, SessionSize.QUICK, now=NOW)
        # practice-1: 40 + 40, mastered-1: 20 + 50, mastered-2: 20 - 40 -> 0
        assert [item.id for item in selected] == ["practice-1", "mastered-1", "mastered-2"]
        assert [item.priority_score for item in selected] == [80, 70, 0]

    def test_quick_session_capped(self):
        items = [make_item(f"i{n}", stage=Stage.RECALLING) for n in range(8)]
        selected = select_session(items, "recalling", "quick", now=NOW)
        assert len(selected) == 5

    def test_complete_session_capped(self):
        items = [make_item(f"i{n}", stage=Stage.PRACTICING) for n in range(30)]
        assert len(select_session(items, "practicing", "complete", now=NOW)) == 20

    def test_empty_when_nothing_eligible(self, pool):
        only_mastered = [item for item in pool if item.stage == Stage.MASTERED]
        assert select_session(only_mastered, SessionMode.RECALLING, SessionSize.QUICK, now=NOW) == []
        assert select_session([], SessionMode.INTRODUCING, SessionSize.QUICK, now=NOW) == []

    def test_ties_keep_pool_order(self):
        items = [make_item(name, stage=Stage.INTRODUCING) for name in ("c", "a", "b")]
        selected = select_session(items, SessionMode.INTRODUCING, SessionSize.QUICK, now=NOW)
        assert [item.id for item in selected] == ["c", "a", "b"]

    def test_recomputes_instead_of_trusting_stored_score(self):
        stale_high = make_item("stale", stage=Stage.RECALLING, priority_score=100,
                               next_due_date=NOW + timedelta(days=10))
        due_low = make_item("due", stage=Stage.RECALLING, priority_score=0,
                            next_due_date=days_ago(1))
        selected = select_session([stale_high, due_low], "recalling", "quick", now=NOW)
        assert [item.id for item in selected] == ["due", "stale"]

    def test_input_items_not_mutated(self, pool):
        before = [item.priority_score for item in pool]
        select_session(pool, SessionMode.PRACTICING, SessionSize.COMPLETE, now=NOW)
        assert [item.priority_score for item in pool] == before

    def test_rank_items_returns_scores(self, pool):
        ranked = rank_items(pool, SessionMode.INTRODUCING, now=NOW)
        assert [(item.id, score) for item, score in ranked] == [
            ("intro-overdue", 90),
            ("intro-old", 80),
        ]


class TestSelectSpecific:
    def test_picks_one_item_regardless_of_stage(self, pool):
        selected = select_specific(pool, "mastered-2", now=NOW)
        assert [item.id for item in selected] == ["mastered-2"]

    def test_missing_id(self, pool):
        assert select_specific(pool, "nope", now=NOW) == []
