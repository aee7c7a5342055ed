"""Shared fixtures for vocab_trainer tests."""

from datetime import datetime, timedelta, timezone

import pytest

from vocab_trainer.srs import database
from vocab_trainer.srs.learning_item import LearningItem


NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def days_ago(days: float) -> datetime:
    return NOW - timedelta(days=days)


def make_item(item_id: str = "item-1", **overrides) -> LearningItem:
    """LearningItem added long ago, so the newness bonus does not apply."""
    values = {"id": item_id, "added_at": days_ago(60)}
    values.update(overrides)
    return LearningItem(**values)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Fresh SQLite learning database per test."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'learning.db'}")
    monkeypatch.delenv("TEST_MODE", raising=False)
    database.dispose_engine()
    database.init_db()
    yield database
    database.dispose_engine()
