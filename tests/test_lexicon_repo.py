"""Tests for lexicon lookups against a mocked collection."""

from unittest.mock import MagicMock

import pytest

from vocab_trainer import lexicon_repo
from vocab_trainer.schemas import CEFRLevel


@pytest.fixture
def collection(monkeypatch):
    mock = MagicMock()
    monkeypatch.setattr(lexicon_repo, "_collection", mock)
    return mock


def test_missing_uri_raises(monkeypatch):
    monkeypatch.setattr(lexicon_repo, "_collection", None)
    monkeypatch.delenv("MONGO_URI", raising=False)
    with pytest.raises(ValueError, match="MONGO_URI"):
        lexicon_repo.get_collection()


def test_get_entry(collection):
    collection.find_one.return_value = {
        "_id": "ignored",
        "word_id": "nou-7",
        "type": "noun",
        "german": "Haus",
        "english": ["house"],
        "difficulty": "a1",
    }
    entry = lexicon_repo.get_entry("nou-7")
    collection.find_one.assert_called_once_with({"vocabulary_id": "nou-7"})
    assert entry.vocabulary_id == "nou-7"
    assert entry.target_word == "Haus"
    assert entry.difficulty == CEFRLevel.A1


def test_get_entry_not_found(collection):
    collection.find_one.return_value = None
    assert lexicon_repo.get_entry("nope") is None


def test_get_difficulty_tiers(collection):
    collection.find.return_value = [
        {"vocabulary_id": "a", "target_word": "gehen", "difficulty": "B1"},
        {"vocabulary_id": "b", "target_word": "Ding", "difficulty": "Z9"},
        {"vocabulary_id": "c", "target_word": "so"},
    ]
    tiers = lexicon_repo.get_difficulty_tiers(["a", "b", "c", "a"])
    assert tiers == {"a": CEFRLevel.B1, "b": CEFRLevel.UNKNOWN, "c": CEFRLevel.UNKNOWN}
    query = collection.find.call_args[0][0]
    assert sorted(query["vocabulary_id"]["$in"]) == ["a", "b", "c"]


def test_get_difficulty_tiers_skips_query_for_no_ids(collection):
    assert lexicon_repo.get_difficulty_tiers([]) == {}
    collection.find.assert_not_called()
