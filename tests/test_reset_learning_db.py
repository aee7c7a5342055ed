"""Tests for the learning database reset script."""

from conftest import NOW
from scripts.maintenance import reset_learning_db
from vocab_trainer.srs import database
from vocab_trainer.srs.learning_item import new_learning_item


def add_item():
    database.add_learning_item("alice", new_learning_item(added_at=NOW, item_id="w1"))
    database.create_session("alice", "quick", "introducing", started_at=NOW)


def test_yes_flag_resets_without_prompt(db, monkeypatch):
    add_item()

    def no_prompt(_):
        raise AssertionError("prompted despite --yes")

    monkeypatch.setattr("builtins.input", no_prompt)
    assert reset_learning_db.main(["--yes"]) == 0
    assert database.load_item_pool("alice") == []


def test_confirmed_reset(db, monkeypatch):
    add_item()
    monkeypatch.setattr("builtins.input", lambda _: " YES ")
    assert reset_learning_db.main([]) == 0
    assert database.load_item_pool("alice") == []


def test_declined_reset_keeps_data(db, monkeypatch):
    add_item()
    monkeypatch.setattr("builtins.input", lambda _: "no")
    assert reset_learning_db.main([]) == 1
    assert [item.id for item in database.load_item_pool("alice")] == ["w1"]
