"""
Study service - session lifecycle over the scheduling engine.

Loads and saves learning state around the pure engine:
- enroll_word: add a vocabulary entry to a user's collection
- start_session: select items for a mode/size and open a session
- record_attempt: schedule, transition and re-score one item after an attempt
- complete_session / get_session_stats: close and summarize a session
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from vocab_trainer import lexicon_repo
from vocab_trainer.analytics import SessionStats, build_session_stats
from vocab_trainer.item_cache import ItemPoolCache
from vocab_trainer.schemas import CEFRLevel
from vocab_trainer.session_builders import (
    parse_session_mode,
    parse_session_size,
    select_session,
    select_specific,
)
from vocab_trainer.srs import database
from vocab_trainer.srs.constants import SessionMode, SessionSize
from vocab_trainer.srs.learning_item import AttemptRecord, LearningItem, new_learning_item, utc_now
from vocab_trainer.srs.scheduler import process_attempt

logger = logging.getLogger(__name__)

SPECIFIC_WORD_SESSION = "specific_word"


@dataclass(frozen=True)
class StudySession:
    """
    Items selected for one session.

    session_id is None when nothing was selected.
    """
    session_id: Optional[str]
    mode: SessionMode
    items: list[LearningItem] = field(default_factory=list)
    message: str = ""


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of recording one attempt."""
    item: LearningItem
    stage_changed: bool
    event: dict


def _load_pool(user_id: str, cache: Optional[ItemPoolCache]) -> list[LearningItem]:
    if cache is not None:
        return cache.get(user_id)
    return database.load_item_pool(user_id)


def enroll_word(
    user_id: str,
    vocabulary_id: str,
    difficulty_tier: Union[CEFRLevel, str, None] = None,
    added_at: Optional[datetime] = None,
    cache: Optional[ItemPoolCache] = None
) -> LearningItem:
    """
    Add a vocabulary entry to a user's collection.

    If no difficulty tier is given, the entry's CEFR level is looked up in
    the lexicon.

    Returns:
        The stored item with initial scheduling values
    """
    if difficulty_tier is None:
        entry = lexicon_repo.get_entry(vocabulary_id)
        if entry is not None:
            difficulty_tier = entry.difficulty

    item = new_learning_item(
        added_at=added_at,
        vocabulary_id=vocabulary_id,
        difficulty_tier=difficulty_tier,
    )
    stored = database.add_learning_item(user_id, item)
    if cache is not None:
        cache.invalidate(user_id)

    logger.info("[SESSION] Enrolled %s for user %s as item %s", vocabulary_id, user_id, stored.id)
    return stored


def start_session(
    user_id: str,
    mode: Union[SessionMode, str],
    size: Union[SessionSize, str] = SessionSize.COMPLETE,
    item_id: Optional[str] = None,
    now: Optional[datetime] = None,
    cache: Optional[ItemPoolCache] = None
) -> StudySession:
    """
    Select items and open a study session.

    Args:
        user_id: User identifier
        mode: Study mode
        size: Quick (5) or complete (20)
        item_id: Study exactly this item instead of a ranked selection
        now: Selection time (defaults to now, UTC)
        cache: Optional pool cache

    Returns:
        StudySession; empty with a message when nothing is available

    Raises:
        InvalidArgumentError: If the mode or size is unknown
    """
    mode = parse_session_mode(mode)
    size = parse_session_size(size)
    now = now or utc_now()
    pool = _load_pool(user_id, cache)

    if item_id is not None:
        items = select_specific(pool, item_id, now=now)
        session_type = SPECIFIC_WORD_SESSION
    else:
        items = select_session(pool, mode, size, now=now)
        session_type = size.value

    if not items:
        logger.info("[SESSION] Nothing to study for user %s in %s mode", user_id, mode.value)
        return StudySession(
            session_id=None,
            mode=mode,
            items=[],
            message=f"No words available for {mode.value} mode",
        )

    session_id = database.create_session(user_id, session_type, mode.value, started_at=now)
    logger.info(
        "[SESSION] Started %s %s session %s with %d items",
        session_type, mode.value, session_id, len(items)
    )
    return StudySession(session_id=session_id, mode=mode, items=items)


def record_attempt(
    user_id: str,
    session_id: str,
    item_id: str,
    mode: Union[SessionMode, str],
    correct: bool,
    attempts: int = 1,
    now: Optional[datetime] = None,
    cache: Optional[ItemPoolCache] = None
) -> AttemptResult:
    """
    Record one attempt and persist the item's new scheduling state.

    Raises:
        ItemNotFoundError: If the item does not belong to the user
        SessionNotFoundError: If the session does not belong to the user
        InvalidArgumentError: If attempts < 1 or the mode is unknown
        StaleItemError: If another attempt on the same item was saved first
    """
    attempt = AttemptRecord(correct=correct, attempts_taken=attempts)
    mode = parse_session_mode(mode)
    database.get_session_record(user_id, session_id)
    item = database.load_learning_item(user_id, item_id)

    updated, event = process_attempt(item, attempt, mode=mode, now=now)
    event['session_id'] = session_id

    saved = database.save_attempt(user_id, updated, event)
    if cache is not None:
        cache.invalidate(user_id)

    if event['stage_changed']:
        logger.info(
            "[SESSION] Item %s moved %s -> %s",
            item_id, event['stage_before'], event['stage_after']
        )
    return AttemptResult(item=saved, stage_changed=event['stage_changed'], event=event)


def complete_session(
    user_id: str,
    session_id: str,
    now: Optional[datetime] = None
) -> dict:
    """
    Close a session, stamping its completion time and duration.
    """
    record = database.complete_session(user_id, session_id, completed_at=now)
    logger.info("[SESSION] Completed session %s in %ss", session_id, record['duration_seconds'])
    return record


def get_session_stats(user_id: str, session_id: str) -> SessionStats:
    """
    Summarize a session's attempts and stage moves.
    """
    record = database.get_session_record(user_id, session_id)
    return build_session_stats(record, database.get_session_items(session_id))
