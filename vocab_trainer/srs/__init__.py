"""
SRS - Spaced Repetition Scheduling Engine

Main API for the vocabulary learning system.

This module implements an SM-2 derived scheduler adapted to a staged
learning pipeline (introducing -> recalling -> practicing -> mastered):
- Review outcome: ease factor, interval and due date after each attempt
- Priority: bounded score used to rank items for review
- Stage transitions: promotion/demotion between adjacent stages
- Session selection (see vocab_trainer.session_builders)

All engine functions are pure: they take item snapshots by value and never
touch storage. Database I/O lives in vocab_trainer.srs.database.

Quick start:
    from vocab_trainer import srs

    # Process an attempt (algorithm only, no DB calls)
    item, event_data = srs.process_attempt(item, srs.AttemptRecord(correct=True))
"""

# Core scheduler API (algorithm logic)
from vocab_trainer.srs.scheduler import process_attempt
from vocab_trainer.srs.review_outcome import ReviewSchedule, compute_next_schedule
from vocab_trainer.srs.priority import compute_priority, priority_for_item
from vocab_trainer.srs.transitions import evaluate_transition, success_rate

# Constants and parameters
from vocab_trainer.srs.constants import (
    EASE_MAX,
    EASE_MIN,
    SESSION_SIZE_LIMITS,
    SessionMode,
    SessionSize,
    Stage,
)

# Item state
from vocab_trainer.srs.learning_item import (
    AttemptRecord,
    LearningItem,
    from_record,
    new_learning_item,
)

from vocab_trainer.srs.errors import (
    InvalidArgumentError,
    ItemNotFoundError,
    SessionNotFoundError,
    StaleItemError,
)


__all__ = [
    # Core algorithm
    "process_attempt",
    "compute_next_schedule",
    "ReviewSchedule",
    "compute_priority",
    "priority_for_item",
    "evaluate_transition",
    "success_rate",

    # Enums
    "Stage",
    "SessionMode",
    "SessionSize",

    # Item state
    "AttemptRecord",
    "LearningItem",
    "from_record",
    "new_learning_item",

    # Errors
    "InvalidArgumentError",
    "ItemNotFoundError",
    "SessionNotFoundError",
    "StaleItemError",

    # Parameters
    "EASE_MIN",
    "EASE_MAX",
    "SESSION_SIZE_LIMITS",
]
