"""
SRS Constants and Parameters

All configurable parameters for the scheduling engine in one place.
"""

from enum import Enum

from vocab_trainer.schemas import CEFRLevel


# ---- Learning Stages ----

class Stage(str, Enum):
    """Position of an item in the learning pipeline."""
    INTRODUCING = "introducing"  # First exposure with full information
    RECALLING = "recalling"      # Recall testing without presentation
    PRACTICING = "practicing"    # Contextual practice
    MASTERED = "mastered"        # Maintenance reviews only


# Pipeline order, used to tell promotions from demotions
STAGE_ORDER = {
    Stage.INTRODUCING: 0,
    Stage.RECALLING: 1,
    Stage.PRACTICING: 2,
    Stage.MASTERED: 3,
}


class SessionMode(str, Enum):
    """Study mode requested for a session."""
    INTRODUCING = "introducing"
    RECALLING = "recalling"
    PRACTICING = "practicing"


class SessionSize(str, Enum):
    """Session length."""
    QUICK = "quick"
    COMPLETE = "complete"


# ---- Ease Factor ----

EASE_MIN = 1.3
EASE_MAX = 2.5

# Ease change on success, keyed by attempts taken (3 means "3 or more")
EASE_DELTA_BY_ATTEMPTS = {
    1: +0.10,
    2: -0.05,
    3: -0.15,
}
EASE_DELTA_FAILURE = -0.20


# ---- Interval Bootstrap ----
# Fixed intervals (days) for the first successful repetitions

BOOTSTRAP_INTERVALS = {
    1: 1,
    2: 3,
}
FAILURE_INTERVAL = 1


# ---- Priority Scoring ----

PRIORITY_MIN = 0
PRIORITY_MAX = 100

STAGE_BASE_SCORE = {
    Stage.INTRODUCING: 80,
    Stage.RECALLING: 60,
    Stage.PRACTICING: 40,
    Stage.MASTERED: 20,
}

OVERDUE_POINTS_PER_DAY = 10
OVERDUE_MAX_BONUS = 50
DUE_TODAY_BONUS = 30
NOT_DUE_PENALTY_PER_DAY = 2

EASE_PENALTY_WEIGHT = 10
ERROR_RATE_WEIGHT = 20

NEW_ITEM_WINDOW_DAYS = 7
NEW_ITEM_POINTS_PER_DAY = 3

STALE_AFTER_DAYS = 14
STALE_POINTS_PER_DAY = 2
STALE_MAX_BONUS = 30

# +3 per level below C2
DIFFICULTY_TIER_BONUS = {
    CEFRLevel.A1: 15,
    CEFRLevel.A2: 12,
    CEFRLevel.B1: 9,
    CEFRLevel.B2: 6,
    CEFRLevel.C1: 3,
    CEFRLevel.C2: 0,
}


# ---- Stage Transitions ----

INTRODUCING_ADVANCE_REPETITIONS = 1

RECALLING_ADVANCE_REPETITIONS = 3
RECALLING_ADVANCE_EASE = 2.0
RECALLING_ADVANCE_SUCCESS_RATE = 0.75
RECALLING_REGRESS_MIN_ATTEMPTS = 5
RECALLING_REGRESS_SUCCESS_RATE = 0.4

PRACTICING_ADVANCE_REPETITIONS = 5
PRACTICING_ADVANCE_EASE = 2.3
PRACTICING_ADVANCE_SUCCESS_RATE = 0.85
PRACTICING_REGRESS_MIN_ATTEMPTS = 5
PRACTICING_REGRESS_SUCCESS_RATE = 0.5

MASTERED_REGRESS_MIN_ATTEMPTS = 3
MASTERED_REGRESS_SUCCESS_RATE = 0.7


# ---- Session Selection ----

SESSION_SIZE_LIMITS = {
    SessionSize.QUICK: 5,
    SessionSize.COMPLETE: 20,
}

# Mastered items are re-surfaced in practice sessions for maintenance
MODE_ELIGIBLE_STAGES = {
    SessionMode.INTRODUCING: (Stage.INTRODUCING,),
    SessionMode.RECALLING: (Stage.RECALLING,),
    SessionMode.PRACTICING: (Stage.PRACTICING, Stage.MASTERED),
}


# ---- Initial Values for New Items ----

INITIAL_EASE = 2.5
INITIAL_INTERVAL = 0
INITIAL_REPETITIONS = 0
INITIAL_PRIORITY = 80
INITIAL_STAGE = Stage.INTRODUCING
