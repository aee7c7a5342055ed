"""Session builder modules for study sessions."""

from vocab_trainer.session_builders.selector import (
    eligible_stages,
    parse_session_mode,
    parse_session_size,
    rank_items,
    select_session,
    select_specific,
    session_limit,
)

__all__ = [
    "eligible_stages",
    "parse_session_mode",
    "parse_session_size",
    "rank_items",
    "select_session",
    "select_specific",
    "session_limit",
]
