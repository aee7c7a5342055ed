"""
SQLAlchemy ORM Models for the Learning Database

Defines learning items, learning sessions and session items.
"""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class LearningItemRow(Base):
    """
    Persistent scheduling state for one vocabulary entry in a user's collection.
    """
    __tablename__ = 'learning_items'

    id = Column(String(64), primary_key=True)
    user_id = Column(String(255), nullable=False, index=True)
    vocabulary_id = Column(String(255), nullable=True)

    # Pipeline position
    stage = Column(String(20), nullable=False)

    # SM-2 scheduling
    ease_factor = Column(Float, nullable=False)
    interval = Column(Integer, nullable=False)
    repetitions = Column(Integer, nullable=False)
    next_due_date = Column(DateTime(timezone=True), nullable=True)

    # Lifetime counters
    correct_count = Column(Integer, nullable=False, default=0)
    incorrect_count = Column(Integer, nullable=False, default=0)

    # Timestamps
    added_at = Column(DateTime(timezone=True), nullable=False)
    last_practiced_at = Column(DateTime(timezone=True), nullable=True)
    last_introduced_at = Column(DateTime(timezone=True), nullable=True)
    last_recalled_at = Column(DateTime(timezone=True), nullable=True)

    difficulty_tier = Column(String(10), nullable=True)  # CEFR label
    priority_score = Column(Integer, nullable=False)

    # Incremented on every save; guards against lost updates
    version = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<LearningItemRow({self.id}, user={self.user_id}, stage={self.stage})>"


class LearningSessionRow(Base):
    """
    One study session: a batch of selected items presented in a single mode.
    """
    __tablename__ = 'learning_sessions'

    id = Column(String(64), primary_key=True)
    user_id = Column(String(255), nullable=False, index=True)
    session_type = Column(String(20), nullable=False)  # "quick", "complete", "specific_word"
    mode = Column(String(20), nullable=False)
    started_at = Column(DateTime(timezone=True), nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    duration_seconds = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<LearningSessionRow({self.id}, {self.session_type}/{self.mode})>"


class SessionItemRow(Base):
    """
    Log entry for a single attempt within a session.

    Captures the stage before and after so session summaries can count
    promotions and demotions exactly.
    """
    __tablename__ = 'session_items'

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String(64), ForeignKey('learning_sessions.id'), nullable=False, index=True)
    learning_item_id = Column(String(64), ForeignKey('learning_items.id'), nullable=False)

    mode = Column(String(20), nullable=False)
    correct = Column(Boolean, nullable=False)
    attempts = Column(Integer, nullable=False, default=1)
    practiced_at = Column(DateTime(timezone=True), nullable=False)

    stage_before = Column(String(20), nullable=False)
    stage_after = Column(String(20), nullable=False)

    def __repr__(self):
        return f"<SessionItemRow(id={self.id}, {self.learning_item_id}, correct={self.correct})>"
