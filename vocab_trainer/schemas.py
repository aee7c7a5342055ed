"""
Pydantic models for vocabulary documents and stored learning-item rows.

These models define the structure of lexicon documents in MongoDB and the
boundary translation for learning-item rows coming from storage or API
payloads, which may use snake_case or camelCase keys.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# Configuration
MAX_EXAMPLES_PER_ENTRY = 5

# Stage names used by older rows, mapped to the current pipeline names
LEGACY_STAGE_NAMES = {
    "revising": "introducing",
    "revise": "introducing",
    "recall": "recalling",
    "practice": "practicing",
}


class WordType(str, Enum):
    """Part of speech / entry category."""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    ARTICLE = "article"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    EXPRESSION = "expression"
    COLLOCATION = "collocation"


class CEFRLevel(str, Enum):
    """Common European Framework of Reference for Languages levels."""
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"
    UNKNOWN = "unknown"


def parse_cefr_level(value: Any) -> Optional[CEFRLevel]:
    """
    Coerce a stored difficulty label into a CEFRLevel.

    Returns None for missing values and CEFRLevel.UNKNOWN for labels
    outside the scale.
    """
    if value is None or value == "":
        return None
    if isinstance(value, CEFRLevel):
        return value
    try:
        return CEFRLevel(str(value).strip().upper())
    except ValueError:
        return CEFRLevel.UNKNOWN


# ---- Lexicon Documents ----

class Example(BaseModel):
    """A bilingual example sentence pair."""
    target: str = Field(..., description="Sentence in the language being learned")
    english: str = Field(..., description="English translation")


class VocabularyEntry(BaseModel):
    """
    A single vocabulary entry in the lexicon collection.

    One document per target word + type combination.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    vocabulary_id: str = Field(..., validation_alias=AliasChoices("vocabulary_id", "word_id", "id"))
    type: WordType = WordType.NOUN
    target_word: str = Field(..., validation_alias=AliasChoices("target_word", "targetWord", "german"))
    english: list[str] = Field(default_factory=list, description="English translations")
    difficulty: CEFRLevel = Field(default=CEFRLevel.UNKNOWN, description="CEFR difficulty level")
    tags: list[str] = Field(default_factory=list)
    examples: list[Example] = Field(default_factory=list, max_length=MAX_EXAMPLES_PER_ENTRY)
    notes: str = ""

    @field_validator("difficulty", mode="before")
    @classmethod
    def _coerce_difficulty(cls, value):
        return parse_cefr_level(value) or CEFRLevel.UNKNOWN

    @field_validator("vocabulary_id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value)


# ---- Learning Item Rows ----

class LearningItemRecord(BaseModel):
    """
    A learning-item row as delivered by storage or an API payload.

    Accepts both snake_case and camelCase keys and legacy stage names.
    Convert to the engine's LearningItem with learning_item.from_record().
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    vocabulary_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("vocabulary_id", "vocabularyId", "word_id", "wordId")
    )
    stage: str = Field(default="introducing", validation_alias=AliasChoices("stage", "status"))
    ease_factor: float = Field(default=2.5, validation_alias=AliasChoices("ease_factor", "easeFactor"))
    interval: int = 0
    repetitions: int = 0
    next_due_date: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("next_due_date", "nextDueDate", "next_review_date", "nextReviewDate"),
    )
    correct_count: int = Field(default=0, validation_alias=AliasChoices("correct_count", "correctCount"))
    incorrect_count: int = Field(default=0, validation_alias=AliasChoices("incorrect_count", "incorrectCount"))
    last_practiced_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("last_practiced_at", "lastPracticedAt", "last_practiced", "lastPracticed"),
    )
    last_introduced_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("last_introduced_at", "lastIntroducedAt", "last_revised", "lastRevised"),
    )
    last_recalled_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("last_recalled_at", "lastRecalledAt", "last_recalled", "lastRecalled"),
    )
    added_at: datetime = Field(..., validation_alias=AliasChoices("added_at", "addedAt"))
    difficulty_tier: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("difficulty_tier", "difficultyTier", "difficulty")
    )
    priority_score: int = Field(default=80, validation_alias=AliasChoices("priority_score", "priorityScore"))
    version: int = 0

    @field_validator("id", "vocabulary_id", mode="before")
    @classmethod
    def _coerce_ids(cls, value):
        return None if value is None else str(value)

    @field_validator("stage", mode="before")
    @classmethod
    def _normalize_stage(cls, value):
        name = str(value).strip().lower()
        return LEGACY_STAGE_NAMES.get(name, name)
