"""
MongoDB repository for lexicon access.

Provides functions to look up vocabulary entries and their CEFR levels.
"""

from __future__ import annotations

import os
from typing import Iterable, Optional

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.collection import Collection

from vocab_trainer.schemas import CEFRLevel, VocabularyEntry

# Load environment
load_dotenv()

# Configuration
DB_NAME = os.getenv("LEXICON_DB_NAME", "vocab_trainer")
COLLECTION_NAME = "lexicon"

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


# ---- Connection Management ----

def get_collection() -> Collection:
    """
    Get a connection to the MongoDB lexicon collection.

    Uses a persistent connection pool that's reused across requests.

    Returns:
        MongoDB collection object
    """
    global _client, _collection

    # Return cached collection if it exists
    if _collection is not None:
        return _collection

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        maxPoolSize=10,  # Connection pool size
        minPoolSize=1,   # Keep at least 1 connection alive
        maxIdleTimeMS=60000  # Keep connections alive for 60 seconds
    )
    _collection = _client[DB_NAME][COLLECTION_NAME]

    return _collection


# ---- Query Functions ----

def get_entry(vocabulary_id: str) -> Optional[VocabularyEntry]:
    """
    Get a single vocabulary entry.

    Args:
        vocabulary_id: Lexicon identifier

    Returns:
        VocabularyEntry, or None if not found
    """
    document = get_collection().find_one({"vocabulary_id": vocabulary_id})
    if document is None:
        return None
    return VocabularyEntry.model_validate(document)


def get_difficulty_tiers(vocabulary_ids: Iterable[str]) -> dict[str, CEFRLevel]:
    """
    Get the CEFR level of several entries in one query.

    Entries without a usable level are mapped to CEFRLevel.UNKNOWN;
    ids not present in the lexicon are omitted.

    Args:
        vocabulary_ids: Lexicon identifiers

    Returns:
        Dict of vocabulary_id -> CEFRLevel
    """
    ids = [vid for vid in set(vocabulary_ids) if vid]
    if not ids:
        return {}

    cursor = get_collection().find(
        {"vocabulary_id": {"$in": ids}},
        {"vocabulary_id": 1, "target_word": 1, "difficulty": 1}
    )
    return {
        entry.vocabulary_id: entry.difficulty
        for entry in (VocabularyEntry.model_validate(doc) for doc in cursor)
    }
