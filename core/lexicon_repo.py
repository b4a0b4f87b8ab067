"""
MongoDB repository for the vocabulary collection.

Owns the durable entry collection. The review engine never touches it:
callers load entries here, run them through core.review, and write the
updated entries back with save_entry().
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from dotenv import load_dotenv
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection

from core.review.session import ReviewFilters
from core.schemas import VocabularyEntry, WordStatus

# Load environment
load_dotenv()

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_DB_NAME = "vocab_trainer"
COLLECTION_NAME = "vocabulary"

# Global connection pool (reused across Streamlit reruns)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


# ---- Connection Management ----

def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_db_name() -> str:
    """
    Database name from VOCAB_DB_NAME, prefixed with test_ in test mode.
    """
    name = os.getenv("VOCAB_DB_NAME", DEFAULT_DB_NAME)
    if is_test_mode():
        return f"test_{name}"
    return name


def get_collection() -> Collection:
    """
    Get a connection to the MongoDB vocabulary collection.

    Uses a persistent connection pool that's reused across requests.

    Returns:
        MongoDB collection object
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        tz_aware=True,
        maxPoolSize=10,
        minPoolSize=1,
        maxIdleTimeMS=60000
    )
    collection = _client[get_db_name()][COLLECTION_NAME]
    collection.create_index([("id", ASCENDING)], unique=True)
    _collection = collection

    logger.info("Connected to MongoDB collection %s.%s", get_db_name(), COLLECTION_NAME)
    return _collection


# ---- Query Functions ----

def _filter_query(filters: Optional[ReviewFilters]) -> dict:
    query = {}
    if filters is None:
        return query
    if filters.language is not None:
        query["language"] = filters.language.value
    if filters.level is not None:
        query["level"] = filters.level
    return query


def get_all_entries(filters: Optional[ReviewFilters] = None) -> list[VocabularyEntry]:
    """
    Get all entries, newest first.

    Args:
        filters: Optional language / level restriction

    Returns:
        List of VocabularyEntry
    """
    collection = get_collection()
    cursor = collection.find(_filter_query(filters)).sort("created_at", DESCENDING)
    return [VocabularyEntry.from_document(doc) for doc in cursor]


def get_entry(entry_id: str) -> Optional[VocabularyEntry]:
    """
    Get a single entry by id.

    Returns:
        VocabularyEntry, or None if not found
    """
    document = get_collection().find_one({"id": entry_id})
    if document is None:
        return None
    return VocabularyEntry.from_document(document)


def count_entries(filters: Optional[ReviewFilters] = None) -> int:
    """Count entries matching the filters."""
    return get_collection().count_documents(_filter_query(filters))


# ---- Write Functions ----

def create_entry(entry: VocabularyEntry) -> VocabularyEntry:
    """
    Insert a new entry.

    Raises:
        pymongo.errors.DuplicateKeyError: If an entry with this id exists
    """
    get_collection().insert_one(entry.to_document())
    logger.info("Created entry %s (%s)", entry.id, entry.writing)
    return entry


def save_entry(entry: VocabularyEntry) -> VocabularyEntry:
    """
    Persist an entry verbatim (insert or replace by id).

    Used both for edits and for writing back core.review output.
    """
    get_collection().replace_one({"id": entry.id}, entry.to_document(), upsert=True)
    logger.debug(
        "Saved entry %s: status=%s, review_count=%d",
        entry.id, entry.status.value, entry.review_count
    )
    return entry


def record_review(entry: VocabularyEntry) -> bool:
    """
    Write the scheduling fields of a reviewed entry onto the stored record.

    Content edited since the session was built is kept, and an entry deleted
    in the meantime is not recreated.

    Returns:
        True if the stored entry was updated, False if it no longer exists
    """
    result = get_collection().update_one(
        {"id": entry.id},
        {"$set": {
            "status": entry.status.value,
            "last_reviewed_at": entry.last_reviewed_at,
            "next_review_at": entry.to_document()["next_review_at"],
            "review_count": entry.review_count,
        }}
    )
    if not result.matched_count:
        logger.warning("Review of %s not saved: entry no longer exists", entry.id)
        return False
    logger.debug(
        "Recorded review of %s: status=%s, review_count=%d",
        entry.id, entry.status.value, entry.review_count
    )
    return True


def delete_entry(entry_id: str) -> bool:
    """
    Delete an entry by id.

    Returns:
        True if an entry was deleted
    """
    result = get_collection().delete_one({"id": entry_id})
    if result.deleted_count:
        logger.info("Deleted entry %s", entry_id)
    return result.deleted_count > 0


def replace_all(entries: Iterable[VocabularyEntry]) -> int:
    """
    Replace the whole collection (used by JSON import).

    Returns:
        Number of entries written
    """
    documents = [entry.to_document() for entry in entries]
    collection = get_collection()
    collection.delete_many({})
    if documents:
        collection.insert_many(documents)
    logger.info("Replaced collection with %d entries", len(documents))
    return len(documents)


def reset_review_state() -> int:
    """
    DANGEROUS: Forget all review history.

    Every entry except excluded ones goes back to unknown, never reviewed.

    Returns:
        Number of entries modified
    """
    result = get_collection().update_many(
        {"status": {"$ne": WordStatus.EXCLUDED.value}},
        {"$set": {
            "status": WordStatus.UNKNOWN.value,
            "last_reviewed_at": None,
            "next_review_at": None,
            "review_count": 0,
        }}
    )
    logger.warning("Reset review state of %d entries", result.modified_count)
    return result.modified_count
