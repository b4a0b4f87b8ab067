import copy
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from pymongo.errors import DuplicateKeyError

from core import lexicon_repo
from core.schemas import Language, VocabularyEntry, WordStatus


NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # A developer .env must not leak into the tests
    monkeypatch.delenv("KNOWN_REVIEW_POLICY", raising=False)
    monkeypatch.delenv("TEST_MODE", raising=False)
    monkeypatch.delenv("VOCAB_DB_NAME", raising=False)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_entry():
    """Factory for entries; scheduling fields default to never reviewed."""
    counter = {"n": 0}

    def _make(
        status=WordStatus.UNKNOWN,
        last_reviewed_at=None,
        next_review_at=None,
        language=Language.JAPANESE,
        level="N5/HSK1",
        review_count=0,
        **kwargs
    ):
        counter["n"] += 1
        n = counter["n"]
        return VocabularyEntry(
            id=kwargs.pop("id", f"entry-{n}"),
            writing=kwargs.pop("writing", f"word{n}"),
            reading=kwargs.pop("reading", f"reading{n}"),
            meaning=kwargs.pop("meaning", f"meaning{n}"),
            status=status,
            last_reviewed_at=last_reviewed_at,
            next_review_at=next_review_at,
            language=language,
            level=level,
            review_count=review_count,
            created_at=kwargs.pop("created_at", NOW - timedelta(days=30) + timedelta(minutes=n)),
            **kwargs
        )

    return _make


# ---- In-memory MongoDB collection ----

def _matches(document: dict, query: dict) -> bool:
    for key, condition in query.items():
        value = document.get(key)
        if isinstance(condition, dict) and "$ne" in condition:
            if value == condition["$ne"]:
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    def sort(self, key, direction=1):
        self._documents = sorted(
            self._documents, key=lambda d: d.get(key), reverse=direction < 0
        )
        return self

    def __iter__(self):
        return iter(self._documents)


class FakeCollection:
    """The subset of pymongo's Collection used by core.lexicon_repo."""

    def __init__(self):
        self.documents: list[dict] = []

    def find(self, query=None):
        return FakeCursor([copy.deepcopy(d) for d in self.documents if _matches(d, query or {})])

    def find_one(self, query):
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    def count_documents(self, query):
        return sum(1 for d in self.documents if _matches(d, query))

    def insert_one(self, document):
        if any(d["id"] == document["id"] for d in self.documents):
            raise DuplicateKeyError(f"duplicate id {document['id']}")
        self.documents.append(copy.deepcopy(document))

    def insert_many(self, documents):
        for document in documents:
            self.insert_one(document)

    def replace_one(self, query, document, upsert=False):
        for index, existing in enumerate(self.documents):
            if _matches(existing, query):
                self.documents[index] = copy.deepcopy(document)
                return SimpleNamespace(matched_count=1)
        if upsert:
            self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(matched_count=0)

    def delete_one(self, query):
        for index, existing in enumerate(self.documents):
            if _matches(existing, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def delete_many(self, query):
        before = len(self.documents)
        self.documents = [d for d in self.documents if not _matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.documents))

    def update_one(self, query, update):
        for document in self.documents:
            if _matches(document, query):
                document.update(copy.deepcopy(update["$set"]))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def update_many(self, query, update):
        modified = 0
        for document in self.documents:
            if _matches(document, query):
                document.update(update["$set"])
                modified += 1
        return SimpleNamespace(modified_count=modified)


@pytest.fixture
def fake_collection(monkeypatch):
    collection = FakeCollection()
    monkeypatch.setattr(lexicon_repo, "_collection", collection)
    return collection
