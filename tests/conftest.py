"""Shared test fixtures.

Provides an in-memory async stand-in for a motor client/collection, a
``test_client`` for FastAPI wired to it, and environment helpers.
"""

import asyncio
import copy
from collections.abc import Generator
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

import app.db.client as client_module


def _matches(doc: dict, query: dict) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


class FakeCursor:
    """Supports the find().sort().limit().to_list() chain used by the services."""

    def __init__(self, docs: list[dict]) -> None:
        self._docs = docs
        self._limit = 0

    def sort(self, keys, direction=None) -> "FakeCursor":
        if isinstance(keys, str):
            keys = [(keys, direction or 1)]
        # Stable sorts applied from the least significant key
        for key, order in reversed(keys):
            self._docs.sort(key=lambda d: d[key], reverse=order < 0)
        return self

    def limit(self, count: int) -> "FakeCursor":
        self._limit = count
        return self

    async def to_list(self, length: int | None = None) -> list[dict]:
        docs = self._docs[: self._limit] if self._limit else self._docs
        if length is not None:
            docs = docs[:length]
        return [copy.deepcopy(d) for d in docs]


class FakeCollection:
    """Minimal async collection covering the operations the services call."""

    def __init__(self) -> None:
        self.docs: list[dict] = []

    def find(self, query: dict | None = None) -> FakeCursor:
        return FakeCursor([d for d in self.docs if _matches(d, query or {})])

    async def insert_one(self, doc: dict) -> SimpleNamespace:
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def insert_many(self, docs: list[dict]) -> SimpleNamespace:
        ids = []
        for doc in docs:
            result = await self.insert_one(doc)
            ids.append(result.inserted_id)
        return SimpleNamespace(inserted_ids=ids)

    async def update_one(self, query: dict, update: dict) -> SimpleNamespace:
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(copy.deepcopy(update.get("$set", {})))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query: dict) -> SimpleNamespace:
        for index, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def delete_many(self, query: dict) -> SimpleNamespace:
        kept = [d for d in self.docs if not _matches(d, query)]
        deleted = len(self.docs) - len(kept)
        self.docs = kept
        return SimpleNamespace(deleted_count=deleted)


class FakeDatabase:
    def __init__(self) -> None:
        self._collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self._collections.setdefault(name, FakeCollection())


class FakeMongoClient:
    def __init__(self) -> None:
        self._databases: dict[str, FakeDatabase] = {}
        self.closed = False

    def __getitem__(self, name: str) -> FakeDatabase:
        return self._databases.setdefault(name, FakeDatabase())

    def close(self) -> None:
        self.closed = True


def _reset_cache() -> None:
    client_module.mongo_client = None
    client_module._connect_lock = asyncio.Lock()


@pytest.fixture(autouse=True)
def clean_connection_cache() -> Generator[None, None, None]:
    """Every test starts and ends with an empty connection cache."""
    _reset_cache()
    yield
    _reset_cache()


@pytest.fixture()
def mongo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")
    for name in (
        "CANDIDATE_DATABASE", "LEGACY_DATABASE", "CANDIDATES_COLLECTION",
        "HISTORY_COLLECTION", "MONGO_SERVER_SELECTION_TIMEOUT_MS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def no_mongo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MONGODB_URI", raising=False)


@pytest.fixture()
def fake_mongo(mongo_env: None) -> FakeMongoClient:
    """Place an in-memory client in the connection cache."""
    fake = FakeMongoClient()
    client_module.mongo_client = fake
    return fake


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient."""
    from app.main import app

    with TestClient(app) as client:
        yield client