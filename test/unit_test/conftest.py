"""
Shared fixtures for unit tests.

MongoDB is replaced by a small in-memory double that implements the subset of
the PyMongo async collection API used by the repositories (insert_one,
find_one, replace_one, delete_one, find/sort/skip/limit/to_list,
count_documents) and the ``command`` call used by the health indicator.
"""

from __future__ import annotations

import copy
import re
from types import SimpleNamespace
from typing import Any, AsyncGenerator, Dict, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from wordboard.core.metrics import MeterRegistry


def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for key, expected in query.items():
        value = document.get(key)
        if isinstance(expected, dict) and "$regex" in expected:
            if not isinstance(value, str) or re.search(expected["$regex"], value) is None:
                return False
        elif value != expected:
            return False
    return True


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]) -> None:
        self._documents = documents
        self._skip = 0
        self._limit: Optional[int] = None

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents = sorted(self._documents, key=lambda d: d[key], reverse=direction < 0)
        return self

    def skip(self, count: int) -> "FakeCursor":
        self._skip = count
        return self

    def limit(self, count: int) -> "FakeCursor":
        self._limit = count
        return self

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        documents = self._documents[self._skip :]
        if self._limit:
            documents = documents[: self._limit]
        return [copy.deepcopy(d) for d in documents]


class FakeAsyncCollection:
    def __init__(self, name: str) -> None:
        self.name = name
        self.documents: Dict[Any, Dict[str, Any]] = {}

    async def insert_one(self, document: Dict[str, Any]):
        key = document["_id"]
        if key in self.documents:
            raise DuplicateKeyError(f"E11000 duplicate key error collection: {self.name} dup key: {{ _id: {key} }}", 11000)
        self.documents[key] = copy.deepcopy(document)
        return SimpleNamespace(inserted_id=key, acknowledged=True)

    async def find_one(self, query: Dict[str, Any]):
        for document in self.documents.values():
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    async def replace_one(self, query: Dict[str, Any], replacement: Dict[str, Any], upsert: bool = False):
        key = query["_id"]
        if key in self.documents:
            self.documents[key] = {**copy.deepcopy(replacement), "_id": key}
            return SimpleNamespace(matched_count=1, modified_count=1, upserted_id=None)
        if upsert:
            self.documents[key] = {**copy.deepcopy(replacement), "_id": key}
            return SimpleNamespace(matched_count=0, modified_count=0, upserted_id=key)
        return SimpleNamespace(matched_count=0, modified_count=0, upserted_id=None)

    async def delete_one(self, query: Dict[str, Any]):
        key = query["_id"]
        if key in self.documents:
            del self.documents[key]
            return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        query = query or {}
        return FakeCursor([d for d in self.documents.values() if _matches(d, query)])

    async def count_documents(self, query: Dict[str, Any], limit: Optional[int] = None) -> int:
        count = sum(1 for d in self.documents.values() if _matches(d, query))
        return min(count, limit) if limit else count


class FakeAsyncDatabase:
    def __init__(self, name: str = "wordboard_test") -> None:
        self.name = name
        self.collections: Dict[str, FakeAsyncCollection] = {}
        self.available = True
        self.commands: List[str] = []

    def __getitem__(self, name: str) -> FakeAsyncCollection:
        if name not in self.collections:
            self.collections[name] = FakeAsyncCollection(name)
        return self.collections[name]

    async def command(self, name: str) -> Dict[str, Any]:
        self.commands.append(name)
        if not self.available:
            raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")
        if name == "hello":
            return {"isWritablePrimary": True, "maxWireVersion": 21, "ok": 1.0}
        return {"ok": 1.0}


@pytest.fixture
def fake_database() -> FakeAsyncDatabase:
    return FakeAsyncDatabase()


@pytest.fixture
def registry() -> MeterRegistry:
    """A fresh meter registry, isolated from the process wide one."""
    return MeterRegistry()


@pytest_asyncio.fixture(name="client")
async def client_fixture(fake_database: FakeAsyncDatabase) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with the database dependency overridden."""
    from wordboard.core.database import get_database
    from wordboard.server.main import app

    app.dependency_overrides[get_database] = lambda: fake_database

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://localhost"
    ) as client:
        yield client

    app.dependency_overrides.clear()
