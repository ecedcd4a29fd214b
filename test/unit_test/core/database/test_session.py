"""
Unit tests for MongoDB client management.

No server is contacted: the client is created with ``connect=False`` and the
commands are checked against the in-memory database double.
"""

import pytest
from pymongo import AsyncMongoClient
from pymongo.errors import ServerSelectionTimeoutError

from wordboard.core.database import session
from wordboard.core.database.utils import create_client, ping
from wordboard.server.core.config import MongoDBConfig


@pytest.fixture(autouse=True)
async def _reset_client():
    yield
    await session.close_db()


def test_create_client_is_lazy():
    client = create_client(MongoDBConfig(uri="mongodb://db.invalid:27017", timeout_ms=100))

    assert isinstance(client, AsyncMongoClient)
    assert client.options.server_selection_timeout == 0.1


async def test_ping(fake_database):
    assert await ping(fake_database) == {"ok": 1.0}
    assert fake_database.commands == ["ping"]


async def test_ping_unreachable(fake_database):
    fake_database.available = False

    with pytest.raises(ServerSelectionTimeoutError):
        await ping(fake_database)


def test_get_client_is_cached():
    assert session.get_client() is session.get_client()


def test_get_database_uses_configured_name():
    assert session.get_database().name == session.settings.mongodb.database


async def test_close_db_resets_client():
    first = session.get_client()

    await session.close_db()

    assert session._client is None
    assert session.get_client() is not first


async def test_close_db_without_client():
    await session.close_db()
    await session.close_db()


async def test_init_db_pings(monkeypatch, fake_database):
    monkeypatch.setattr(session, "get_database", lambda: fake_database)

    await session.init_db()

    assert fake_database.commands == ["ping"]


async def test_init_db_propagates_failure(monkeypatch, fake_database):
    fake_database.available = False
    monkeypatch.setattr(session, "get_database", lambda: fake_database)

    with pytest.raises(ServerSelectionTimeoutError):
        await session.init_db()
