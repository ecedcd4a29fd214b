"""Fixtures for end-to-end tests against a real MongoDB.

A MongoDB container is started once per session with Testcontainers. Tests
are skipped unless ``TEST__RUN_E2E_TESTS=true`` is set.
"""

import uuid
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from testcontainers.mongodb import MongoDbContainer

from wordboard.core.database import create_client
from wordboard.server.core.config import MongoDBConfig


@pytest.fixture(scope="session")
def mongodb_container(test_config):
    """Start a MongoDB container for the test session."""
    if not test_config.test.run_e2e_tests:
        pytest.skip("Set TEST__RUN_E2E_TESTS=true to run end-to-end tests")
    container = MongoDbContainer(test_config.test.mongodb_image)
    container.start()
    yield container
    container.stop()


@pytest.fixture
async def mongo_database(mongodb_container):
    """A freshly named database, dropped after the test."""
    config = MongoDBConfig(uri=mongodb_container.get_connection_url(), timeout_ms=10_000)
    client = create_client(config)
    database = client[f"wordboard_e2e_{uuid.uuid4().hex[:8]}"]
    yield database
    await client.drop_database(database.name)
    await client.close()


@pytest.fixture
async def e2e_client(mongo_database) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the application bound to the container database."""
    from wordboard.core.database import get_database
    from wordboard.server.main import app

    app.dependency_overrides[get_database] = lambda: mongo_database

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
