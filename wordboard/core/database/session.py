"""
Global database client management.

This module manages the process wide AsyncMongoClient used by the API
dependencies and the health indicator.
"""

from __future__ import annotations

from typing import Any, Optional

from pymongo import AsyncMongoClient

from wordboard.core.logging_config import get_logger
from wordboard.server.core.config import settings

from .utils import create_client, ping

logger = get_logger(__name__)

_client: Optional[AsyncMongoClient] = None


def get_client() -> AsyncMongoClient:
    """Return the global client, creating it on first use."""
    global _client
    if _client is None:
        _client = create_client(settings.mongodb)
    return _client


def get_database() -> Any:
    """
    Dependency returning the configured MongoDB database.

    Returns:
        AsyncDatabase: The database holding the board collections.
    """
    return get_client()[settings.mongodb.database]


async def init_db() -> None:
    """
    Initialize the database connection.

    Verifies that MongoDB answers a ping. Collections are created implicitly
    on first insert; ``_id`` is the only index the boards need.
    """
    database = get_database()
    await ping(database)
    logger.info(f"Connected to MongoDB database '{database.name}'")


async def close_db() -> None:
    """Close the global client if it was created."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
        logger.info("MongoDB client closed")
