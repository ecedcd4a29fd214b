"""
Database utility functions for client management.

Functions:
- create_client: Creates the async MongoDB client from configuration
- ping: Verifies that the server answers commands
"""

from __future__ import annotations

from typing import Any, Mapping

from pymongo import AsyncMongoClient

from wordboard.server.core.config import MongoDBConfig


def create_client(config: MongoDBConfig) -> AsyncMongoClient:
    """Create an async MongoDB client.

    The client connects lazily; no network I/O happens until the first
    command.

    Args:
        config: MongoDB connection configuration

    Returns:
        Configured AsyncMongoClient instance
    """
    return AsyncMongoClient(
        config.uri,
        serverSelectionTimeoutMS=config.timeout_ms,
        appname="wordboard",
        connect=False,
    )


async def ping(database: Any) -> Mapping[str, Any]:
    """Run the ``ping`` command against ``database``.

    Raises:
        pymongo.errors.PyMongoError: when the server cannot be reached
    """
    return await database.command("ping")
