"""
Scrabble board repository.

This module provides data access operations for the ``scrabbleBoard``
collection.
"""

from __future__ import annotations

from typing import Any, Optional

from wordboard.core.metrics import MeterRegistry

from ..entities.scrabble_boards import ScrabbleBoard
from .base import MongoBoardRepository


class ScrabbleBoardRepository(MongoBoardRepository[ScrabbleBoard]):
    """Repository for Scrabble board data access operations."""

    def __init__(self, database: Any, registry: Optional[MeterRegistry] = None) -> None:
        """Initialize repository with the database holding the collection.

        Args:
            database: PyMongo ``AsyncDatabase``
            registry: Meter registry receiving operation counts
        """
        super().__init__(database[ScrabbleBoard.collection_name], ScrabbleBoard, registry)
