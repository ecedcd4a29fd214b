"""
Word play board repository.

This module provides data access operations for the ``wordPlayBoard``
collection.
"""

from __future__ import annotations

from typing import Any, Optional

from wordboard.core.metrics import MeterRegistry

from ..entities.word_play_boards import WordPlayBoard
from .base import MongoBoardRepository


class WordPlayBoardRepository(MongoBoardRepository[WordPlayBoard]):
    """Repository for word play board data access operations."""

    def __init__(self, database: Any, registry: Optional[MeterRegistry] = None) -> None:
        """Initialize repository with the database holding the collection.

        Args:
            database: PyMongo ``AsyncDatabase``
            registry: Meter registry receiving operation counts
        """
        super().__init__(database[WordPlayBoard.collection_name], WordPlayBoard, registry)
