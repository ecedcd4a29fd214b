"""Scrabble board entity."""

from __future__ import annotations

from typing import ClassVar

from .base import BoardDocument


class ScrabbleBoard(BoardDocument):
    """A persisted Scrabble board.

    Collection: scrabbleBoard
    """

    collection_name: ClassVar[str] = "scrabbleBoard"

    def __repr__(self) -> str:
        return f"ScrabbleBoard(id={self.id}, board_length={len(self.board)})"
