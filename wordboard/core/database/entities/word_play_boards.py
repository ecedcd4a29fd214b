"""Word play board entity."""

from __future__ import annotations

from typing import ClassVar

from .base import BoardDocument


class WordPlayBoard(BoardDocument):
    """A persisted word play board.

    Collection: wordPlayBoard
    """

    collection_name: ClassVar[str] = "wordPlayBoard"

    def __repr__(self) -> str:
        return f"WordPlayBoard(id={self.id}, board_length={len(self.board)})"
