"""
Board entity models.

Each entity maps to one MongoDB collection.
"""

from .base import MAX_BOARD_ID, MAX_BOARD_LENGTH, BoardDocument
from .scrabble_boards import ScrabbleBoard
from .word_play_boards import WordPlayBoard

__all__ = [
    "MAX_BOARD_ID",
    "MAX_BOARD_LENGTH",
    "BoardDocument",
    "ScrabbleBoard",
    "WordPlayBoard",
]
