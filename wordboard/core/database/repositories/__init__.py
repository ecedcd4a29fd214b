"""
Data access layer for the board collections.
"""

from .base import AsyncBaseRepository, MongoBoardRepository, QueryBuilder
from .bundle import BoardRepoBundle, build_board_repos
from .scrabble_boards import ScrabbleBoardRepository
from .word_play_boards import WordPlayBoardRepository

__all__ = [
    "AsyncBaseRepository",
    "BoardRepoBundle",
    "MongoBoardRepository",
    "QueryBuilder",
    "ScrabbleBoardRepository",
    "WordPlayBoardRepository",
    "build_board_repos",
]
