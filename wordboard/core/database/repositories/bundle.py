"""
Repository bundle for dependency injection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from wordboard.core.metrics import MeterRegistry

from .scrabble_boards import ScrabbleBoardRepository
from .word_play_boards import WordPlayBoardRepository


@dataclass(frozen=True)
class BoardRepoBundle:
    """Convenience bundle of all board repositories."""

    scrabble_boards: ScrabbleBoardRepository
    word_play_boards: WordPlayBoardRepository


def build_board_repos(database: Any, registry: Optional[MeterRegistry] = None) -> BoardRepoBundle:
    """Build a ``BoardRepoBundle`` bound to one database.

    Args:
        database: PyMongo ``AsyncDatabase``
        registry: Meter registry receiving operation counts

    Returns:
        Bundle containing all repository instances
    """
    return BoardRepoBundle(
        scrabble_boards=ScrabbleBoardRepository(database, registry),
        word_play_boards=WordPlayBoardRepository(database, registry),
    )
