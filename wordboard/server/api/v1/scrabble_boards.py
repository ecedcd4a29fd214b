"""
Scrabble Board Endpoints.

CRUD operations on the ``scrabbleBoard`` collection.
"""

from wordboard.core.database.entities import ScrabbleBoard
from wordboard.server.services.deps import get_scrabble_board_repository

from .boards import build_board_router

router = build_board_router(ScrabbleBoard, get_scrabble_board_repository, "scrabble board")
