"""
Word Play Board Endpoints.

CRUD operations on the ``wordPlayBoard`` collection.
"""

from wordboard.core.database.entities import WordPlayBoard
from wordboard.server.services.deps import get_word_play_board_repository

from .boards import build_board_router

router = build_board_router(WordPlayBoard, get_word_play_board_repository, "word play board")
