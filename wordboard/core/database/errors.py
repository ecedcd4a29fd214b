"""
Errors raised by the board repositories.

The HTTP layer maps these onto 404/409 responses; anything else raised by the
driver propagates unchanged.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for repository level failures on a single board."""

    def __init__(self, collection: str, board_id: int, message: str) -> None:
        super().__init__(message)
        self.collection = collection
        self.board_id = board_id


class BoardNotFoundError(RepositoryError):
    """The requested board id does not exist in the collection."""

    def __init__(self, collection: str, board_id: int) -> None:
        super().__init__(collection, board_id, f"Board {board_id} not found in '{collection}'")


class BoardAlreadyExistsError(RepositoryError):
    """A board with the same id is already stored in the collection."""

    def __init__(self, collection: str, board_id: int) -> None:
        super().__init__(collection, board_id, f"Board {board_id} already exists in '{collection}'")
