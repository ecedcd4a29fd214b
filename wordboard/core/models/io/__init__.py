"""I/O schemas for the board API."""

from .boards import BoardCount, BoardCreate, BoardRead, BoardReplace, BoardUpdate

__all__ = ["BoardCount", "BoardCreate", "BoardRead", "BoardReplace", "BoardUpdate"]
