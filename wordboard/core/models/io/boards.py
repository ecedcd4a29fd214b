"""
Board I/O models for API requests and responses.

This module contains Pydantic-based I/O schemas shared by the Scrabble board
and word play board endpoints. Both resources have the same contract.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wordboard.core.database.entities.base import MAX_BOARD_ID, MAX_BOARD_LENGTH


class BoardRead(BaseModel):
    """Schema for reading a board from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Board identifier")
    board: str = Field(description="Serialized board")


class BoardCreate(BaseModel):
    """Schema for creating a board via the API."""

    id: int = Field(ge=0, le=MAX_BOARD_ID, description="Client-assigned board identifier")
    board: str = Field(default="", max_length=MAX_BOARD_LENGTH, description="Serialized board")


class BoardReplace(BaseModel):
    """Schema for storing a board under an id taken from the path."""

    board: str = Field(max_length=MAX_BOARD_LENGTH, description="Serialized board")


class BoardUpdate(BaseModel):
    """Schema for partially updating a board. All fields are optional."""

    board: Optional[str] = Field(default=None, max_length=MAX_BOARD_LENGTH, description="Serialized board")


class BoardCount(BaseModel):
    """Number of boards in a collection."""

    count: int
