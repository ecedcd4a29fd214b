"""
Base document model for board entities.

Boards are keyed by a client-assigned integer id that is stored as the
MongoDB ``_id`` of the document; the board itself is an opaque string.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, Field

MAX_BOARD_ID = 2**63 - 1
MAX_BOARD_LENGTH = 10_000


class BoardDocument(BaseModel):
    """Base class for documents stored in a board collection."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    collection_name: ClassVar[str]

    id: int = Field(ge=0, le=MAX_BOARD_ID, description="Client-assigned board identifier")
    board: str = Field(default="", max_length=MAX_BOARD_LENGTH, description="Serialized board")

    def to_document(self) -> dict[str, Any]:
        """Convert the entity into the MongoDB document shape."""
        document = self.model_dump(exclude={"id"})
        document["_id"] = self.id
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]):
        """Build the entity from a MongoDB document, ignoring unknown fields."""
        data = {key: value for key, value in document.items() if key != "_id"}
        data["id"] = document["_id"]
        return cls.model_validate(data)
