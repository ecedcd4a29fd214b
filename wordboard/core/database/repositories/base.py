"""
Base repository interfaces and utilities.

This module provides the repository interface shared by the board collections
and the generic MongoDB implementation behind it. Built on the PyMongo async
API so that repository calls never block the event loop.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from wordboard.core.logging_config import get_logger
from wordboard.core.metrics import MeterRegistry, meter_registry, record_board_operation
from wordboard.core.monitoring import log_board_change

from ..entities.base import BoardDocument
from ..errors import BoardAlreadyExistsError, BoardNotFoundError

logger = get_logger(__name__)

EntityType = TypeVar("EntityType", bound=BoardDocument)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository interface with common CRUD operations."""

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: Entity instance to persist

        Returns:
            The persisted entity

        Raises:
            BoardAlreadyExistsError: when the id is already taken
        """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def save(self, entity: EntityType) -> Tuple[EntityType, bool]:
        """Insert the entity or replace the stored one with the same id.

        Returns:
            The stored entity and whether it was newly created
        """

    @abstractmethod
    async def update(self, entity: EntityType) -> EntityType:
        """Replace an existing entity record.

        Raises:
            BoardNotFoundError: when no entity has this id
        """

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete entity by its primary identifier.

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances ordered by id
        """

    @abstractmethod
    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count entities matching the filters."""

    @abstractmethod
    async def exists(self, entity_id: int) -> bool:
        """Return whether an entity with this id is stored."""


class QueryBuilder:
    """Utility class for building MongoDB filter documents."""

    @staticmethod
    def build_filter(filters: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Translate API filters into a MongoDB query.

        Supported keys: ``board`` (exact match) and ``board_contains``
        (literal substring). ``None`` values are ignored.
        """
        query: Dict[str, Any] = {}
        if not filters:
            return query
        board = filters.get("board")
        contains = filters.get("board_contains")
        if board is not None:
            query["board"] = board
        elif contains is not None:
            query["board"] = {"$regex": re.escape(contains)}
        return query


class MongoBoardRepository(AsyncBaseRepository[EntityType]):
    """Repository for one board collection."""

    def __init__(self, collection: Any, model: Type[EntityType], registry: Optional[MeterRegistry] = None) -> None:
        """Initialize repository with an async collection and the entity class.

        Args:
            collection: PyMongo ``AsyncCollection`` holding the documents
            model: Entity class stored in the collection
            registry: Meter registry receiving operation counts
        """
        self.collection = collection
        self.model = model
        self.registry = registry if registry is not None else meter_registry

    @property
    def collection_name(self) -> str:
        return self.model.collection_name

    def _record(self, operation: str) -> None:
        record_board_operation(self.registry, self.collection_name, operation)

    async def create(self, entity: EntityType) -> EntityType:
        self._record("create")
        try:
            await self.collection.insert_one(entity.to_document())
        except DuplicateKeyError as e:
            raise BoardAlreadyExistsError(self.collection_name, entity.id) from e
        logger.debug(f"Created board {entity.id} in {self.collection_name}")
        log_board_change(self.collection_name, entity.id, "create")
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        self._record("get")
        document = await self.collection.find_one({"_id": entity_id})
        if document is None:
            return None
        return self.model.from_document(document)

    async def save(self, entity: EntityType) -> Tuple[EntityType, bool]:
        self._record("save")
        result = await self.collection.replace_one({"_id": entity.id}, entity.to_document(), upsert=True)
        created = result.upserted_id is not None
        logger.debug(f"Saved board {entity.id} in {self.collection_name} (created={created})")
        log_board_change(self.collection_name, entity.id, "save")
        return entity, created

    async def update(self, entity: EntityType) -> EntityType:
        self._record("update")
        result = await self.collection.replace_one({"_id": entity.id}, entity.to_document())
        if result.matched_count == 0:
            raise BoardNotFoundError(self.collection_name, entity.id)
        log_board_change(self.collection_name, entity.id, "update")
        return entity

    async def delete(self, entity_id: int) -> bool:
        self._record("delete")
        result = await self.collection.delete_one({"_id": entity_id})
        deleted = result.deleted_count > 0
        if deleted:
            log_board_change(self.collection_name, entity_id, "delete")
        return deleted

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        self._record("list")
        cursor = self.collection.find(QueryBuilder.build_filter(filters)).sort("_id", ASCENDING)
        if offset:
            cursor = cursor.skip(offset)
        if limit is not None:
            cursor = cursor.limit(limit)
        documents = await cursor.to_list(length=None)
        return [self.model.from_document(document) for document in documents]

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        self._record("count")
        return await self.collection.count_documents(QueryBuilder.build_filter(filters))

    async def exists(self, entity_id: int) -> bool:
        self._record("exists")
        return await self.collection.count_documents({"_id": entity_id}, limit=1) > 0
