"""
Shared board endpoints.

Scrabble boards and word play boards expose the same CRUD contract; this
module builds one router per resource from the entity class and the
repository dependency.
"""

from typing import Annotated, Callable, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from wordboard.core.database.entities.base import MAX_BOARD_ID, BoardDocument
from wordboard.core.database.repositories import MongoBoardRepository
from wordboard.core.logging_config import get_logger
from wordboard.core.models.io.boards import BoardCount, BoardCreate, BoardRead, BoardReplace, BoardUpdate

logger = get_logger(__name__)

BoardIdPath = Annotated[int, Path(ge=0, le=MAX_BOARD_ID, description="Client-assigned board identifier")]

DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 500


def _read(entity: BoardDocument) -> BoardRead:
    return BoardRead.model_validate(entity, from_attributes=True)


def build_board_router(
    model: Type[BoardDocument],
    get_repository: Callable[..., MongoBoardRepository],
    label: str,
) -> APIRouter:
    """
    Build the CRUD router for one board collection.

    Args:
        model: Entity class stored by the repository
        get_repository: FastAPI dependency returning the repository
        label: Human readable resource name used in summaries and errors
    """
    router = APIRouter()

    def not_found(board_id: int) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label.capitalize()} {board_id} not found",
        )

    @router.post(
        "",
        response_model=BoardRead,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {label.title()}",
        description=f"Store a new {label} under a client-assigned id.",
        responses={
            201: {"description": f"{label.capitalize()} created"},
            409: {"description": "A board with this id already exists"},
        },
    )
    async def create_board(
        payload: BoardCreate,
        repository: MongoBoardRepository = Depends(get_repository),
    ) -> BoardRead:
        """
        Create a board.

        - **id**: client-assigned identifier, must not be taken yet.
        - **board**: serialized board, stored as is.
        """
        entity = await repository.create(model(id=payload.id, board=payload.board))
        logger.info(f"Created {label} {entity.id}")
        return _read(entity)

    @router.get(
        "",
        response_model=list[BoardRead],
        summary=f"List {label.title()}s",
        description=f"List {label}s ordered by id, with pagination and optional board filters.",
    )
    async def list_boards(
        limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Maximum number of boards"),
        offset: int = Query(0, ge=0, description="Number of boards to skip"),
        board: Optional[str] = Query(None, description="Only boards equal to this value"),
        board_contains: Optional[str] = Query(None, description="Only boards containing this text"),
        repository: MongoBoardRepository = Depends(get_repository),
    ) -> list[BoardRead]:
        entities = await repository.list(
            limit=limit,
            offset=offset,
            filters={"board": board, "board_contains": board_contains},
        )
        logger.debug(f"Retrieved {len(entities)} {label}s (limit={limit}, offset={offset})")
        return [_read(entity) for entity in entities]

    @router.get(
        "/count",
        response_model=BoardCount,
        summary=f"Count {label.title()}s",
    )
    async def count_boards(
        board: Optional[str] = Query(None, description="Only boards equal to this value"),
        board_contains: Optional[str] = Query(None, description="Only boards containing this text"),
        repository: MongoBoardRepository = Depends(get_repository),
    ) -> BoardCount:
        count = await repository.count(filters={"board": board, "board_contains": board_contains})
        return BoardCount(count=count)

    @router.get(
        "/{board_id}",
        response_model=BoardRead,
        summary=f"Get {label.title()}",
        responses={404: {"description": f"{label.capitalize()} not found"}},
    )
    async def get_board(
        board_id: BoardIdPath,
        repository: MongoBoardRepository = Depends(get_repository),
    ) -> BoardRead:
        entity = await repository.get_by_id(board_id)
        if entity is None:
            raise not_found(board_id)
        return _read(entity)

    @router.put(
        "/{board_id}",
        response_model=BoardRead,
        summary=f"Store {label.title()}",
        description=f"Create the {label} or replace the stored one. Returns 201 when created, 200 when replaced.",
        responses={
            200: {"description": f"{label.capitalize()} replaced"},
            201: {"description": f"{label.capitalize()} created"},
        },
    )
    async def save_board(
        payload: BoardReplace,
        response: Response,
        board_id: BoardIdPath,
        repository: MongoBoardRepository = Depends(get_repository),
    ) -> BoardRead:
        entity, created = await repository.save(model(id=board_id, board=payload.board))
        if created:
            response.status_code = status.HTTP_201_CREATED
        return _read(entity)

    @router.patch(
        "/{board_id}",
        response_model=BoardRead,
        summary=f"Update {label.title()}",
        description="Partially update a board. Only provided fields are changed.",
        responses={404: {"description": f"{label.capitalize()} not found"}},
    )
    async def update_board(
        payload: BoardUpdate,
        board_id: BoardIdPath,
        repository: MongoBoardRepository = Depends(get_repository),
    ) -> BoardRead:
        entity = await repository.get_by_id(board_id)
        if entity is None:
            raise not_found(board_id)

        update_data = payload.model_dump(exclude_unset=True, exclude_none=True)
        if update_data:
            entity = model.model_validate({**entity.model_dump(), **update_data})
            entity = await repository.update(entity)
        return _read(entity)

    @router.delete(
        "/{board_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Delete {label.title()}",
        responses={
            204: {"description": f"{label.capitalize()} deleted"},
            404: {"description": f"{label.capitalize()} not found"},
        },
    )
    async def delete_board(
        board_id: BoardIdPath,
        repository: MongoBoardRepository = Depends(get_repository),
    ) -> None:
        if not await repository.delete(board_id):
            raise not_found(board_id)
        logger.info(f"Deleted {label} {board_id}")

    return router
