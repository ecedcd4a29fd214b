"""
Repository Exception Handlers.

Maps repository errors onto HTTP responses:
- BoardNotFoundError -> 404
- BoardAlreadyExistsError -> 409
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from wordboard.core.database.errors import BoardAlreadyExistsError, BoardNotFoundError, RepositoryError
from wordboard.core.logging_config import get_logger

logger = get_logger(__name__)


def _error_body(exc: RepositoryError) -> dict:
    return {
        "detail": str(exc),
        "collection": exc.collection,
        "id": exc.board_id,
    }


async def board_not_found_handler(request: Request, exc: BoardNotFoundError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_error_body(exc))


async def board_already_exists_handler(request: Request, exc: BoardAlreadyExistsError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=_error_body(exc))
