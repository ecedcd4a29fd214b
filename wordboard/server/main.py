"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request metrics), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wordboard.core.database import close_db, init_db
from wordboard.core.logging_config import get_logger, setup_logging
from wordboard.core.monitoring import initialize_logfire

from .api.v1 import actuator, health, scrabble_boards, word_play_boards
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestMetricsMiddleware, include_router

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Verifies the MongoDB connection on startup and closes the client on
    shutdown. A failed connection is logged but does not stop the server, so
    the actuator health endpoint can report the database as DOWN.
    """
    try:
        logger.info("Starting up wordboard server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down wordboard server...")
    await close_db()


def create_app() -> FastAPI:
    """Build the FastAPI application with all routers and middleware."""
    app = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
        wordboard API

        Stores Scrabble and word play boards in MongoDB and exposes health,
        info and metrics endpoints for operations.
        """,
        version=settings.app_info.version,
        openapi_url=f"{constant.API_V1_STR}/openapi.json",
        docs_url=f"{constant.API_V1_STR}/docs",
        redoc_url=f"{constant.API_V1_STR}/redoc",
        lifespan=lifespan,
    )

    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    app.add_middleware(RequestMetricsMiddleware)

    setup_exception_handlers(app)

    include_router(app, health.router, tags=["health"])
    include_router(app, actuator.router, prefix=settings.management.base_path, tags=["actuator"])
    include_router(
        app,
        scrabble_boards.router,
        prefix=f"{constant.API_V1_STR}{constant.SCRABBLE_BOARDS_PATH}",
        tags=["scrabble-boards"],
    )
    include_router(
        app,
        word_play_boards.router,
        prefix=f"{constant.API_V1_STR}{constant.WORD_PLAY_BOARDS_PATH}",
        tags=["word-play-boards"],
    )

    initialize_logfire(app)
    return app


app = create_app()
