"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for tracing of the
wordboard service, including:
- API endpoint tracing
- MongoDB command tracing
- Board change events
- Error tracking

Logfire stays completely silent until ``initialize_logfire`` has configured it
with a token, so the helpers below are safe to call from any code path.
"""

import logging
from typing import Optional

import logfire
from fastapi import FastAPI

from wordboard.server.core.config import LogfireConfig, settings

logger = logging.getLogger(__name__)

_logfire_configured = False


def is_logfire_configured() -> bool:
    """Return whether Logfire was configured for this process."""
    return _logfire_configured


def initialize_logfire(app: FastAPI | None = None, config: Optional[LogfireConfig] = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Instruments PyMongo and, when an application is given, FastAPI.

    Args:
        app: FastAPI application instance for endpoint instrumentation (optional).
        config: Logfire configuration, defaults to the one bound from the environment.

    Returns:
        True when Logfire is configured after the call.
    """
    global _logfire_configured

    config = config or settings.logfire

    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=config.token,
            service_name=config.service_name,
            service_version=config.service_version,
            environment=config.environment,
            console=False,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    _logfire_configured = True

    if config.trace_pymongo:
        try:
            logfire.instrument_pymongo()
            logger.info("Logfire: PyMongo instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument PyMongo: {e}")

    if config.trace_fastapi:
        if app is not None:
            try:
                logfire.instrument_fastapi(app)
                logger.info("Logfire: FastAPI instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument FastAPI: {e}")
        else:
            logger.debug("FastAPI app instance not provided, skipping FastAPI instrumentation")

    logger.info(
        f"Logfire monitoring initialized: environment={config.environment}, service={config.service_name}"
    )
    return True


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _logfire_configured:
        return
    try:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")


def log_board_change(collection: str, board_id: int, operation: str) -> None:
    """
    Log a write against one of the board collections.

    Args:
        collection: MongoDB collection name
        board_id: Identifier of the written board
        operation: create, save, update or delete
    """
    if not _logfire_configured:
        return
    try:
        logfire.info("Board changed", collection=collection, board_id=board_id, operation=operation)
    except Exception:
        logger.debug(f"Could not log board change to Logfire: {collection}/{board_id}")


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    if not _logfire_configured:
        return
    try:
        logfire.error(
            "{error_type}: {error_message}",
            error_type=error_type,
            error_message=error_message,
            **(context or {}),
        )
    except Exception:
        logger.debug(f"Could not log error to Logfire: {error_type}")
