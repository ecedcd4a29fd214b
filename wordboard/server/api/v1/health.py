"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version)
used for monitoring and deployment verification. The detailed health
report lives under the actuator endpoints.
"""

from fastapi import APIRouter

from wordboard.server.core import constant
from wordboard.server.core.config import settings

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    It does not touch MongoDB; use ``/actuator/health`` for dependency checks.
    """
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """
    Get API version.

    Returns the current version of the service and supported schema version.
    """
    return {"version": settings.app_info.version, "schema_version": constant.SCHEMA_VERSION}
