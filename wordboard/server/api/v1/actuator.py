"""
Actuator Endpoints.

Operational endpoints mounted under the management base path
(``/actuator`` by default):

- ``GET /actuator``: discovery links
- ``GET /actuator/health``: aggregated health of all indicators
- ``GET /actuator/health/{group}``: health of the liveness or readiness group
- ``GET /actuator/info``: build and runtime information
- ``GET /actuator/metrics``: names of the registered meters
- ``GET /actuator/metrics/{name}``: measurements of one meter, filterable by ``tag=key:value``
"""

import platform
from typing import Dict, List

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from wordboard.core.health import Status, http_status_for
from wordboard.core.logging_config import get_logger
from wordboard.server.core.config import settings
from wordboard.server.services.deps import HealthRegistryDep, MeterRegistryDep

logger = get_logger(__name__)

router = APIRouter()


def _href(request: Request, path: str) -> str:
    return f"{str(request.base_url).rstrip('/')}{settings.management.base_path}{path}"


def _show_details() -> bool:
    return settings.management.show_details == "always"


def _parse_tags(tags: List[str]) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for tag in tags:
        key, sep, value = tag.partition(":")
        if not sep or not key:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid tag '{tag}', expected 'key:value'",
            )
        parsed[key] = value
    return parsed


@router.get(
    "",
    summary="Actuator Links",
    description="List the exposed actuator endpoints.",
)
async def links(request: Request):
    return {
        "_links": {
            "self": {"href": _href(request, ""), "templated": False},
            "health": {"href": _href(request, "/health"), "templated": False},
            "health-path": {"href": _href(request, "/health/{*path}"), "templated": True},
            "info": {"href": _href(request, "/info"), "templated": False},
            "metrics": {"href": _href(request, "/metrics"), "templated": False},
            "metrics-requiredMetricName": {"href": _href(request, "/metrics/{requiredMetricName}"), "templated": True},
        }
    }


@router.get(
    "/health",
    summary="Health",
    description="Aggregated health of every registered indicator. Responds 503 when DOWN or OUT_OF_SERVICE.",
    responses={503: {"description": "At least one indicator is DOWN or OUT_OF_SERVICE"}},
)
async def health(health_registry: HealthRegistryDep) -> JSONResponse:
    body = await health_registry.check(show_details=_show_details())
    overall = Status(body["status"])
    if overall is not Status.UP:
        logger.warning(f"Health check reported {overall.value}")
    return JSONResponse(content=body, status_code=http_status_for(overall))


@router.get(
    "/health/{group}",
    summary="Health Group",
    description="Health of a named group (liveness, readiness).",
    responses={404: {"description": "Unknown health group"}},
)
async def health_group(group: str, health_registry: HealthRegistryDep) -> JSONResponse:
    if group not in health_registry.group_names:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Health group '{group}' not found")
    body = await health_registry.check(show_details=_show_details(), group=group)
    return JSONResponse(content=body, status_code=http_status_for(Status(body["status"])))


@router.get(
    "/info",
    summary="Info",
    description="Build and runtime information about the service.",
)
async def info():
    app_info = settings.app_info
    return {
        "app": {
            "name": app_info.name,
            "description": app_info.description,
            "version": app_info.version,
            "group": app_info.group,
        },
        "python": {
            "version": platform.python_version(),
            "implementation": platform.python_implementation(),
        },
    }


@router.get(
    "/metrics",
    summary="Metric Names",
    description="Names of all registered meters.",
)
async def metric_names(registry: MeterRegistryDep):
    return {"names": registry.names()}


@router.get(
    "/metrics/{name}",
    summary="Metric",
    description="Measurements of one meter aggregated over the series matching the tag filters.",
    responses={
        400: {"description": "Malformed tag filter"},
        404: {"description": "Unknown meter or no series matching the tags"},
    },
)
async def metric(
    name: str,
    registry: MeterRegistryDep,
    tag: List[str] = Query([], description="Tag filter in the form key:value"),
):
    body = registry.describe(name, _parse_tags(tag))
    if body is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Metric '{name}' not found")
    return body
