"""
Request Metrics Middleware for FastAPI.

This middleware records every request into the ``http.server.requests``
timer and forwards a summary to Logfire, including:
- Request duration, tagged by method, route template, status and outcome
- Slow request warnings
- Error tracking for requests that raise
"""

import time
from typing import Any, Callable, List, Optional, Pattern, Set, Tuple

from fastapi import APIRouter, FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.routing import Match, compile_path

from wordboard.core.logging_config import get_logger
from wordboard.core.metrics import MeterRegistry, meter_registry, record_request
from wordboard.core.monitoring import log_api_request
from wordboard.server.core.constant import SLOW_REQUEST_THRESHOLD_MS

logger = get_logger(__name__)

UNKNOWN_URI = "UNKNOWN"


class RouteTemplates:
    """Full path templates of the routes of every included router.

    Included routers are recorded with the prefix they are mounted under, so
    the template does not depend on how the application stores them.
    """

    def __init__(self) -> None:
        self._routes: List[Tuple[Pattern[str], Optional[Set[str]], str]] = []

    def add_router(self, router: APIRouter, prefix: str = "") -> None:
        for route in router.routes:
            path = getattr(route, "path", None)
            if path is None:
                continue
            template = f"{prefix}{path}"
            regex, _, _ = compile_path(template)
            self._routes.append((regex, getattr(route, "methods", None), template))

    @property
    def templates(self) -> List[str]:
        return [template for _, _, template in self._routes]

    def resolve(self, method: str, path: str) -> Optional[str]:
        """Return the template matching ``path``, preferring one that also accepts ``method``."""
        partial = None
        for regex, methods, template in self._routes:
            if regex.match(path) is None:
                continue
            if methods is None or method in methods:
                return template
            if partial is None:
                partial = template
        return partial


def include_router(app: FastAPI, router: APIRouter, prefix: str = "", **kwargs: Any) -> None:
    """Include ``router`` in ``app`` and record its route templates for the metrics."""
    app.include_router(router, prefix=prefix, **kwargs)
    templates = getattr(app.state, "route_templates", None)
    if templates is None:
        templates = RouteTemplates()
        app.state.route_templates = templates
    templates.add_router(router, prefix)


def route_template(request: Request) -> str:
    """Return the path template of the route matching ``request``.

    Unmatched paths are reported as ``UNKNOWN`` so that arbitrary URLs do
    not create new metric series.
    """
    templates = getattr(request.app.state, "route_templates", None)
    if templates is not None:
        template = templates.resolve(request.method, request.url.path)
        if template is not None:
            return template

    router = getattr(request.app, "router", None)
    for route in getattr(router, "routes", []):
        path = getattr(route, "path", None)
        if path is None:
            continue
        match, _ = route.matches(request.scope)
        if match is Match.FULL:
            return path
    return UNKNOWN_URI


class RequestMetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for timing API requests."""

    def __init__(self, app, registry: Optional[MeterRegistry] = None) -> None:
        super().__init__(app)
        self.registry = registry if registry is not None else meter_registry

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process the request and record metrics.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/handler

        Returns:
            The HTTP response
        """
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        uri = route_template(request)

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            duration_ms = duration * 1000
            logger.error(
                f"API request failed: {method} {path}",
                exc_info=True,
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": duration_ms,
                    "error": str(e),
                },
            )
            record_request(self.registry, method, uri, 500, duration)
            log_api_request(method=method, path=path, status_code=500, duration_ms=duration_ms)
            raise

        duration = time.perf_counter() - start_time
        duration_ms = duration * 1000

        record_request(self.registry, method, uri, response.status_code, duration)
        log_api_request(method=method, path=path, status_code=response.status_code, duration_ms=duration_ms)

        response.headers["X-Process-Time"] = f"{duration_ms:.3f}"

        if duration_ms > SLOW_REQUEST_THRESHOLD_MS:
            logger.warning(
                f"Slow API request: {method} {path} took {duration_ms:.2f}ms",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": duration_ms,
                    "status_code": response.status_code,
                },
            )

        return response
