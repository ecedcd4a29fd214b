"""
Middleware modules for the wordboard server.

This package contains custom middleware for request timing, metrics and
Logfire request logging.
"""

from .request_metrics_middleware import RequestMetricsMiddleware, RouteTemplates, include_router, route_template

__all__ = ["RequestMetricsMiddleware", "RouteTemplates", "include_router", "route_template"]
