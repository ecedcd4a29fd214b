"""
wordboard Server Package.

This package contains the web server implementation for the wordboard service.

Subpackages:
    api: FastAPI route definitions (board resources, health, actuator).
    core: Configuration and constants.
    exception_handlers: Mapping of errors onto HTTP responses.
    middleware: Request metrics and tracing.
    services: Dependency providers for the routers.
"""
