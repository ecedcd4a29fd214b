"""wordboard.

A small web service that stores Scrabble and word play boards in MongoDB and
exposes operational endpoints (health, info, metrics) next to its REST API.

High-level architecture
-----------------------

``wordboard.core``
    Framework independent building blocks: logging setup, Logfire tracing,
    the in-process meter registry, health indicators and the document store
    (entities, repositories, client lifecycle).

``wordboard.server``
    The FastAPI application: configuration, routers, middleware and exception
    handlers wired on top of ``wordboard.core``.
"""

__version__ = "1.0.0.dev0"
