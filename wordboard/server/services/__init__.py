"""Dependency providers used by the API routers."""
