"""Server configuration, constants and dependency helpers."""
