"""Core building blocks shared by the server: logging, tracing, metrics, health and storage."""
