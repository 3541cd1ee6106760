"""Mutable JSON value trees, leveled logging and server-sent events parsing."""

__version__ = "0.1.0"

__all__ = ["edit", "logger", "node", "ops", "sse"]