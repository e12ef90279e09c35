"""Observability – structured logging."""
from keyset_cursor.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
