"""Observability – structured logging helpers."""
from keyset_cursor.observability.logging.factory import JsonLoggerFactory
from keyset_cursor.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
