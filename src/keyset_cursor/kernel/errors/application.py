"""Application-layer errors – cross-cutting concerns outside caller input."""

from __future__ import annotations

from keyset_cursor.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
