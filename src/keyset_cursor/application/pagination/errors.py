"""Application pagination – construction-boundary errors.

Every error is raised before any SQL expression is built, so a request either
produces a complete :class:`PaginationResult` or fails synchronously.
"""
from __future__ import annotations

from typing import Any

from keyset_cursor.kernel.errors import ValidationError


class PaginationError(ValidationError):
    """Base class for malformed pagination requests."""

    default_code = "pagination_error"


class CursorArityError(PaginationError):
    """Wrong number of cursor levels, or a level with the wrong number of items."""

    default_code = "cursor_arity"

    def __init__(self, message: str, *, arity: int, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.detail.setdefault("arity", arity)
        self.arity = arity


class InvalidSortDirectionError(PaginationError):
    default_code = "invalid_sort_direction"

    def __init__(self, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"Sort direction must be 'asc' or 'desc', got {value!r}",
            **kwargs,
        )
        self.detail.setdefault("value", repr(value))
        self.value = value


class InvalidCursorColumnError(PaginationError):
    """The object given as a cursor column is not a SQLAlchemy column expression."""

    default_code = "invalid_cursor_column"

    def __init__(self, level: str, column: object, **kwargs: Any) -> None:
        super().__init__(
            f"{level.capitalize()} cursor column must be a SQLAlchemy column expression, "
            f"got {type(column).__name__}",
            **kwargs,
        )
        self.detail.update({"level": level, "column_type": type(column).__name__})
        self.level = level


class CursorTypeMismatchError(PaginationError):
    """A cursor value's Python type does not match its column's mapped type."""

    default_code = "cursor_type_mismatch"

    def __init__(
        self,
        level: str,
        column_name: str,
        expected: type,
        actual: type,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{level.capitalize()} cursor value for column '{column_name}' must be "
            f"{expected.__name__}, got {actual.__name__}",
            **kwargs,
        )
        self.detail.update(
            {
                "level": level,
                "column": column_name,
                "expected": expected.__name__,
                "actual": actual.__name__,
            }
        )
        self.level = level
        self.column_name = column_name
        self.expected = expected
        self.actual = actual


class CursorRelationMismatchError(PaginationError):
    """Primary and secondary cursor columns belong to different relations."""

    default_code = "cursor_relation_mismatch"

    def __init__(self, primary: str | None, secondary: str | None, **kwargs: Any) -> None:
        super().__init__(
            f"Secondary cursor column must belong to the same relation as the "
            f"primary column (primary {primary!r}, secondary {secondary!r})",
            **kwargs,
        )
        self.detail.update({"primary_relation": primary, "secondary_relation": secondary})


class InvalidLimitError(PaginationError):
    default_code = "invalid_limit"

    def __init__(self, limit: object, max_limit: int, **kwargs: Any) -> None:
        super().__init__(
            f"limit must be an integer between 1 and {max_limit}, got {limit!r}",
            **kwargs,
        )
        self.detail.update({"limit": repr(limit), "max_limit": max_limit})
        self.limit = limit
        self.max_limit = max_limit


class CursorValueMissingError(PaginationError):
    """A row handed to :func:`next_request` lacks a cursor column."""

    default_code = "cursor_value_missing"

    def __init__(self, column_name: str, **kwargs: Any) -> None:
        super().__init__(f"Row has no value for cursor column '{column_name}'", **kwargs)
        self.detail.setdefault("column", column_name)
        self.column_name = column_name


__all__ = [
    "CursorArityError",
    "CursorRelationMismatchError",
    "CursorTypeMismatchError",
    "CursorValueMissingError",
    "InvalidCursorColumnError",
    "InvalidLimitError",
    "InvalidSortDirectionError",
    "PaginationError",
]
