"""Application pagination – KeysetPage and next-page request derivation."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from keyset_cursor.application.pagination.cursor import PaginationRequest
from keyset_cursor.application.pagination.errors import CursorValueMissingError

T = TypeVar("T")


def _value_of(row: Any, column: Any) -> Any:
    clause = column.__clause_element__() if hasattr(column, "__clause_element__") else column
    key = getattr(column, "key", None) or getattr(clause, "key", None)

    mapping = getattr(row, "_mapping", None)
    if mapping is not None:
        for candidate in (clause, key):
            if candidate is not None and candidate in mapping:
                return mapping[candidate]
        raise CursorValueMissingError(str(key))
    if isinstance(row, Mapping):
        if key in row:
            return row[key]
        raise CursorValueMissingError(str(key))
    try:
        return getattr(row, key)
    except (AttributeError, TypeError) as exc:
        raise CursorValueMissingError(str(key)) from exc


def next_request(request: PaginationRequest, row: Any) -> PaginationRequest:
    """Return *request* positioned just after *row*.

    *row* may be a SQLAlchemy ``Row``, a plain mapping keyed by column key, or
    an ORM instance.
    """
    values = [_value_of(row, level.column) for level in request.cursors.levels]
    return dataclasses.replace(request, cursors=request.cursors.with_values(*values))


@dataclasses.dataclass(frozen=True, eq=False)
class KeysetPage(Generic[T]):
    """One page of rows plus the request that fetches the following page."""

    items: list[T]
    next_request: PaginationRequest | None = None
    has_more: bool = False

    @classmethod
    def of(cls, rows: Iterable[T], request: PaginationRequest) -> "KeysetPage[T]":
        """Build a page from rows fetched with ``PaginationResult.apply(..., lookahead=True)``."""
        fetched = list(rows)
        items = fetched[: request.limit]
        has_more = len(fetched) > request.limit
        following = next_request(request, items[-1]) if has_more and items else None
        return cls(items=items, next_request=following, has_more=has_more)


__all__ = ["KeysetPage", "next_request"]
