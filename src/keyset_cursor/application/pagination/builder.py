"""Application pagination – CursorPredicateBuilder.

Derives the ORDER BY list, LIMIT and WHERE clause for one page of keyset
pagination.  With a single unique column ``c``::

    c > :value                       -- ascending
    c < :value                       -- descending

With a non-unique column ``p`` and a unique tie-breaker ``s``::

    p > :p OR (p = :p AND s > :s)    -- operators follow each level's direction

The predicate is only emitted once every level carries a cursor value, and is
always AND-ed onto the caller's ``where``.
"""
from __future__ import annotations

import operator
from decimal import Decimal
from typing import Any, Callable

from sqlalchemy import ColumnElement, and_, asc, desc, or_

from keyset_cursor.application.pagination.cursor import (
    CursorLevel,
    CursorRequest,
    DualCursor,
    PaginationRequest,
    SortDirection,
)
from keyset_cursor.application.pagination.errors import (
    CursorRelationMismatchError,
    CursorTypeMismatchError,
    InvalidCursorColumnError,
    InvalidLimitError,
)
from keyset_cursor.application.pagination.result import PaginationResult
from keyset_cursor.config.settings import PaginationSettings
from keyset_cursor.observability.logging import get_logger

_ORDERINGS: dict[SortDirection, Callable[[Any], Any]] = {
    SortDirection.ASC: asc,
    SortDirection.DESC: desc,
}
_COMPARATORS: dict[SortDirection, Callable[[Any, Any], Any]] = {
    SortDirection.ASC: operator.gt,
    SortDirection.DESC: operator.lt,
}
_LEVEL_NAMES = ("primary", "secondary")

# Column python_type -> value types accepted in addition to the type itself.
_WIDENING: dict[type, tuple[type, ...]] = {float: (int,), Decimal: (int,)}


def _column_clause(level_name: str, column: Any) -> ColumnElement[Any]:
    if isinstance(column, ColumnElement):
        return column
    clause_element = getattr(column, "__clause_element__", None)
    if callable(clause_element):
        clause = clause_element()
        if isinstance(clause, ColumnElement):
            return clause
    raise InvalidCursorColumnError(level_name, column)


def _column_name(clause: ColumnElement[Any]) -> str:
    return getattr(clause, "name", None) or getattr(clause, "key", None) or str(clause)


def _relation_name(table: Any) -> str | None:
    if table is None:
        return None
    return getattr(table, "fullname", None) or getattr(table, "name", None)


def _expected_python_type(clause: ColumnElement[Any]) -> type | None:
    try:
        return clause.type.python_type
    except NotImplementedError:
        return None


def _check_value_type(level_name: str, clause: ColumnElement[Any], value: Any) -> None:
    expected = _expected_python_type(clause)
    if expected is None or expected is object:
        return
    if isinstance(value, bool) and expected is not bool:
        raise CursorTypeMismatchError(level_name, _column_name(clause), expected, type(value))
    if isinstance(value, expected) or isinstance(value, _WIDENING.get(expected, ())):
        return
    raise CursorTypeMismatchError(level_name, _column_name(clause), expected, type(value))


def _comparison(clause: ColumnElement[Any], level: CursorLevel) -> ColumnElement[bool]:
    return _COMPARATORS[level.direction](clause, level.value)


def _ordering(clause: ColumnElement[Any], level: CursorLevel) -> Any:
    return _ORDERINGS[level.direction](clause)


def _conjoin(where: Any, pagination: Any) -> Any:
    if where is None:
        return pagination
    if pagination is None:
        return where
    return and_(where, pagination)


class CursorPredicateBuilder:
    """Stateless builder turning a :class:`PaginationRequest` into a
    :class:`PaginationResult`.

    Instances only hold their settings and may be shared freely.
    """

    def __init__(self, settings: PaginationSettings | None = None) -> None:
        self._settings = settings or PaginationSettings()
        self._log = get_logger(__name__)

    @property
    def settings(self) -> PaginationSettings:
        return self._settings

    def build(self, request: PaginationRequest) -> PaginationResult:
        """Compute ordering, limit and filter for *request*.

        Raises:
            InvalidLimitError: ``limit`` is not an int in ``[1, max_limit]``.
            InvalidCursorColumnError: a column is not a SQLAlchemy column.
            CursorTypeMismatchError: a cursor value does not match its column type.
            CursorRelationMismatchError: the two columns live in different
                tables (only with ``require_same_relation``).
        """
        clauses = self._validate(request)
        levels = request.cursors.levels
        pagination = self._pagination_predicate(request.cursors, clauses)
        where = _conjoin(request.where, pagination)

        self._log.debug(
            "keyset_pagination_built",
            levels=len(levels),
            limit=request.limit,
            has_cursor=pagination is not None,
            has_filter=where is not None,
        )
        return PaginationResult(
            order_by=tuple(_ordering(clause, level) for clause, level in zip(clauses, levels)),
            limit=request.limit,
            where=where,
        )

    def _pagination_predicate(
        self,
        cursors: CursorRequest,
        clauses: list[ColumnElement[Any]],
    ) -> ColumnElement[bool] | None:
        if not isinstance(cursors, DualCursor):
            level = cursors.level
            return _comparison(clauses[0], level) if level.has_value else None

        primary, secondary = cursors.primary, cursors.secondary
        if not (primary.has_value and secondary.has_value):
            if primary.has_value or secondary.has_value:
                self._log.warning(
                    "incomplete_dual_cursor",
                    primary_present=primary.has_value,
                    secondary_present=secondary.has_value,
                )
            return None
        primary_clause, secondary_clause = clauses
        return or_(
            _comparison(primary_clause, primary),
            and_(primary_clause == primary.value, _comparison(secondary_clause, secondary)),
        )

    def _validate(self, request: PaginationRequest) -> list[ColumnElement[Any]]:
        """Check *request* and return its columns resolved to SQL clauses."""
        limit = request.limit
        max_limit = self._settings.max_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= max_limit:
            self._log.debug("keyset_pagination_rejected", reason="invalid_limit")
            raise InvalidLimitError(limit, max_limit)

        clauses: list[ColumnElement[Any]] = []
        for level_name, level in zip(_LEVEL_NAMES, request.cursors.levels):
            try:
                clause = _column_clause(level_name, level.column)
                if self._settings.check_value_types and level.has_value:
                    _check_value_type(level_name, clause, level.value)
            except (InvalidCursorColumnError, CursorTypeMismatchError) as exc:
                self._log.debug("keyset_pagination_rejected", reason=exc.code, level=level_name)
                raise
            clauses.append(clause)

        if self._settings.require_same_relation and len(clauses) == 2:
            # identity, not name: an alias may reuse another table's name
            primary, secondary = (getattr(c, "table", None) for c in clauses)
            if primary is None or primary is not secondary:
                self._log.debug("keyset_pagination_rejected", reason="cursor_relation_mismatch")
                raise CursorRelationMismatchError(
                    _relation_name(primary), _relation_name(secondary)
                )
        return clauses


def build_pagination(
    request: PaginationRequest,
    *,
    settings: PaginationSettings | None = None,
) -> PaginationResult:
    """Functional shortcut for ``CursorPredicateBuilder(settings).build(request)``."""
    return CursorPredicateBuilder(settings).build(request)


def with_cursor_pagination(
    *,
    cursors: Any,
    limit: int | None = None,
    where: Any = None,
    settings: PaginationSettings | None = None,
) -> PaginationResult:
    """Keyword form accepting the tuple-shaped cursors.

    Example::

        page = with_cursor_pagination(
            cursors=[(posts.c.created_at, "desc", last_seen_at), (posts.c.id, "desc", last_id)],
            limit=10,
            where=posts.c.status == "active",
        )
        rows = conn.execute(page.apply(select(posts))).all()

    ``limit`` falls back to ``settings.default_limit``.
    """
    builder = CursorPredicateBuilder(settings)
    if limit is None:
        limit = builder.settings.default_limit
    return builder.build(PaginationRequest(cursors=cursors, limit=limit, where=where))


__all__ = ["CursorPredicateBuilder", "build_pagination", "with_cursor_pagination"]
