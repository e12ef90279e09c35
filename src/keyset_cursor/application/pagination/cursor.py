"""Application pagination – cursor levels and the one/two level request shapes."""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from enum import Enum
from typing import Any, Union

from keyset_cursor.application.pagination.errors import (
    CursorArityError,
    InvalidSortDirectionError,
)


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: object) -> "SortDirection":
        """Coerce a member or a case-insensitive ``"asc"`` / ``"desc"`` string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidSortDirectionError(value)


# SQLAlchemy columns overload ``==``, so none of the dataclasses below that
# hold columns or filter expressions generate ``__eq__``.


@dataclasses.dataclass(frozen=True, eq=False)
class CursorLevel:
    """One ordering level: a column, its direction and the last-seen value.

    ``value`` is ``None`` on the first page. A ``NULL`` cursor value cannot be
    expressed, so cursor columns are expected to be non-nullable.
    """

    column: Any
    direction: SortDirection = SortDirection.ASC
    value: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection.parse(self.direction))

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def with_value(self, value: Any) -> "CursorLevel":
        return dataclasses.replace(self, value=value)


@dataclasses.dataclass(frozen=True, eq=False)
class SingleCursor:
    """A single unique, sequential column."""

    level: CursorLevel

    @property
    def levels(self) -> tuple[CursorLevel, ...]:
        return (self.level,)

    def with_values(self, value: Any) -> "SingleCursor":
        return SingleCursor(self.level.with_value(value))


@dataclasses.dataclass(frozen=True, eq=False)
class DualCursor:
    """A non-unique ordering column followed by a unique tie-breaker."""

    primary: CursorLevel
    secondary: CursorLevel

    @property
    def levels(self) -> tuple[CursorLevel, ...]:
        return (self.primary, self.secondary)

    def with_values(self, primary: Any, secondary: Any) -> "DualCursor":
        return DualCursor(self.primary.with_value(primary), self.secondary.with_value(secondary))


CursorRequest = Union[SingleCursor, DualCursor]


def _parse_level(item: object, index: int) -> CursorLevel:
    if isinstance(item, CursorLevel):
        return item
    if isinstance(item, (tuple, list)) and len(item) in (2, 3):
        return CursorLevel(*item)
    arity = len(item) if isinstance(item, (tuple, list)) else 1
    raise CursorArityError(
        f"Cursor level {index} must be (column, direction) or "
        f"(column, direction, value), got {arity} item(s)",
        arity=arity,
        detail={"level": index},
    )


def parse_cursors(cursors: object) -> CursorRequest:
    """Turn the loosely typed ``[(col, "asc"), (col, "desc", value)]`` form into
    a :class:`SingleCursor` or :class:`DualCursor`.

    Already-built requests are returned unchanged.

    Raises:
        CursorArityError: zero or more than two levels, or a level that is not
            a 2- or 3-item tuple.
        InvalidSortDirectionError: a direction other than asc / desc.
    """
    if isinstance(cursors, (SingleCursor, DualCursor)):
        return cursors
    if isinstance(cursors, CursorLevel):
        return SingleCursor(cursors)
    if isinstance(cursors, (str, bytes)) or not isinstance(cursors, Sequence):
        raise CursorArityError(
            f"cursors must be a sequence of one or two levels, got {type(cursors).__name__}",
            arity=0,
        )
    if len(cursors) == 1:
        return SingleCursor(_parse_level(cursors[0], 0))
    if len(cursors) == 2:
        return DualCursor(_parse_level(cursors[0], 0), _parse_level(cursors[1], 1))
    raise CursorArityError(
        f"cursors must contain one or two levels, got {len(cursors)}",
        arity=len(cursors),
    )


@dataclasses.dataclass(frozen=True, eq=False)
class PaginationRequest:
    """Everything needed to compute one page: cursor levels, page size and an
    optional caller filter that the pagination predicate is AND-ed onto.

    ``cursors`` accepts the tuple form understood by :func:`parse_cursors`.
    """

    cursors: CursorRequest
    limit: int
    where: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "cursors", parse_cursors(self.cursors))


__all__ = [
    "CursorLevel",
    "CursorRequest",
    "DualCursor",
    "PaginationRequest",
    "SingleCursor",
    "SortDirection",
    "parse_cursors",
]
