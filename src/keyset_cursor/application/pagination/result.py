"""Application pagination – PaginationResult."""
from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

from sqlalchemy import Select

TSelect = TypeVar("TSelect", bound=Select)


@dataclasses.dataclass(frozen=True, eq=False)
class PaginationResult:
    """Ordering, limit and combined filter for one page.

    ``where`` is ``None`` when there is nothing to filter on, never a vacuous
    ``true()``.
    """

    order_by: tuple[Any, ...]
    limit: int
    where: Any = None

    def as_kwargs(self) -> dict[str, Any]:
        """Return the descriptor as a dict, with ``where`` only when present."""
        kwargs: dict[str, Any] = {"order_by": list(self.order_by), "limit": self.limit}
        if self.where is not None:
            kwargs["where"] = self.where
        return kwargs

    def apply(self, stmt: TSelect, *, lookahead: bool = False) -> TSelect:
        """Merge into *stmt*.

        With ``lookahead`` one extra row is requested so that
        :meth:`KeysetPage.of` can tell whether another page follows.
        """
        if self.where is not None:
            stmt = stmt.where(self.where)
        return stmt.order_by(*self.order_by).limit(self.limit + 1 if lookahead else self.limit)


__all__ = ["PaginationResult"]
