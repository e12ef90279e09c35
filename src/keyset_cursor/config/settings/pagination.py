"""Config settings – PaginationSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from keyset_cursor.config.settings.base import Settings
from keyset_cursor.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class PaginationSettings(Settings):
    """Tunables for the cursor predicate builder.

    Read from ``KEYSET_*`` environment variables by
    :class:`~keyset_cursor.config.settings.EnvSettingsLoader`.

    Attributes:
        default_limit: Page size used when a caller omits ``limit``.
        max_limit: Largest page size a request may ask for.
        check_value_types: Reject cursor values whose Python type does not
            match the column's ``python_type``.
        require_same_relation: Reject two-level requests whose columns come
            from different tables.
    """

    _prefix: ClassVar[str] = "KEYSET"

    default_limit: int = 20
    max_limit: int = 1000
    check_value_types: bool = True
    require_same_relation: bool = False

    def _validate(self) -> None:
        if self.max_limit < 1:
            raise InvalidSettingValueError("max_limit", self.max_limit, "must be >= 1")
        if not 1 <= self.default_limit <= self.max_limit:
            raise InvalidSettingValueError(
                "default_limit",
                self.default_limit,
                f"must be between 1 and max_limit ({self.max_limit})",
            )


__all__ = ["PaginationSettings"]
