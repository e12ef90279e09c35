"""Testing support – property-based generators for cursor requests."""

from keyset_cursor.testing.generators import (
    cursor_level_strategy,
    cursor_request_strategy,
    sort_direction_strategy,
)

__all__ = ["cursor_level_strategy", "cursor_request_strategy", "sort_direction_strategy"]
