"""Testing generators – Hypothesis strategies."""
from keyset_cursor.testing.generators.strategies import (
    cursor_level_strategy,
    cursor_request_strategy,
    sort_direction_strategy,
)

__all__ = ["cursor_level_strategy", "cursor_request_strategy", "sort_direction_strategy"]
