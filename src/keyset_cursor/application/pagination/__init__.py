"""Application pagination – keyset cursor requests, predicate builder and pages."""
from keyset_cursor.application.pagination.builder import (
    CursorPredicateBuilder,
    build_pagination,
    with_cursor_pagination,
)
from keyset_cursor.application.pagination.cursor import (
    CursorLevel,
    CursorRequest,
    DualCursor,
    PaginationRequest,
    SingleCursor,
    SortDirection,
    parse_cursors,
)
from keyset_cursor.application.pagination.errors import (
    CursorArityError,
    CursorRelationMismatchError,
    CursorTypeMismatchError,
    CursorValueMissingError,
    InvalidCursorColumnError,
    InvalidLimitError,
    InvalidSortDirectionError,
    PaginationError,
)
from keyset_cursor.application.pagination.page import KeysetPage, next_request
from keyset_cursor.application.pagination.result import PaginationResult

__all__ = [
    "CursorArityError",
    "CursorLevel",
    "CursorPredicateBuilder",
    "CursorRelationMismatchError",
    "CursorRequest",
    "CursorTypeMismatchError",
    "CursorValueMissingError",
    "DualCursor",
    "InvalidCursorColumnError",
    "InvalidLimitError",
    "InvalidSortDirectionError",
    "KeysetPage",
    "PaginationError",
    "PaginationRequest",
    "PaginationResult",
    "SingleCursor",
    "SortDirection",
    "build_pagination",
    "next_request",
    "parse_cursors",
    "with_cursor_pagination",
]
