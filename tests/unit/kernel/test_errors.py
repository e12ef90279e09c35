"""Unit tests for kernel error hierarchy and pagination errors."""

from __future__ import annotations

import json

import pytest

from keyset_cursor.application.pagination import (
    CursorArityError,
    CursorRelationMismatchError,
    CursorTypeMismatchError,
    CursorValueMissingError,
    InvalidCursorColumnError,
    InvalidLimitError,
    InvalidSortDirectionError,
    PaginationError,
)
from keyset_cursor.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestHierarchy:
    def test_domain_is_base(self) -> None:
        assert issubclass(DomainError, BaseError)

    def test_application_is_base(self) -> None:
        assert issubclass(ApplicationError, BaseError)

    def test_validation_errors_list(self) -> None:
        err = ValidationError("bad", errors=[{"field": "limit"}])
        assert err.to_dict()["errors"] == [{"field": "limit"}]

    @pytest.mark.parametrize(
        "cls",
        [
            CursorArityError,
            CursorRelationMismatchError,
            CursorTypeMismatchError,
            CursorValueMissingError,
            InvalidCursorColumnError,
            InvalidLimitError,
            InvalidSortDirectionError,
        ],
    )
    def test_pagination_errors_are_validation_errors(self, cls: type) -> None:
        assert issubclass(cls, PaginationError)
        assert issubclass(cls, ValidationError)


# ---------------------------------------------------------------------------
# Pagination error payloads
# ---------------------------------------------------------------------------


class TestPaginationErrorPayloads:
    def test_arity(self) -> None:
        err = CursorArityError("too many", arity=3)
        assert err.code == "cursor_arity"
        assert err.to_dict()["detail"] == {"arity": 3}

    def test_type_mismatch(self) -> None:
        err = CursorTypeMismatchError("primary", "created_at", int, str)
        assert err.code == "cursor_type_mismatch"
        assert "created_at" in err.message
        assert err.detail == {
            "level": "primary",
            "column": "created_at",
            "expected": "int",
            "actual": "str",
        }

    def test_invalid_column(self) -> None:
        err = InvalidCursorColumnError("secondary", "id")
        assert err.message.startswith("Secondary cursor column")
        assert err.detail == {"level": "secondary", "column_type": "str"}

    def test_limit(self) -> None:
        err = InvalidLimitError(0, 1000)
        assert err.code == "invalid_limit"
        assert err.detail == {"limit": "0", "max_limit": 1000}

    def test_direction(self) -> None:
        err = InvalidSortDirectionError("up")
        assert "'up'" in err.message

    def test_relation(self) -> None:
        err = CursorRelationMismatchError("a", "b")
        assert err.code == "cursor_relation_mismatch"

    def test_value_missing(self) -> None:
        err = CursorValueMissingError("id")
        assert err.detail == {"column": "id"}

    def test_serialises(self) -> None:
        parsed = json.loads(str(CursorTypeMismatchError("primary", "id", int, str)))
        assert parsed["code"] == "cursor_type_mismatch"
        assert parsed["errors"] == []
