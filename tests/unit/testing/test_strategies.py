"""Unit tests for the Hypothesis cursor strategies."""
from __future__ import annotations

import sys
from unittest.mock import patch

import pytest
from hypothesis import given
from hypothesis import strategies as st
from sqlalchemy import Column, Integer, MetaData, Table

from keyset_cursor.application.pagination import (
    CursorLevel,
    DualCursor,
    SingleCursor,
    SortDirection,
)
from keyset_cursor.testing import (
    cursor_level_strategy,
    cursor_request_strategy,
    sort_direction_strategy,
)

metadata = MetaData()
things = Table(
    "things",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("rank", Integer, nullable=False),
)


class TestRequireHypothesis:
    def test_raises_import_error_without_hypothesis(self) -> None:
        from keyset_cursor.testing.generators.strategies import _require_hypothesis

        with patch.dict(sys.modules, {"hypothesis.strategies": None}):
            with pytest.raises(ImportError, match="hypothesis"):
                _require_hypothesis()


class TestSortDirectionStrategy:
    @given(sort_direction_strategy())
    def test_members(self, direction) -> None:
        assert isinstance(direction, SortDirection)

    @given(sort_direction_strategy(as_text=True))
    def test_text_spellings_parse(self, raw) -> None:
        assert SortDirection.parse(raw) in (SortDirection.ASC, SortDirection.DESC)


class TestCursorLevelStrategy:
    @given(cursor_level_strategy(things.c.id, st.integers(), with_value=True))
    def test_with_value(self, level: CursorLevel) -> None:
        assert level.column is things.c.id
        assert level.has_value

    @given(cursor_level_strategy(things.c.id, st.integers(), with_value=False))
    def test_without_value(self, level: CursorLevel) -> None:
        assert level.value is None


class TestCursorRequestStrategy:
    @given(cursor_request_strategy((things.c.id, st.integers())))
    def test_single(self, cursors) -> None:
        assert isinstance(cursors, SingleCursor)

    @given(
        cursor_request_strategy(
            (things.c.rank, st.integers()), (things.c.id, st.integers())
        )
    )
    def test_dual(self, cursors) -> None:
        assert isinstance(cursors, DualCursor)
        assert cursors.primary.column is things.c.rank
        assert cursors.secondary.column is things.c.id
