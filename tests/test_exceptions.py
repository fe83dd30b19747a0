"""Tests for gridstack.exceptions — exception hierarchy and formatting."""

from __future__ import annotations

from gridstack.exceptions import (
    CellSizeError,
    ConfigurationError,
    DuplicateItemError,
    GridStackError,
    PlacementError,
    UnknownItemError,
)


class TestHierarchy:
    def test_all_inherit_from_base(self):
        assert issubclass(ConfigurationError, GridStackError)
        assert issubclass(CellSizeError, GridStackError)
        assert issubclass(UnknownItemError, GridStackError)
        assert issubclass(DuplicateItemError, GridStackError)
        assert issubclass(PlacementError, GridStackError)


class TestCellSizeError:
    def test_stores_index(self):
        e = CellSizeError(3)
        assert e.index == 3
        assert "3" in str(e)


class TestItemErrors:
    def test_unknown_item_stores_identity(self):
        e = UnknownItemError("chart-1")
        assert e.item == "chart-1"
        assert "chart-1" in str(e)

    def test_duplicate_item_stores_identity(self):
        e = DuplicateItemError(42)
        assert e.item == 42
        assert "42" in str(e)
