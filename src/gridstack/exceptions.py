"""Custom exception hierarchy for gridstack."""

from __future__ import annotations

from collections.abc import Hashable


class GridStackError(Exception):
    """Base exception for all gridstack errors."""


class ConfigurationError(GridStackError):
    """Grid configuration is invalid or inconsistent."""


class CellSizeError(GridStackError):
    """A cell-size lookup could not produce a pixel size during a gesture."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Could not get cell size for index {index}")


class UnknownItemError(GridStackError):
    """Operation referenced an item that is not placed on the grid."""

    def __init__(self, item: Hashable):
        self.item = item
        super().__init__(f"Item not placed on grid: {item!r}")


class DuplicateItemError(GridStackError):
    """Item identity is already placed on the grid."""

    def __init__(self, item: Hashable):
        self.item = item
        super().__init__(f"Item already placed on grid: {item!r}")


class PlacementError(GridStackError):
    """A placement cannot be committed as requested."""
