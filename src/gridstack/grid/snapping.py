"""Pixel-to-cell snapping for drag and resize gestures.

Both functions are pure. They take a ``size_of`` lookup supplied by the
rendering layer that maps a column or row index to its pixel size, walk
the cells one at a time and snap to whichever cell boundary is closer
(the midpoint of a cell is the divider).

Cell sizes are looked up at the index currently being walked, so grids
with non-uniform column widths or row heights snap to the cell actually
under the pointer.
"""

from __future__ import annotations

from collections.abc import Callable

from gridstack.exceptions import CellSizeError

CellSizeLookup = Callable[[int], float]


def cell_size(size_of: CellSizeLookup, index: int) -> float:
    """Look up a cell's pixel size, failing loudly when it is unavailable.

    Raises:
        CellSizeError: If the lookup raises IndexError/KeyError or returns None.
    """
    try:
        size = size_of(index)
    except (IndexError, KeyError) as e:
        raise CellSizeError(index) from e
    if size is None:
        raise CellSizeError(index)
    return size


def cell_offset(size_of: CellSizeLookup, index: int) -> float:
    """Pixel position of the leading edge of cell ``index``."""
    return sum(cell_size(size_of, i) for i in range(index))


def snap_move(
    value_before_drag: int,
    span: int,
    definition_count: int,
    drag_distance: float,
    size_of: CellSizeLookup,
) -> int:
    """Compute the column/row an item lands on after being dragged.

    Args:
        value_before_drag: Column/row of the item when the drag started.
        span: Column/row span of the item.
        definition_count: Number of columns/rows available to the item.
        drag_distance: Horizontal or vertical pixel distance dragged so far.
        size_of: Cell pixel-size lookup for the same axis.

    Returns:
        The snapped column/row, never further than ``definition_count - span``.
    """
    limit = definition_count - span
    remaining = cell_offset(size_of, value_before_drag) + drag_distance

    new_value = 0
    # Cells at or beyond the limit are never landed on, so they are not measured.
    while new_value < limit:
        size = cell_size(size_of, new_value)
        if remaining <= size / 2:
            break
        remaining -= size
        new_value += 1

    return max(0, min(new_value, limit))


def snap_resize(
    original_size: float,
    cell_start: int,
    definition_count: int,
    drag_distance: float,
    size_of: CellSizeLookup,
) -> int:
    """Compute an item's new column/row span after its edge handle is dragged.

    Args:
        original_size: Pixel width/height of the item before the drag.
        cell_start: Column/row the item starts at; the span grows from here
            and may reach at most ``definition_count - cell_start``.
        definition_count: Number of columns/rows in the grid.
        drag_distance: Horizontal or vertical pixel distance dragged so far.
        size_of: Cell pixel-size lookup for the same axis.

    Returns:
        The snapped span, always at least 1.
    """
    remaining = original_size + drag_distance
    current_cell = cell_start
    new_span = 0

    while current_cell < definition_count:
        size = cell_size(size_of, current_cell)
        if remaining <= size / 2:
            break
        remaining -= size
        current_cell += 1
        new_span += 1

    if new_span > definition_count - cell_start:
        new_span = definition_count - cell_start
    if new_span < 1:
        new_span = 1
    return new_span
