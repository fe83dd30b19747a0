"""Grid layout engine: placement, gestures and row maintenance.

``GridStack`` owns the placement index and row set for one grid. The
rendering layer calls it when items are added or removed and while the
user drags an item's move or resize handle. Gesture state (the trace
placeholder showing where the item would land) lives in a ``DragGesture``
held by the caller; only ``drag_completed`` commits it.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass

from gridstack.config import GridConfig, get_settings
from gridstack.exceptions import DuplicateItemError, PlacementError
from gridstack.grid.cascade import resolve_drop
from gridstack.grid.geometry import GridSpan
from gridstack.grid.index import PlacedItem, PlacementIndex
from gridstack.grid.layout import place_auto
from gridstack.grid.rows import RowSet
from gridstack.grid.snapping import CellSizeLookup, cell_size, snap_move, snap_resize
from gridstack.grid.validator import ValidationResult, validate_layout

logger = logging.getLogger(__name__)


@dataclass
class DragGesture:
    """Caller-held state for one drag or resize gesture."""

    item: Hashable
    origin: GridSpan
    trace: GridSpan
    completed: bool = False


class GridStack:
    """Fixed-column, growable-row grid of non-overlapping items.

    Usage:
        grid = GridStack(GridConfig(column_count=5))
        grid.item_added("chart")
        gesture = grid.drag_started("chart")
        grid.center_drag_delta(gesture, 120.0, 0.0, column_size=widths, row_size=heights)
        grid.drag_completed(gesture)
    """

    def __init__(self, config: GridConfig | None = None):
        self._config = config if config is not None else get_settings().grid_config()
        self._index = PlacementIndex()
        self._rows = RowSet(self._config.min_row_count)

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def row_count(self) -> int:
        return self._rows.count

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def span_of(self, item: Hashable) -> GridSpan:
        """Current span of ``item``; raises UnknownItemError if it is not placed."""
        return self._index.get(item)

    def placements(self) -> list[PlacedItem]:
        return list(self._index)

    def items_at(self, region: GridSpan) -> list[Hashable]:
        """Items whose span intersects ``region``."""
        return [placed.item for placed in self._index.query(region)]

    # -- Row maintenance -------------------------------------------------

    def grow_to_fit(self) -> int:
        return self._rows.grow_to_fit(self._index.max_bottom_row())

    def shrink_to_fit(self) -> int:
        return self._rows.shrink_to_fit(self._index.max_bottom_row(), self._config.min_row_count)

    # -- Collection lifecycle --------------------------------------------

    def item_added(self, item: Hashable, span: GridSpan | None = None) -> GridSpan:
        """Place a new item in the first free slot.

        With ``auto_assign`` enabled (or no span given) the default spans are
        used and the search starts at the top-left cell. Otherwise ``span``
        supplies the item's spans and the cell where the search starts.

        Raises:
            DuplicateItemError: If the item is already placed.
        """
        if item in self._index:
            raise DuplicateItemError(item)

        if self._config.auto_assign or span is None:
            preferred = GridSpan(
                column_span=self._config.default_column_span,
                row_span=self._config.default_row_span,
            )
        else:
            preferred = span

        placed = place_auto(
            self._index,
            preferred.column_span,
            preferred.row_span,
            self._config.column_count,
            preferred_column=preferred.column,
            preferred_row=preferred.row,
        )
        self._index.set(item, placed)
        self.grow_to_fit()
        logger.debug("Added %r at %s", item, placed)
        return placed

    def item_removed(self, item: Hashable) -> None:
        """Remove an item and drop trailing empty rows.

        Raises:
            UnknownItemError: If the item is not placed.
        """
        self._index.remove(item)
        self.shrink_to_fit()
        logger.debug("Removed %r", item)

    def all_items_cleared(self) -> None:
        self._index.clear()
        self.shrink_to_fit()
        logger.debug("Cleared all items, %d rows remain", self.row_count)

    def reconfigure(self, config: GridConfig) -> None:
        """Apply a new configuration and lay every item out again.

        Items are re-placed in row-major order of their current positions,
        keeping their spans (column spans clamped to the new width) and
        starting the search at their current cell.
        """
        previous = sorted(self._index, key=lambda p: (p.span.row, p.span.column))
        self._config = config
        self._index = PlacementIndex()
        self._rows = RowSet(config.min_row_count)

        for item, span in previous:
            placed = place_auto(
                self._index,
                span.column_span,
                span.row_span,
                config.column_count,
                preferred_column=span.column,
                preferred_row=span.row,
            )
            self._index.set(item, placed)

        self.grow_to_fit()
        logger.info("Reconfigured grid to %d columns, %d items re-placed", config.column_count, len(previous))

    # -- Gestures --------------------------------------------------------

    def drag_started(self, item: Hashable) -> DragGesture:
        """Begin a move or resize gesture; the trace starts at the item's span."""
        span = self._index.get(item)
        return DragGesture(item=item, origin=span, trace=span)

    def center_drag_delta(
        self,
        gesture: DragGesture,
        dx: float,
        dy: float,
        *,
        column_size: CellSizeLookup,
        row_size: CellSizeLookup,
    ) -> GridSpan:
        """Move the trace by the cumulative pixel offset from the drag start.

        The item may be dragged up to one item-height below the last row;
        those rows are materialized when the drop is committed.
        """
        self._check_active(gesture)
        origin = gesture.origin
        column = snap_move(
            origin.column, origin.column_span, self._config.column_count, dx, column_size
        )
        row = snap_move(
            origin.row, origin.row_span, self._rows.count + origin.row_span, dy, row_size
        )
        gesture.trace = origin.moved_to(column=column, row=row)
        return gesture.trace

    def edge_drag_delta(
        self,
        gesture: DragGesture,
        dx: float,
        dy: float,
        *,
        column_size: CellSizeLookup,
        row_size: CellSizeLookup,
    ) -> GridSpan:
        """Resize the trace by the cumulative pixel offset of the edge handle."""
        self._check_active(gesture)
        origin = gesture.origin
        margin = 2 * self._config.item_margin
        width = self._extent(column_size, origin.column, origin.column_span) - margin
        height = self._extent(row_size, origin.row, origin.row_span) - margin

        column_span = snap_resize(width, origin.column, self._config.column_count, dx, column_size)
        row_span = snap_resize(height, origin.row, self._rows.count, dy, row_size)
        gesture.trace = origin.resized_to(column_span=column_span, row_span=row_span)
        return gesture.trace

    def drag_completed(self, gesture: DragGesture) -> list[Hashable]:
        """Commit the gesture's trace and resolve the overlaps it creates.

        Returns:
            Items pushed down by the cascade.
        """
        self._check_active(gesture)
        gesture.completed = True
        relocated = self.resolve_drop(gesture.item, gesture.trace)
        logger.info(
            "Dropped %r at %s (%d item(s) pushed down)", gesture.item, gesture.trace, len(relocated)
        )
        return relocated

    def resolve_drop(self, item: Hashable, candidate: GridSpan) -> list[Hashable]:
        """Place ``item`` at ``candidate``, cascade overlapped items downward and fit rows.

        Raises:
            UnknownItemError: If the item is not placed.
            PlacementError: If the candidate extends past the last column.
        """
        self._index.get(item)
        if candidate.right_column >= self._config.column_count:
            raise PlacementError(
                f"Span {candidate} extends past column {self._config.column_count - 1}"
            )
        relocated = resolve_drop(self._index, item, candidate)
        self.grow_to_fit()
        self.shrink_to_fit()
        return relocated

    def validate(self) -> ValidationResult:
        return validate_layout(
            self._index, self._config.column_count, self.row_count, self._config.min_row_count
        )

    def _check_active(self, gesture: DragGesture) -> None:
        if gesture.completed:
            raise PlacementError(f"Gesture for {gesture.item!r} has already completed")
        self._index.get(gesture.item)

    @staticmethod
    def _extent(size_of: CellSizeLookup, start: int, span: int) -> float:
        return sum(cell_size(size_of, i) for i in range(start, start + span))
