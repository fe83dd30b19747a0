"""Auto-placement: find free space on the grid for a new item.

Candidates are scanned row by row, left to right. The first row scanned
starts at the preferred column; every later row starts at column 0. Rows
are unbounded, so the scan always finds a slot once it passes the lowest
occupied row.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Hashable, Iterable

from gridstack.grid.geometry import GridSpan
from gridstack.grid.index import PlacementIndex

logger = logging.getLogger(__name__)


def clamp_column_span(column_span: int, column_count: int) -> int:
    """Clamp a requested column span to the grid width."""
    if column_span > column_count:
        logger.debug("Clamping column span %d to column count %d", column_span, column_count)
        return column_count
    return column_span


def place_auto(
    index: PlacementIndex,
    column_span: int,
    row_span: int,
    column_count: int,
    *,
    preferred_column: int = 0,
    preferred_row: int = 0,
    exclude: Iterable[Hashable] = (),
) -> GridSpan:
    """Find the first free, in-bounds span of the given size.

    Args:
        index: Current placements to avoid.
        column_span: Requested width in columns (clamped to ``column_count``).
        row_span: Requested height in rows.
        column_count: Grid width.
        preferred_column: Column where the scan starts on the first row.
        preferred_row: Row where the scan starts.
        exclude: Items to ignore when testing for collisions.

    Returns:
        The accepted GridSpan. The index is not modified.
    """
    column_span = clamp_column_span(column_span, column_count)
    excluded = set(exclude)

    for row in itertools.count(preferred_row):
        first_column = preferred_column if row == preferred_row else 0
        for column in range(first_column, column_count):
            candidate = GridSpan(
                column=column, row=row, column_span=column_span, row_span=row_span
            )
            if candidate.right_column >= column_count:
                continue
            if index.query(candidate, exclude=excluded):
                continue
            logger.debug("Auto-placed %dx%d span at %s", column_span, row_span, candidate)
            return candidate

    raise AssertionError("unreachable: row scan is unbounded")
