"""Row count maintenance for the growable grid."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class RowSet:
    """Number of materialized grid rows.

    Never fewer than ``min_count``. Grows to cover the lowest occupied row
    and shrinks trailing empty rows back toward ``min_count``.
    """

    def __init__(self, min_count: int):
        if min_count < 1:
            raise ValueError(f"min_count must be >= 1, got {min_count}")
        self.min_count = min_count
        self._count = min_count

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def grow_to_fit(self, max_bottom_row: int) -> int:
        """Append rows so that ``max_bottom_row`` exists. Returns rows added."""
        needed = max_bottom_row + 1 - self._count
        if needed <= 0:
            return 0
        self._count += needed
        logger.debug("Added %d row(s), now %d", needed, self._count)
        return needed

    def shrink_to_fit(self, max_bottom_row: int, min_count: int | None = None) -> int:
        """Remove trailing empty rows, never below the minimum. Returns rows removed.

        Args:
            max_bottom_row: Lowest occupied row, or -1 when the grid is empty.
            min_count: Overrides the stored minimum when given.
        """
        if min_count is not None:
            self.min_count = min_count
        target = max(self.min_count, max_bottom_row + 1)
        surplus = self._count - target
        if surplus <= 0:
            return 0
        self._count = target
        logger.debug("Removed %d empty row(s), now %d", surplus, self._count)
        return surplus
