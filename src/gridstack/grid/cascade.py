"""Cascade resolution of overlaps created by dropping an item.

Every item the dropped span overlaps is pushed to the row just below the
dropped item. Whatever a pushed item then overlaps is pushed below it in
turn, breadth first, until nothing overlaps. A pushed item is never
placed on top of an item that has already settled in the same cascade:
it keeps sliding down past that item's bottom row.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable

from gridstack.grid.geometry import GridSpan
from gridstack.grid.index import PlacementIndex

logger = logging.getLogger(__name__)


def _settle_row(
    index: PlacementIndex, span: GridSpan, target_row: int, settled: set[Hashable]
) -> GridSpan:
    """Move ``span`` to ``target_row``, then below any settled item it would overlap."""
    candidate = span.moved_to(row=target_row)
    while True:
        blockers = index.query(candidate)
        blocking_rows = [
            placed.span.bottom_row for placed in blockers if placed.item in settled
        ]
        if not blocking_rows:
            return candidate
        candidate = candidate.moved_to(row=max(blocking_rows) + 1)


def resolve_drop(
    index: PlacementIndex, moved_item: Hashable, candidate: GridSpan
) -> list[Hashable]:
    """Commit ``candidate`` for ``moved_item`` and push overlapped items down.

    Args:
        index: Placement index to update in place.
        moved_item: The dropped item; its own span is never changed by the cascade.
        candidate: Final span of the dropped item.

    Returns:
        Items relocated by the cascade, in relocation order.
    """
    index.set(moved_item, candidate)

    settled: set[Hashable] = {moved_item}
    queue: deque[tuple[Hashable, int]] = deque(
        (placed.item, candidate.bottom_row + 1)
        for placed in index.query(candidate, exclude=settled)
    )
    relocated: list[Hashable] = []

    while queue:
        item, target_row = queue.popleft()
        if item in settled:
            continue

        old_span = index.get(item)
        new_span = _settle_row(index, old_span, target_row, settled)
        index.set(item, new_span)
        settled.add(item)
        relocated.append(item)
        logger.debug("Cascade moved %r from %s to %s", item, old_span, new_span)

        for victim in index.query_against(item, exclude=settled):
            queue.append((victim.item, new_span.bottom_row + 1))

    return relocated
