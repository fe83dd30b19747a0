"""Live store of placed items and their grid spans."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import NamedTuple

from gridstack.exceptions import UnknownItemError
from gridstack.grid.geometry import GridSpan


class PlacedItem(NamedTuple):
    """An item identity paired with its current span."""

    item: Hashable
    span: GridSpan


class PlacementIndex:
    """Mapping of item identity to GridSpan with intersection queries.

    The index does not enforce any overlap policy; callers decide what may
    be stored. Iteration follows insertion order, so query results are
    stable for a given index state.
    """

    def __init__(self) -> None:
        self._spans: dict[Hashable, GridSpan] = {}

    def __len__(self) -> int:
        return len(self._spans)

    def __contains__(self, item: object) -> bool:
        return item in self._spans

    def __iter__(self) -> Iterator[PlacedItem]:
        for item, span in self._spans.items():
            yield PlacedItem(item, span)

    def get(self, item: Hashable) -> GridSpan:
        """Return the span of ``item``.

        Raises:
            UnknownItemError: If the item is not placed.
        """
        try:
            return self._spans[item]
        except KeyError:
            raise UnknownItemError(item) from None

    def set(self, item: Hashable, span: GridSpan) -> None:
        self._spans[item] = span

    def remove(self, item: Hashable) -> GridSpan:
        """Remove ``item`` and return its last span.

        Raises:
            UnknownItemError: If the item is not placed.
        """
        try:
            return self._spans.pop(item)
        except KeyError:
            raise UnknownItemError(item) from None

    def clear(self) -> None:
        self._spans.clear()

    def query(self, region: GridSpan, exclude: Iterable[Hashable] = ()) -> list[PlacedItem]:
        """Return every placed item, other than ``exclude``, intersecting ``region``."""
        excluded = set(exclude)
        return [
            PlacedItem(item, span)
            for item, span in self._spans.items()
            if item not in excluded and span.intersects(region)
        ]

    def query_against(self, item: Hashable, exclude: Iterable[Hashable] = ()) -> list[PlacedItem]:
        """Return placed items intersecting ``item``'s own span, never ``item`` itself."""
        region = self.get(item)
        return self.query(region, exclude={item, *exclude})

    def max_bottom_row(self) -> int:
        """Largest bottom row over all placed items, or -1 when empty."""
        return max((span.bottom_row for span in self._spans.values()), default=-1)
