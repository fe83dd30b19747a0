"""At-rest consistency checks for a grid layout.

Checks that no two items overlap, every item lies within the grid's
columns, and the row count matches the lowest occupied row.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from dataclasses import dataclass, field

from gridstack.grid.index import PlacedItem


@dataclass
class ValidationResult:
    """Result of layout validation."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)
        self.valid = False

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)


def validate_layout(
    placements: Iterable[PlacedItem],
    column_count: int,
    row_count: int,
    min_row_count: int,
) -> ValidationResult:
    """Validate placements against the grid invariants.

    Args:
        placements: Placed items to check.
        column_count: Grid width.
        row_count: Current number of materialized rows.
        min_row_count: Configured minimum number of rows.

    Returns:
        ValidationResult with errors and warnings.
    """
    result = ValidationResult()
    placed = list(placements)

    for item, span in placed:
        if span.right_column >= column_count:
            result.add_error(
                f"Item {item!r} at {span} extends past column {column_count - 1}."
            )

    for a, b in itertools.combinations(placed, 2):
        if a.span.intersects(b.span):
            result.add_error(f"Items {a.item!r} {a.span} and {b.item!r} {b.span} overlap.")

    max_bottom = max((p.span.bottom_row for p in placed), default=-1)
    expected_rows = max(min_row_count, max_bottom + 1)
    if row_count != expected_rows:
        result.add_error(f"Row count is {row_count}, expected {expected_rows}.")

    if not placed:
        result.add_warning("Grid has no placed items.")

    return result
