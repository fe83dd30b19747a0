"""Grid geometry: the cell region occupied by a placed item."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class GridSpan(BaseModel):
    """Column/row origin plus column/row extent of an item on the grid.

    Immutable; placement changes always produce a new span.
    """

    model_config = ConfigDict(frozen=True)

    column: Annotated[int, Field(ge=0)] = 0
    row: Annotated[int, Field(ge=0)] = 0
    column_span: Annotated[int, Field(ge=1)] = 1
    row_span: Annotated[int, Field(ge=1)] = 1

    @property
    def right_column(self) -> int:
        return self.column + self.column_span - 1

    @property
    def bottom_row(self) -> int:
        return self.row + self.row_span - 1

    def intersects(self, other: GridSpan) -> bool:
        return intersects(self, other)

    def moved_to(self, *, column: int | None = None, row: int | None = None) -> GridSpan:
        """Return a copy of this span with a new origin, keeping its extent."""
        return GridSpan(
            column=self.column if column is None else column,
            row=self.row if row is None else row,
            column_span=self.column_span,
            row_span=self.row_span,
        )

    def resized_to(
        self, *, column_span: int | None = None, row_span: int | None = None
    ) -> GridSpan:
        """Return a copy of this span with a new extent, keeping its origin."""
        return GridSpan(
            column=self.column,
            row=self.row,
            column_span=self.column_span if column_span is None else column_span,
            row_span=self.row_span if row_span is None else row_span,
        )

    def __str__(self) -> str:
        return f"({self.column},{self.row} {self.column_span}x{self.row_span})"


def intersects(a: GridSpan, b: GridSpan) -> bool:
    """True if the closed cell rectangles of ``a`` and ``b`` overlap on both axes."""
    return (
        a.column <= b.right_column
        and b.column <= a.right_column
        and a.row <= b.bottom_row
        and b.row <= a.bottom_row
    )
