"""gridstack demo: auto-place items, apply drops and show the grid."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from gridstack.config import get_settings
from gridstack.exceptions import GridStackError
from gridstack.grid.engine import GridStack
from gridstack.grid.geometry import GridSpan

console = Console()


def _parse_drop(value: str) -> tuple[str, int, int]:
    """Parse ``ITEM=COL,ROW``."""
    item, sep, cell = value.partition("=")
    column, comma, row = cell.partition(",")
    if not sep or not comma or not item:
        raise typer.BadParameter(f"Expected ITEM=COL,ROW, got '{value}'")
    try:
        return item.strip(), int(column), int(row)
    except ValueError:
        raise typer.BadParameter(f"Column and row must be integers in '{value}'") from None


def render_grid(grid: GridStack) -> Table:
    """Render the grid as a table with one cell per grid cell."""
    columns = grid.config.column_count
    cells: list[list[str]] = [["[dim].[/dim]"] * columns for _ in range(grid.row_count)]
    for item, span in grid.placements():
        for row in range(span.row, span.bottom_row + 1):
            for column in range(span.column, span.right_column + 1):
                cells[row][column] = f"[cyan]{item}[/cyan]"

    table = Table(title=f"{columns} columns x {grid.row_count} rows", show_lines=True)
    table.add_column("", style="dim", justify="right")
    for column in range(columns):
        table.add_column(str(column), justify="center")
    for row, values in enumerate(cells):
        table.add_row(str(row), *values)
    return table


def demo(
    items: Annotated[int, typer.Option("--items", "-n", help="Number of items to add")] = 3,
    columns: Annotated[int | None, typer.Option("--columns", help="Column count")] = None,
    min_rows: Annotated[int | None, typer.Option("--min-rows", help="Minimum row count")] = None,
    drop: Annotated[
        list[str] | None, typer.Option("--drop", help="Drop ITEM at COL,ROW (repeatable)")
    ] = None,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format: table or json")] = "table",
) -> None:
    """Add default-sized items, apply drops and print the resulting grid."""
    try:
        valid_formats = ("table", "json")
        if fmt not in valid_formats:
            console.print(f"[red]Invalid format '{fmt}'. Choose from: {', '.join(valid_formats)}[/red]")
            raise typer.Exit(1)

        overrides: dict[str, object] = {}
        if columns is not None:
            overrides["column_count"] = columns
        if min_rows is not None:
            overrides["min_row_count"] = min_rows
        grid = GridStack(get_settings().grid_config(**overrides))

        for n in range(1, items + 1):
            grid.item_added(f"box-{n}")

        for value in drop or []:
            name, column, row = _parse_drop(value)
            current = grid.span_of(name)
            pushed = grid.resolve_drop(name, GridSpan(
                column=column,
                row=row,
                column_span=current.column_span,
                row_span=current.row_span,
            ))
            if pushed and fmt == "table":
                console.print(f"Dropping {name} pushed down: {', '.join(map(str, pushed))}")

        if fmt == "json":
            placements = [
                {"item": item, **span.model_dump()} for item, span in grid.placements()
            ]
            console.print_json(json.dumps({"rows": grid.row_count, "placements": placements}))
            return

        console.print(render_grid(grid))

    except GridStackError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except ValueError as e:
        console.print(f"[red]Invalid value:[/red] {e}")
        raise typer.Exit(1) from e
