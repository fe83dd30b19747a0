"""gridstack snap: show where a drag distance snaps on uniform cells."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from gridstack.grid.snapping import snap_move

console = Console()


def snap(
    distance: Annotated[float, typer.Argument(help="Pixel distance dragged")],
    start: Annotated[int, typer.Option("--start", help="Cell index before the drag")] = 0,
    span: Annotated[int, typer.Option("--span", help="Item span in cells")] = 1,
    cells: Annotated[int, typer.Option("--cells", help="Number of cells on the axis")] = 5,
    cell_size: Annotated[float, typer.Option("--cell-size", help="Pixel size of each cell")] = 100.0,
) -> None:
    """Print the cell index a drag snaps to."""
    if span < 1 or cells < span or not 0 <= start <= cells - span:
        console.print("[red]Need 1 <= span <= cells and 0 <= start <= cells - span.[/red]")
        raise typer.Exit(1)

    result = snap_move(start, span, cells, distance, lambda _: cell_size)
    console.print(f"{start} -> [green]{result}[/green]")
