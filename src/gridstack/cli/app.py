"""Main CLI application for gridstack."""

from __future__ import annotations

import logging

import typer

from gridstack import __version__

app = typer.Typer(
    name="gridstack",
    help="Inspect grid auto-placement, drag snapping and cascade resolution.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gridstack {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version.", callback=version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine decisions."),
) -> None:
    """gridstack: lay out items on a fixed-column grid."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register commands
from gridstack.cli.demo_cmd import demo  # noqa: E402
from gridstack.cli.snap_cmd import snap  # noqa: E402

app.command("demo")(demo)
app.command("snap")(snap)


def main() -> None:
    """Entry point for the CLI."""
    app()
