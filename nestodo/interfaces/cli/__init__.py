"""CLI interface for nestodo using Typer.

Usage:
    nestodo add "Plan trip"             # Add a top-level todo
    nestodo add-child ID "Book hotel"   # Add a child
    nestodo list --status active        # Show the tree
    nestodo batch complete PARENT A B   # Complete several children
    nestodo undo                        # Undo the last change
    nestodo export -o .                 # Write nested-todos-<date>.csv

The CLI is structured as:
- app: Main Typer application
- commands/: Command modules (todo, batch)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from nestodo import __version__
from nestodo.config import get_settings
from nestodo.infrastructure.storage import BoardRepository
from nestodo.interfaces.cli.commands import batch, todo
from nestodo.interfaces.cli.common import CliContext

app = typer.Typer(
    name="nestodo",
    help="Nested todo lists with batch edits, undo and CSV export",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nestodo version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        "-f",
        help="Board JSON file (or set NESTODO_DATA_FILE env var)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """nestodo - nested todo lists from the command line.

    Parents complete automatically once every child is done.
    """
    settings = get_settings()
    level = (
        logging.DEBUG
        if verbose
        else logging.getLevelNamesMapping().get(settings.log_level, logging.WARNING)
    )
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    path = data_file.expanduser() if data_file else settings.data_file
    ctx.obj = CliContext(
        repository=BoardRepository(path, max_history=settings.max_history)
    )


# =============================================================================
# Register Commands
# =============================================================================

app.command("list")(todo.list_todos)
app.command("show")(todo.show)
app.command("children")(todo.children)
app.command("stats")(todo.stats)
app.command("export")(todo.export)
app.command("add")(todo.add)
app.command("add-child")(todo.add_child)
app.command("toggle")(todo.toggle)
app.command("edit")(todo.edit)
app.command("delete")(todo.delete)
app.command("priority")(todo.priority)
app.command("reorder")(todo.reorder)
app.command("undo")(todo.undo)

app.add_typer(batch.app, name="batch")

__all__ = ["app"]
