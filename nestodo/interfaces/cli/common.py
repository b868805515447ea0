"""Shared utilities for nestodo CLI commands.

- Board loading and saving through the repository on the Typer context
- Running an application action and reporting its outcome
- Formatted output helpers (error, success, info)
- Tree and todo formatting for display
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import typer

from nestodo.application.board_service import ActionResult, BoardState
from nestodo.domain.shared import Err
from nestodo.domain.todo import PriorityFilter, StatusFilter, Todo, filter_children
from nestodo.infrastructure.storage import BoardRepository

logger = logging.getLogger(__name__)


@dataclass
class CliContext:
    """Objects shared by every command, stored on ``ctx.obj``."""

    repository: BoardRepository


def print_error(msg: str) -> None:
    """Print a formatted error message."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_separator(char: str = "=", width: int = 60) -> None:
    typer.echo(char * width)


def get_repository(ctx: typer.Context) -> BoardRepository:
    obj: CliContext = ctx.obj
    return obj.repository


def load_state(ctx: typer.Context) -> BoardState:
    """Load the board or exit with an error.

    Raises:
        typer.Exit: If the board file cannot be read.
    """
    result = get_repository(ctx).load()
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def save_state(ctx: typer.Context, state: BoardState) -> None:
    """Save the board or exit with an error."""
    result = get_repository(ctx).save(state)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)


def run_action(
    ctx: typer.Context,
    action: Callable[[BoardState], ActionResult],
    success: str,
) -> BoardState:
    """Load the board, apply ``action`` and save when it changed something.

    Returns:
        The resulting board state.

    Raises:
        typer.Exit: With code 1 if the action reports an error.
    """
    state = load_state(ctx)
    result = action(state)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    next_state, changed = result.value
    if not changed:
        print_info("Nothing changed.")
        return state

    save_state(ctx, next_state)
    logger.debug(f"Saved board with {len(next_state.history)} undo snapshots")
    print_success(success)
    return next_state


def format_todo(todo: Todo) -> str:
    """One-line summary: checkbox, title, priority and id."""
    box = "[x]" if todo.completed else "[ ]"
    return f"{box} {todo.title} ({todo.priority.value}) {todo.id}"


def print_tree(
    todos: Sequence[Todo],
    status: StatusFilter = StatusFilter.ALL,
    search: str = "",
    priority: PriorityFilter = PriorityFilter.ALL,
    indent: int = 0,
) -> None:
    """Recursively print the tree, filtering each level's children."""
    prefix = "  " * indent
    for todo in filter_children(todos, status, search, priority):
        typer.echo(f"{prefix}- {format_todo(todo)}")
        if todo.children:
            print_tree(todo.children, status, search, priority, indent + 1)
