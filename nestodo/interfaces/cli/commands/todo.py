"""Todo CLI commands.

Commands for viewing the board and editing single todos: list, add,
toggle, edit, delete, priority, reorder, undo, stats and export.
"""

from datetime import date
from pathlib import Path
from typing import Optional

import typer

from nestodo.application import board_service
from nestodo.domain.shared import Err
from nestodo.domain.todo import (
    Priority,
    PriorityFilter,
    StatusFilter,
    export_filename,
    filter_children,
    find_todo,
)
from nestodo.interfaces.cli.common import (
    format_todo,
    load_state,
    print_error,
    print_info,
    print_separator,
    print_success,
    print_tree,
    run_action,
    save_state,
)

status_option = typer.Option(
    StatusFilter.ALL, "--status", "-s", help="Show all, active or completed todos"
)
priority_filter_option = typer.Option(
    PriorityFilter.ALL, "--priority", "-P", help="Only show this priority"
)
search_option = typer.Option("", "--search", "-q", help="Case-insensitive title search")


# =============================================================================
# Viewing
# =============================================================================


def list_todos(
    ctx: typer.Context,
    status: StatusFilter = status_option,
    priority: PriorityFilter = priority_filter_option,
    search: str = search_option,
) -> None:
    """Show the whole board as a tree.

    Filters apply at every level: a parent that is filtered out hides
    its children too.
    """
    state = load_state(ctx)
    if not state.todos:
        print_info("No todos yet. Add one with: nestodo add \"Title\"")
        return
    print_tree(state.todos, status, search, priority)


def show(ctx: typer.Context, todo_id: str = typer.Argument(..., help="Todo ID")) -> None:
    """Show one todo and its subtree."""
    state = load_state(ctx)
    todo = find_todo(state.todos, todo_id)
    if todo is None:
        print_error(f"Todo not found: {todo_id}")
        raise typer.Exit(1)

    typer.echo(format_todo(todo))
    typer.echo(f"Created: {todo.created_at}")
    if todo.children:
        done = sum(1 for child in todo.children if child.completed)
        typer.echo(f"Children: {done}/{len(todo.children)} done")
        print_tree(todo.children, indent=1)


def children(
    ctx: typer.Context,
    parent_id: str = typer.Argument(..., help="Parent todo ID"),
    status: StatusFilter = status_option,
    priority: PriorityFilter = priority_filter_option,
    search: str = search_option,
) -> None:
    """List the direct children of a todo that match the filters."""
    state = load_state(ctx)
    parent = find_todo(state.todos, parent_id)
    if parent is None:
        print_error(f"Todo not found: {parent_id}")
        raise typer.Exit(1)

    visible = filter_children(parent.children, status, search, priority)
    for child in visible:
        typer.echo(format_todo(child))
    print_info(f"{len(visible)} of {len(parent.children)} children shown")


def stats(ctx: typer.Context) -> None:
    """Show completion progress across the whole board."""
    result = board_service.get_stats(load_state(ctx))
    print_separator()
    typer.echo(f"Total:     {result.total}")
    typer.echo(f"Completed: {result.completed}")
    typer.echo(f"Active:    {result.active}")
    typer.echo(f"Progress:  {result.progress_percent}%")
    print_separator()


def export(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="File or directory to write the CSV to (default: stdout)",
    ),
) -> None:
    """Export the board as CSV."""
    content = board_service.export_csv(load_state(ctx))
    if output is None:
        typer.echo(content)
        return

    target = output / export_filename(date.today()) if output.is_dir() else output
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        print_error(f"Error writing {target}: {e}")
        raise typer.Exit(1)
    print_success(f"Exported to {target}")


# =============================================================================
# Editing
# =============================================================================


def add(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Todo title"),
    priority: Priority = typer.Option(Priority.MEDIUM, "--priority", "-P"),
) -> None:
    """Add a top-level todo."""
    run_action(
        ctx,
        lambda state: board_service.add_todo(state, title, priority),
        f"Added: {title.strip()}",
    )


def add_child(
    ctx: typer.Context,
    parent_id: str = typer.Argument(..., help="Parent todo ID"),
    title: str = typer.Argument(..., help="Child title"),
) -> None:
    """Add a child under an existing todo."""
    run_action(
        ctx,
        lambda state: board_service.add_child(state, parent_id, title),
        f"Added child: {title.strip()}",
    )


def toggle(ctx: typer.Context, todo_id: str = typer.Argument(..., help="Todo ID")) -> None:
    """Toggle completion of a todo and everything beneath it."""
    run_action(
        ctx,
        lambda state: board_service.toggle_todo(state, todo_id),
        f"Toggled {todo_id}",
    )


def edit(
    ctx: typer.Context,
    todo_id: str = typer.Argument(..., help="Todo ID"),
    title: str = typer.Argument(..., help="New title"),
) -> None:
    """Rename a todo."""
    run_action(
        ctx,
        lambda state: board_service.edit_title(state, todo_id, title),
        f"Renamed {todo_id}",
    )


def delete(ctx: typer.Context, todo_id: str = typer.Argument(..., help="Todo ID")) -> None:
    """Delete a todo and its subtree."""
    run_action(
        ctx,
        lambda state: board_service.delete(state, todo_id),
        f"Deleted {todo_id}",
    )


def priority(
    ctx: typer.Context,
    todo_id: str = typer.Argument(..., help="Todo ID"),
    level: Priority = typer.Argument(..., help="high, medium or low"),
) -> None:
    """Set the priority of a todo."""
    run_action(
        ctx,
        lambda state: board_service.set_priority(state, todo_id, level),
        f"Priority of {todo_id} set to {level.value}",
    )


def reorder(
    ctx: typer.Context,
    parent_id: str = typer.Argument(..., help="Parent todo ID"),
    source_id: str = typer.Argument(..., help="Child to move"),
    target_id: str = typer.Argument(..., help="Child whose slot it takes"),
) -> None:
    """Move a child into another child's position."""
    run_action(
        ctx,
        lambda state: board_service.reorder(state, parent_id, source_id, target_id),
        f"Moved {source_id}",
    )


def undo(ctx: typer.Context) -> None:
    """Undo the last change."""
    result = board_service.undo(load_state(ctx))
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    save_state(ctx, result.value)
    print_success(f"Undone ({len(result.value.history)} more available)")
