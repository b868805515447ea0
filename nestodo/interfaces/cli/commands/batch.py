"""Batch CLI commands.

Act on several direct children of one parent at once.
"""

from typing import List

import typer

from nestodo.application import board_service
from nestodo.domain.todo import Priority
from nestodo.interfaces.cli.common import run_action

app = typer.Typer(help="Batch actions on a parent's children")


@app.command("complete")
def complete(
    ctx: typer.Context,
    parent_id: str = typer.Argument(..., help="Parent todo ID"),
    child_ids: List[str] = typer.Argument(..., help="Child IDs to complete"),
) -> None:
    """Complete the given children, including their own subtrees."""
    run_action(
        ctx,
        lambda state: board_service.batch_complete(state, parent_id, child_ids),
        f"Completed {len(child_ids)} children",
    )


@app.command("delete")
def delete(
    ctx: typer.Context,
    parent_id: str = typer.Argument(..., help="Parent todo ID"),
    child_ids: List[str] = typer.Argument(..., help="Child IDs to delete"),
) -> None:
    """Delete the given children."""
    run_action(
        ctx,
        lambda state: board_service.batch_delete(state, parent_id, child_ids),
        f"Deleted {len(child_ids)} children",
    )


@app.command("priority")
def priority(
    ctx: typer.Context,
    parent_id: str = typer.Argument(..., help="Parent todo ID"),
    level: Priority = typer.Argument(..., help="high, medium or low"),
    child_ids: List[str] = typer.Argument(..., help="Child IDs to update"),
) -> None:
    """Set the priority of the given children."""
    run_action(
        ctx,
        lambda state: board_service.batch_priority(state, parent_id, child_ids, level),
        f"Set {len(child_ids)} children to {level.value}",
    )
