"""Board application service.

Holds the current forest together with a bounded undo history and
exposes the user-facing actions. All functions are pure - no I/O, no
side effects. Each takes a ``BoardState`` and returns a new one.
"""

from collections.abc import Callable, Collection

from pydantic import BaseModel, ConfigDict

from nestodo.domain.shared import Err, Ok, Result
from nestodo.domain.todo import (
    Forest,
    Priority,
    Todo,
    TodoStats,
    collect_stats,
    complete_children_batch,
    delete_children_batch,
    delete_todo,
    find_todo,
    new_todo,
    reconcile_tree,
    reorder_within_parent,
    to_csv,
    toggle_completion,
    update_children_priority_batch,
    update_todos,
)

MAX_HISTORY = 25

# A change maps the current forest to (next forest, changed).
Change = Callable[[Forest], tuple[Forest, bool]]


class BoardState(BaseModel):
    """The todo forest plus the snapshots undo can return to.

    ``history`` is ordered oldest first and never holds more than
    ``max_history`` snapshots.
    """

    model_config = ConfigDict(frozen=True)

    todos: Forest = ()
    history: tuple[Forest, ...] = ()
    max_history: int = MAX_HISTORY

    @property
    def can_undo(self) -> bool:
        return len(self.history) > 0


ActionResult = Result[tuple[BoardState, bool], str]


def apply_change(state: BoardState, change: Change) -> tuple[BoardState, bool]:
    """Run ``change`` on the current forest and record a snapshot.

    When the change reports no change the very same state is returned
    and nothing is pushed onto the history.
    """
    next_todos, changed = change(state.todos)
    if not changed:
        return state, False

    keep = max(state.max_history - 1, 0)
    history = state.history[-keep:] if keep else ()
    return (
        state.model_copy(
            update={
                "todos": tuple(reconcile_tree(next_todos)),
                "history": (*history, state.todos),
            }
        ),
        True,
    )


def undo(state: BoardState) -> Result[BoardState, str]:
    """Restore the most recent snapshot."""
    if not state.history:
        return Err("Nothing to undo")
    return Ok(
        state.model_copy(
            update={"todos": state.history[-1], "history": state.history[:-1]}
        )
    )


def _clean_title(title: str) -> Result[str, str]:
    cleaned = title.strip()
    if not cleaned:
        return Err("Title cannot be empty")
    return Ok(cleaned)


def _require(state: BoardState, todo_id: str) -> Result[Todo, str]:
    todo = find_todo(state.todos, todo_id)
    if todo is None:
        return Err(f"Todo not found: {todo_id}")
    return Ok(todo)


def _on_existing(state: BoardState, todo_id: str, change: Change) -> ActionResult:
    found = _require(state, todo_id)
    if isinstance(found, Err):
        return found
    return Ok(apply_change(state, change))


def add_todo(
    state: BoardState,
    title: str,
    priority: Priority = Priority.MEDIUM,
) -> ActionResult:
    """Append a new root todo."""
    cleaned = _clean_title(title)
    if isinstance(cleaned, Err):
        return cleaned
    todo = new_todo(cleaned.value, priority=priority)
    return Ok(apply_change(state, lambda todos: ((*todos, todo), True)))


def add_child(state: BoardState, parent_id: str, title: str) -> ActionResult:
    """Append a child to ``parent_id``.

    The child starts with the parent's completion state, so adding to a
    finished parent does not reopen it.
    """
    cleaned = _clean_title(title)
    if isinstance(cleaned, Err):
        return cleaned

    def append(parent: Todo) -> Todo:
        child = new_todo(cleaned.value, completed=parent.completed)
        return parent.model_copy(update={"children": (*parent.children, child)})

    return _on_existing(
        state, parent_id, lambda todos: update_todos(todos, parent_id, append)
    )


def toggle_todo(state: BoardState, todo_id: str) -> ActionResult:
    """Flip completion of a todo and its whole subtree."""
    return _on_existing(
        state, todo_id, lambda todos: update_todos(todos, todo_id, toggle_completion)
    )


def edit_title(state: BoardState, todo_id: str, title: str) -> ActionResult:
    """Rename a todo."""
    cleaned = _clean_title(title)
    if isinstance(cleaned, Err):
        return cleaned
    return _on_existing(
        state,
        todo_id,
        lambda todos: update_todos(
            todos, todo_id, lambda t: t.model_copy(update={"title": cleaned.value})
        ),
    )


def delete(state: BoardState, todo_id: str) -> ActionResult:
    """Delete a todo and everything beneath it."""
    return _on_existing(state, todo_id, lambda todos: delete_todo(todos, todo_id))


def set_priority(state: BoardState, todo_id: str, priority: Priority) -> ActionResult:
    """Change the priority of a single todo."""
    level = Priority(priority)
    return _on_existing(
        state,
        todo_id,
        lambda todos: update_todos(
            todos, todo_id, lambda t: t.model_copy(update={"priority": level})
        ),
    )


def batch_complete(
    state: BoardState, parent_id: str, child_ids: Collection[str]
) -> ActionResult:
    """Complete the selected children of ``parent_id``."""
    selected = set(child_ids)
    return _on_existing(
        state,
        parent_id,
        lambda todos: complete_children_batch(todos, parent_id, selected),
    )


def batch_delete(
    state: BoardState, parent_id: str, child_ids: Collection[str]
) -> ActionResult:
    """Delete the selected children of ``parent_id``."""
    selected = set(child_ids)
    return _on_existing(
        state,
        parent_id,
        lambda todos: delete_children_batch(todos, parent_id, selected),
    )


def batch_priority(
    state: BoardState,
    parent_id: str,
    child_ids: Collection[str],
    priority: Priority,
) -> ActionResult:
    """Set the priority of the selected children of ``parent_id``."""
    selected = set(child_ids)
    level = Priority(priority)
    return _on_existing(
        state,
        parent_id,
        lambda todos: update_children_priority_batch(
            todos, parent_id, selected, level
        ),
    )


def reorder(
    state: BoardState, parent_id: str, source_id: str, target_id: str
) -> ActionResult:
    """Move ``source_id`` into the slot of ``target_id`` under ``parent_id``."""
    return _on_existing(
        state,
        parent_id,
        lambda todos: reorder_within_parent(todos, parent_id, source_id, target_id),
    )


def get_stats(state: BoardState) -> TodoStats:
    """Completion statistics for the whole board."""
    return collect_stats(state.todos)


def export_csv(state: BoardState) -> str:
    """CSV export of the whole board."""
    return to_csv(state.todos)
