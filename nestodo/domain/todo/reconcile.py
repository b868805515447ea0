"""Completion invariant for the todo forest.

A node with children is complete exactly when all of its children are.
Leaves are free. All functions here are pure and return the very same
node object when nothing had to change, so callers can detect no-ops
with ``is``.
"""

from collections.abc import Sequence

from .models import Todo


def reconcile_completion(todo: Todo) -> Todo:
    """Fix a single node's ``completed`` flag from its direct children.

    Children are assumed to be reconciled already. Returns ``todo``
    itself when the flag is already right.
    """
    if not todo.children:
        return todo

    all_done = all(child.completed for child in todo.children)
    if todo.completed == all_done:
        return todo
    return todo.model_copy(update={"completed": all_done})


def _reconcile_node(todo: Todo) -> Todo:
    # Post-order: children first, so a grandchild change reaches the root.
    children = reconcile_tree(todo.children)
    if children is not todo.children:
        todo = todo.model_copy(update={"children": children})
    return reconcile_completion(todo)


def reconcile_tree(forest: Sequence[Todo]) -> Sequence[Todo]:
    """Restore the completion invariant across a whole forest.

    Idempotent. When every node already satisfies the invariant the input
    object is returned as-is, whatever sequence type it is. Otherwise a
    new tuple is built in which only the nodes on paths to fixed nodes
    are reallocated.
    """
    changed = False
    result: list[Todo] = []
    for todo in forest:
        fixed = _reconcile_node(todo)
        changed = changed or fixed is not todo
        result.append(fixed)
    return tuple(result) if changed else forest


def set_completion_deep(todo: Todo, completed: bool) -> Todo:
    """Set ``completed`` on a node and every node beneath it."""
    return todo.model_copy(
        update={
            "completed": completed,
            "children": tuple(
                set_completion_deep(child, completed) for child in todo.children
            ),
        }
    )


def toggle_completion(todo: Todo) -> Todo:
    """Flip a node's completion and force its whole subtree to match.

    Toggling a parent back to incomplete reopens every descendant.
    """
    return set_completion_deep(todo, not todo.completed)


def is_reconciled(forest: Sequence[Todo]) -> bool:
    """Check the completion invariant for every node in the forest."""
    for todo in forest:
        if todo.children:
            if todo.completed != all(child.completed for child in todo.children):
                return False
            if not is_reconciled(todo.children):
                return False
    return True
