"""Batch operations on a selection of one parent's direct children.

Each operator finds the first node matching ``parent_id`` (at any depth),
makes a single pass over its direct children and leaves grandchildren
alone, apart from the deep completion done by
``complete_children_batch``. The parent and its ancestors are
reconciled afterward.

An empty selection, a missing parent, or a parent with none of the
selected ids among its children is a no-op: ``(forest, False)`` with
the input object returned as-is.
"""

from collections.abc import Callable, Collection, Sequence

from .models import Forest, Priority, Todo
from .mutation import rewrite_first
from .reconcile import reconcile_completion, set_completion_deep


def _map_selected(
    forest: Sequence[Todo],
    parent_id: str,
    child_ids: Collection[str],
    transform: Callable[[Todo], Todo | None],
) -> tuple[Forest, bool]:
    if not child_ids:
        return forest, False

    def apply(parent: Todo) -> tuple[Todo, bool]:
        hit = False
        children: list[Todo] = []
        for child in parent.children:
            if child.id not in child_ids:
                children.append(child)
                continue
            hit = True
            replacement = transform(child)
            if replacement is not None:
                children.append(replacement)
        if not hit:
            return parent, False
        updated = parent.model_copy(update={"children": tuple(children)})
        return reconcile_completion(updated), True

    return rewrite_first(forest, parent_id, apply)


def complete_children_batch(
    forest: Sequence[Todo], parent_id: str, child_ids: Collection[str]
) -> tuple[Forest, bool]:
    """Mark the selected children, and everything beneath them, complete."""
    return _map_selected(
        forest, parent_id, child_ids, lambda child: set_completion_deep(child, True)
    )


def delete_children_batch(
    forest: Sequence[Todo], parent_id: str, child_ids: Collection[str]
) -> tuple[Forest, bool]:
    """Remove the selected children together with their subtrees."""
    return _map_selected(forest, parent_id, child_ids, lambda child: None)


def update_children_priority_batch(
    forest: Sequence[Todo],
    parent_id: str,
    child_ids: Collection[str],
    priority: Priority | str,
) -> tuple[Forest, bool]:
    """Set ``priority`` on the selected children.

    Priority never affects completion; the parent is still reconciled so
    every batch operator leaves the tree in the same state.
    """
    level = Priority(priority)
    return _map_selected(
        forest,
        parent_id,
        child_ids,
        lambda child: child.model_copy(update={"priority": level}),
    )
