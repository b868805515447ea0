"""Targeted updates anywhere in the todo forest.

All functions locate a node by id using a depth-first, pre-order search
(a node before its descendants, siblings in order) and act on the first
match only. They return ``(forest, changed)``: when nothing changed the
returned forest is the input object itself, otherwise a new forest in
which only the nodes on the path from the root to the target are new.
Every ancestor on that path is reconciled after the change.
"""

from collections.abc import Callable, Sequence

from .models import Forest, Todo
from .reconcile import reconcile_completion, reconcile_tree

# A rewrite receives the matched node and returns (replacement, changed).
# A replacement of None removes the node.
Rewrite = Callable[[Todo], tuple[Todo | None, bool]]


def _splice(
    forest: Sequence[Todo], index: int, replacement: Todo | None
) -> Forest:
    middle = () if replacement is None else (replacement,)
    return (*forest[:index], *middle, *forest[index + 1 :])


def _with_children(todo: Todo, children: Sequence[Todo]) -> Todo:
    return reconcile_completion(todo.model_copy(update={"children": tuple(children)}))


def _rewrite(
    forest: Sequence[Todo], target_id: str, rewrite: Rewrite
) -> tuple[Sequence[Todo], bool, bool]:
    """Return (forest, found, changed) for the first node matching target_id."""
    for index, todo in enumerate(forest):
        if todo.id == target_id:
            replacement, changed = rewrite(todo)
            if not changed:
                return forest, True, False
            return _splice(forest, index, replacement), True, True

        children, found, changed = _rewrite(todo.children, target_id, rewrite)
        if found:
            if not changed:
                return forest, True, False
            return _splice(forest, index, _with_children(todo, children)), True, True
    return forest, False, False


def rewrite_first(
    forest: Sequence[Todo], target_id: str, rewrite: Rewrite
) -> tuple[Forest, bool]:
    """Apply ``rewrite`` to the first node whose id is ``target_id``.

    The search stops at the first match even if the rewrite reports no
    change. Ancestors of a changed node are reconciled on the way up.
    """
    result, _, changed = _rewrite(forest, target_id, rewrite)
    return (result if changed else forest), changed


def update_todos(
    forest: Sequence[Todo],
    target_id: str,
    updater: Callable[[Todo], Todo],
) -> tuple[Forest, bool]:
    """Replace the first node matching ``target_id`` with ``updater(node)``.

    The updater may change the title, priority or completion, or swap the
    children wholesale. New children are reconciled through their whole
    subtrees, then the updated node, then every ancestor in turn.

    Example:
        >>> forest, changed = update_todos(
        ...     forest, "abc", lambda t: t.model_copy(update={"title": "Renamed"})
        ... )
    """

    def apply(todo: Todo) -> tuple[Todo, bool]:
        updated = updater(todo)
        return _with_children(updated, reconcile_tree(updated.children)), True

    return rewrite_first(forest, target_id, apply)


def delete_todo(forest: Sequence[Todo], target_id: str) -> tuple[Forest, bool]:
    """Remove the first node matching ``target_id`` with its whole subtree.

    Losing an incomplete child can complete its parent, so ancestors are
    reconciled afterward.
    """
    return rewrite_first(forest, target_id, lambda todo: (None, True))


def reorder_within_parent(
    forest: Sequence[Todo],
    parent_id: str,
    source_id: str,
    target_id: str,
) -> tuple[Forest, bool]:
    """Move a child of ``parent_id`` into the slot held by another child.

    The source is removed first. If it stood before the target, every
    later index shifts down by one, so it is reinserted at
    ``target_index - 1``; otherwise at ``target_index``. So in
    ``[a, b, c, d]`` moving ``a`` onto ``c`` gives ``[b, a, c, d]``.

    No change when either id is not a direct child of the parent or when
    the ids are equal. Moving a child onto the sibling right after it
    lands on its own index, so it is also reported as no change rather
    than as a move that leaves the order as it was.
    """
    if source_id == target_id:
        return forest, False

    def move(parent: Todo) -> tuple[Todo, bool]:
        ids = [child.id for child in parent.children]
        if source_id not in ids or target_id not in ids:
            return parent, False

        source_index = ids.index(source_id)
        target_index = ids.index(target_id)
        insert_at = target_index - 1 if source_index < target_index else target_index
        if insert_at == source_index:
            return parent, False

        children = list(parent.children)
        moved = children.pop(source_index)
        children.insert(insert_at, moved)
        return _with_children(parent, children), True

    return rewrite_first(forest, parent_id, move)
