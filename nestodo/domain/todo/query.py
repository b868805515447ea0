"""Read-only queries over todos."""

from collections.abc import Sequence

from .models import PriorityFilter, StatusFilter, Todo, TodoStats


def _matches_status(todo: Todo, status: StatusFilter) -> bool:
    if status is StatusFilter.ACTIVE:
        return not todo.completed
    if status is StatusFilter.COMPLETED:
        return todo.completed
    return True


def filter_children(
    children: Sequence[Todo],
    status_filter: StatusFilter | str = StatusFilter.ALL,
    search_text: str = "",
    priority_filter: PriorityFilter | str = PriorityFilter.ALL,
) -> list[Todo]:
    """Return the children visible under the given filters.

    Status, priority and search are ANDed. The search text is trimmed and
    case-folded and must occur in the case-folded title; blank search
    matches everything. Only the given list is filtered, not the
    grandchildren.
    """
    status = StatusFilter(status_filter)
    priority = PriorityFilter(priority_filter)
    needle = search_text.strip().casefold()

    return [
        child
        for child in children
        if _matches_status(child, status)
        and (priority is PriorityFilter.ALL or child.priority.value == priority.value)
        and (not needle or needle in child.title.casefold())
    ]


def collect_stats(forest: Sequence[Todo]) -> TodoStats:
    """Count all nodes and completed nodes, at every depth."""
    total = 0
    completed = 0
    for todo in forest:
        child_stats = collect_stats(todo.children)
        total += 1 + child_stats.total
        completed += (1 if todo.completed else 0) + child_stats.completed
    return TodoStats(total=total, completed=completed)


def find_todo(forest: Sequence[Todo], todo_id: str) -> Todo | None:
    """Find the first node with ``todo_id`` (depth-first, pre-order)."""
    for todo in forest:
        if todo.id == todo_id:
            return todo
        found = find_todo(todo.children, todo_id)
        if found is not None:
            return found
    return None
