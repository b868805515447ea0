"""Turn untrusted deserialized data into a well-formed forest.

Stored boards may come from older versions or be hand-edited, so every
field is checked and repaired with a default instead of rejected.
"""

from collections.abc import Mapping
from typing import Any

from .models import Forest, Priority, Todo, generate_id, now_iso

UNTITLED = "Untitled todo"

_PRIORITIES = {p.value: p for p in Priority}


def _normalize_item(item: Any) -> Todo:
    if isinstance(item, Todo):
        item = item.model_dump(by_alias=True)
    raw: Mapping[str, Any] = item if isinstance(item, Mapping) else {}

    todo_id = raw.get("id")
    title = raw.get("title")
    created_at = raw.get("createdAt", raw.get("created_at"))
    priority = raw.get("priority")
    if isinstance(priority, Priority):
        priority = priority.value

    return Todo(
        id=todo_id if isinstance(todo_id, str) else generate_id(),
        title=title if isinstance(title, str) else UNTITLED,
        completed=bool(raw.get("completed")),
        created_at=created_at if isinstance(created_at, str) else now_iso(),
        priority=_PRIORITIES.get(priority, Priority.MEDIUM)
        if isinstance(priority, str)
        else Priority.MEDIUM,
        children=normalize(raw.get("children")),
    )


def normalize(raw: Any) -> Forest:
    """Build a forest from arbitrary deserialized data.

    Lists (or tuples) are treated as a sequence of todos; anything else
    yields an empty forest. Missing or mistyped fields get defaults:
    a fresh id, the ``UNTITLED`` placeholder, ``completed=False``, the
    current time and ``medium`` priority. Never raises.

    Note that the completion invariant is not enforced here; pass the
    result through ``reconcile_tree`` before use.
    """
    if not isinstance(raw, (list, tuple)):
        return ()
    return tuple(_normalize_item(item) for item in raw)
