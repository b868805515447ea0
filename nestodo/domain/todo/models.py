"""Todo domain models.

Immutable pydantic models for the todo forest. Every node is frozen and
children are held in tuples, so a forest value can be shared between the
current board and undo snapshots without copying.
"""

from collections.abc import Sequence
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

PATH_SEPARATOR = " > "


class Priority(str, Enum):
    """Priority tag of a todo."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class StatusFilter(str, Enum):
    """Which children to show by completion state."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class PriorityFilter(str, Enum):
    """Which children to show by priority."""

    ALL = "all"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Todo(BaseModel):
    """A node in the todo forest.

    Nodes with children are parents whose ``completed`` flag is derived
    from their children (see ``reconcile``). Leaves are completed directly.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    completed: bool = False
    created_at: str = Field(alias="createdAt")
    priority: Priority = Priority.MEDIUM
    children: tuple["Todo", ...] = ()


# Ordered root-level todos
Forest = tuple[Todo, ...]


class TodoStats(BaseModel):
    """Completion counts over a whole forest, descendants included."""

    total: int = 0
    completed: int = 0

    @property
    def active(self) -> int:
        return self.total - self.completed

    @property
    def progress_percent(self) -> float:
        """Calculate completion percentage."""
        if self.total == 0:
            return 0.0
        return round(self.completed / self.total * 100, 1)


class ExportRow(BaseModel):
    """One flattened todo, annotated with its parent and position.

    ``path`` joins the titles from the root down to this node with
    ``PATH_SEPARATOR``. Roots have depth 0 and no parent.
    """

    id: str
    title: str
    parent_id: str | None
    parent_title: str | None
    completed: bool
    priority: Priority
    created_at: str
    depth: int
    path: str


def generate_id() -> str:
    """Return a fresh globally unique todo id."""
    return str(uuid4())


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_todo(
    title: str,
    *,
    completed: bool = False,
    priority: Priority = Priority.MEDIUM,
    todo_id: str | None = None,
    created_at: str | None = None,
    children: Sequence[Todo] = (),
) -> Todo:
    """Create a todo, generating the id and timestamp when not given."""
    return Todo(
        id=todo_id or generate_id(),
        title=title,
        completed=completed,
        created_at=created_at or now_iso(),
        priority=priority,
        children=tuple(children),
    )
