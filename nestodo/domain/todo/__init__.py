"""Todo domain - the nested todo forest and its pure operations.

Every mutation takes the whole forest and returns ``(forest, changed)``.
Inputs are never modified; when nothing changed the input object itself
is returned, so callers can skip history and persistence with a cheap
identity check.

Key Types:
    Todo - A node in the forest
    Forest - Ordered tuple of root todos
    Priority - high / medium / low
    StatusFilter, PriorityFilter - Child list filters
    TodoStats - Total and completed counts
    ExportRow - Flattened todo for export

Functions:
    normalize - Repair deserialized data into a forest
    reconcile_completion, reconcile_tree - Completion invariant
    update_todos, delete_todo, reorder_within_parent - Targeted edits
    complete_children_batch, delete_children_batch,
    update_children_priority_batch - Batch edits on one parent's children
    filter_children, collect_stats, find_todo - Queries
    flatten_for_export, to_csv - Export
"""

from .batch import (
    complete_children_batch,
    delete_children_batch,
    update_children_priority_batch,
)
from .export import (
    CSV_HEADER,
    escape_csv_field,
    export_filename,
    flatten_for_export,
    to_csv,
)
from .models import (
    PATH_SEPARATOR,
    ExportRow,
    Forest,
    Priority,
    PriorityFilter,
    StatusFilter,
    Todo,
    TodoStats,
    generate_id,
    new_todo,
    now_iso,
)
from .mutation import delete_todo, reorder_within_parent, rewrite_first, update_todos
from .normalize import UNTITLED, normalize
from .query import collect_stats, filter_children, find_todo
from .reconcile import (
    is_reconciled,
    reconcile_completion,
    reconcile_tree,
    set_completion_deep,
    toggle_completion,
)

__all__ = [
    # Models
    "Todo",
    "Forest",
    "Priority",
    "StatusFilter",
    "PriorityFilter",
    "TodoStats",
    "ExportRow",
    "PATH_SEPARATOR",
    "generate_id",
    "now_iso",
    "new_todo",
    # Normalizer
    "UNTITLED",
    "normalize",
    # Reconciler
    "reconcile_completion",
    "reconcile_tree",
    "set_completion_deep",
    "toggle_completion",
    "is_reconciled",
    # Mutator
    "rewrite_first",
    "update_todos",
    "delete_todo",
    "reorder_within_parent",
    # Batch
    "complete_children_batch",
    "delete_children_batch",
    "update_children_priority_batch",
    # Queries
    "filter_children",
    "collect_stats",
    "find_todo",
    # Export
    "CSV_HEADER",
    "escape_csv_field",
    "flatten_for_export",
    "to_csv",
    "export_filename",
]
