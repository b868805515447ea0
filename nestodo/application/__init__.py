"""Application service layer for nestodo.

Services combine domain functions into user-facing actions without
performing I/O.

Example usage:
    >>> from nestodo.application import BoardState, add_todo, undo
    >>> from nestodo.domain.shared import is_ok
    >>>
    >>> result = add_todo(BoardState(), "Plan the week")
    >>> if is_ok(result):
    ...     state, changed = result.value
"""

from nestodo.application.board_service import (
    MAX_HISTORY,
    BoardState,
    add_child,
    add_todo,
    apply_change,
    batch_complete,
    batch_delete,
    batch_priority,
    delete,
    edit_title,
    export_csv,
    get_stats,
    reorder,
    set_priority,
    toggle_todo,
    undo,
)

__all__ = [
    "MAX_HISTORY",
    "BoardState",
    "apply_change",
    "undo",
    "add_todo",
    "add_child",
    "toggle_todo",
    "edit_title",
    "delete",
    "set_priority",
    "batch_complete",
    "batch_delete",
    "batch_priority",
    "reorder",
    "get_stats",
    "export_csv",
]
