"""Board persistence.

The board is stored as one JSON document::

    {"todos": [...], "history": [[...], [...]]}

A bare list is also accepted and read as a forest with no history, which
is how boards exported by older versions look. Every forest read back is
normalized and reconciled, so hand-edited files are repaired on load.
"""

import logging
from pathlib import Path
from typing import Any

from nestodo.application.board_service import MAX_HISTORY, BoardState
from nestodo.domain.shared.result import Err, Ok, Result
from nestodo.domain.todo import Forest, normalize, reconcile_tree
from nestodo.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


def _load_forest(raw: Any) -> Forest:
    return tuple(reconcile_tree(normalize(raw)))


def _dump_forest(forest: Forest) -> list[dict[str, Any]]:
    return [todo.model_dump(mode="json", by_alias=True) for todo in forest]


class BoardRepository:
    """Repository for the board document at ``path``."""

    def __init__(
        self,
        path: Path,
        storage: JsonStorage | None = None,
        max_history: int = MAX_HISTORY,
    ) -> None:
        """Initialize the repository.

        Args:
            path: Location of the board JSON file.
            storage: JsonStorage instance to use. Creates new one if not provided.
            max_history: Undo depth for boards loaded from this file.
        """
        self.path = path
        self._storage = storage or JsonStorage()
        self._max_history = max_history

    def load(self) -> Result[BoardState, str]:
        """Load the board.

        Returns:
            Ok(BoardState), empty when the file does not exist yet, or
            Err(str) when the file cannot be read or is not valid JSON.
        """
        if not self.path.exists():
            logger.info(f"No board at {self.path}, starting empty")
            return Ok(BoardState(max_history=self._max_history))

        result = self._storage.load_json(self.path)
        if isinstance(result, Err):
            return result

        data = result.value
        if isinstance(data, dict):
            todos = _load_forest(data.get("todos"))
            raw_history = data.get("history")
            history = (
                tuple(_load_forest(snapshot) for snapshot in raw_history)
                if isinstance(raw_history, list)
                else ()
            )
        else:
            todos = _load_forest(data)
            history = ()

        if self._max_history > 0:
            history = history[-self._max_history :]
        else:
            history = ()

        logger.debug(
            f"Loaded {len(todos)} root todos and {len(history)} snapshots from {self.path}"
        )
        return Ok(
            BoardState(todos=todos, history=history, max_history=self._max_history)
        )

    def save(self, state: BoardState) -> Result[None, str]:
        """Persist the board, history included."""
        document = {
            "todos": _dump_forest(state.todos),
            "history": [_dump_forest(snapshot) for snapshot in state.history],
        }
        return self._storage.save_json(self.path, document)
