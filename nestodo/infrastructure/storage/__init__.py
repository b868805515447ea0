"""Storage infrastructure for nestodo.

Persists the board to a JSON file, using Result types for explicit
error handling.
"""

from nestodo.infrastructure.storage.json_storage import JsonStorage
from nestodo.infrastructure.storage.repositories import BoardRepository

__all__ = [
    "JsonStorage",
    "BoardRepository",
]
