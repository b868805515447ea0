"""Infrastructure layer for nestodo.

Adapters for the outside world. Currently only file storage.
"""

from nestodo.infrastructure.storage import BoardRepository, JsonStorage

__all__ = ["BoardRepository", "JsonStorage"]
