"""CLI command modules for nestodo.

- todo: viewing the board and editing single todos
- batch: actions on several children of one parent (registered as a group)
"""

from nestodo.interfaces.cli.commands import batch, todo

__all__ = ["todo", "batch"]
