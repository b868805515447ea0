"""Interfaces layer for nestodo.

Adapters that accept user input, call application services and format
the output. Currently only the Typer command-line interface.
"""

from nestodo.interfaces.cli import app

__all__ = ["app"]
