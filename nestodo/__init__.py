"""nestodo - nested todo lists with batch edits, undo and CSV export."""

__version__ = "0.1.0"
