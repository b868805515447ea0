"""Configuration for nestodo.

Settings come from environment variables; the board file lives in
~/.nestodo/ unless told otherwise.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from nestodo.application.board_service import MAX_HISTORY


@dataclass(frozen=True)
class Settings:
    """
    Settings loaded from environment variables.

    Env vars:
    - NESTODO_DATA_FILE: path of the board JSON file. Default '~/.nestodo/todos.json'
    - NESTODO_MAX_HISTORY: number of undo snapshots kept. Default 25
    - NESTODO_LOG_LEVEL: logging level name. Default 'WARNING'
    """

    data_file: Path
    max_history: int
    log_level: str


def get_config_dir() -> Path:
    """Get the nestodo config directory (not created here)."""
    return Path.home() / ".nestodo"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _parse_positive_int(value: str, default: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed >= 1 else default


def get_settings() -> Settings:
    """Return settings loaded from environment variables."""
    data_file = Path(
        _get_env("NESTODO_DATA_FILE", str(get_config_dir() / "todos.json"))
    ).expanduser()
    max_history = _parse_positive_int(
        _get_env("NESTODO_MAX_HISTORY", str(MAX_HISTORY)), MAX_HISTORY
    )
    log_level = _get_env("NESTODO_LOG_LEVEL", "WARNING").upper()

    return Settings(data_file=data_file, max_history=max_history, log_level=log_level)
