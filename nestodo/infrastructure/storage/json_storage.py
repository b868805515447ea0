"""Board file I/O. Failures come back as ``Err`` messages for the CLI."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from nestodo.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class JsonStorage:
    """Reads and writes JSON documents without any knowledge of todos."""

    def load_json(self, path: Path) -> Result[Any, str]:
        if not path.is_file():
            return Err(f"File not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

        try:
            return Ok(json.loads(text))
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in {path}: {e}")
            return Err(f"Invalid JSON in {path}: {e}")

    def save_json(self, path: Path, data: Any, indent: int = 2) -> Result[None, str]:
        """Write ``data`` next to ``path`` first, then swap it into place.

        A failed write leaves the previous board file untouched.
        """
        try:
            text = json.dumps(data, indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            return Err(f"Data not JSON serializable: {e}")

        partial = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            partial.write_text(text, encoding="utf-8")
            os.replace(partial, path)
        except OSError as e:
            partial.unlink(missing_ok=True)
            return Err(f"Error writing {path}: {e}")

        logger.debug(f"Wrote {len(text)} bytes to {path}")
        return Ok(None)
