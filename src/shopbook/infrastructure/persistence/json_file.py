"""Whole-file JSON storage shared by the JSON repositories.

Each collection lives in its own file and is always read and written in
full. Writes go to a sibling temporary file that is then renamed over
the target, so a reader never sees a half-written collection.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A data file exists but cannot be read or parsed."""


class JsonFile:

    def __init__(self, file_path: Path, default: Any) -> None:
        self._file_path = file_path
        self._default = default

    @property
    def path(self) -> Path:
        return self._file_path

    def exists(self) -> bool:
        return self._file_path.exists()

    def load(self) -> Any:
        """Return the parsed file, or a copy of the default when absent."""
        if not self._file_path.exists():
            return json.loads(json.dumps(self._default))
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc

    def save(self, data: Any) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)
        logger.debug("Wrote %s", self._file_path)
