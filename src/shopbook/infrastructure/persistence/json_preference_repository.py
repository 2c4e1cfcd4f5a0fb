"""JSON-file-backed implementation of PreferenceRepository."""

from __future__ import annotations

from pathlib import Path

from shopbook.domain.repository.preference_repository import (
    DEFAULT_THEME,
    PreferenceRepository,
)
from shopbook.infrastructure.persistence.json_file import JsonFile


class JsonPreferenceRepository(PreferenceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default={})

    def get_theme(self) -> str:
        return self._file.load().get("theme") or DEFAULT_THEME

    def save_theme(self, theme: str) -> None:
        prefs = self._file.load()
        prefs["theme"] = theme
        self._file.save(prefs)
