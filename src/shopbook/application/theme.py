"""Application service: theme preference."""

from __future__ import annotations

import logging

from shopbook.domain.exceptions import ValidationError
from shopbook.domain.repository.preference_repository import (
    THEMES,
    PreferenceRepository,
)

logger = logging.getLogger(__name__)


class ThemeHandler:

    def __init__(self, preference_repo: PreferenceRepository) -> None:
        self._preference_repo = preference_repo

    def current(self) -> str:
        return self._preference_repo.get_theme()

    def set(self, theme: str) -> str:
        value = theme.strip().lower()
        if value not in THEMES:
            raise ValidationError(
                f"Unknown theme {theme!r} (expected one of: {', '.join(THEMES)})"
            )
        self._preference_repo.save_theme(value)
        logger.info("Theme set to %s", value)
        return value

    def toggle(self) -> str:
        return self.set("dark" if self.current() == "light" else "light")
