"""Abstract repository for user preferences."""

from __future__ import annotations

from abc import ABC, abstractmethod

THEMES = ("light", "dark")
DEFAULT_THEME = "light"


class PreferenceRepository(ABC):

    @abstractmethod
    def get_theme(self) -> str:
        """Return the stored theme, or ``DEFAULT_THEME`` if none was saved."""

    @abstractmethod
    def save_theme(self, theme: str) -> None:
        """Persist the theme preference."""
