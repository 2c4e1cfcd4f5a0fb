"""Runtime settings resolved from the environment.

``SHOPBOOK_DATA_DIR``   directory holding the JSON collections
                        (default: ``<project root>/data``)
``SHOPBOOK_LOG_LEVEL``  logging level name (default: ``WARNING``)
``SHOPBOOK_LOG_FILE``   optional path of a rotating log file

Keyword arguments passed to ``Settings`` win over the environment.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SHOPBOOK_",
        env_ignore_empty=True,
        frozen=True,
    )

    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("data_dir", "log_file")
    @classmethod
    def _expand_user(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def customers_file(self) -> Path:
        return self.data_dir / "customers.json"

    @property
    def sales_file(self) -> Path:
        return self.data_dir / "sales.json"

    @property
    def preferences_file(self) -> Path:
        return self.data_dir / "preferences.json"
