"""Tests for settings resolution and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from shopbook.infrastructure.config import DEFAULT_DATA_DIR, Settings
from shopbook.infrastructure.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for name in ("SHOPBOOK_DATA_DIR", "SHOPBOOK_LOG_LEVEL", "SHOPBOOK_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.log_level == "WARNING"
        assert settings.log_file is None

    def test_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SHOPBOOK_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("SHOPBOOK_LOG_LEVEL", "debug")
        monkeypatch.setenv("SHOPBOOK_LOG_FILE", str(tmp_path / "shopbook.log"))

        settings = Settings()
        assert settings.data_dir == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.log_file == tmp_path / "shopbook.log"
        assert settings.sales_file == tmp_path / "sales.json"

    def test_empty_variables_fall_back_to_defaults(self, monkeypatch):
        monkeypatch.setenv("SHOPBOOK_DATA_DIR", "")
        monkeypatch.setenv("SHOPBOOK_LOG_FILE", "")
        settings = Settings()
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.log_file is None

    def test_arguments_win(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SHOPBOOK_DATA_DIR", "/elsewhere")
        monkeypatch.setenv("SHOPBOOK_LOG_LEVEL", "ERROR")

        settings = Settings(data_dir=tmp_path / "explicit", log_level="INFO")
        assert settings.data_dir == tmp_path / "explicit"
        assert settings.log_level == "INFO"

    def test_home_is_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        settings = Settings(data_dir="~/books")
        assert settings.data_dir == tmp_path / "books"

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("SHOPBOOK_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings()

    def test_settings_are_frozen(self, tmp_path):
        settings = Settings(data_dir=tmp_path)
        with pytest.raises(ValidationError):
            settings.data_dir = tmp_path / "other"


class TestConfigureLogging:

    @pytest.fixture(autouse=True)
    def _reset_logger(self):
        logger = logging.getLogger("shopbook")
        saved = (logger.handlers[:], logger.level)
        logger.handlers.clear()
        yield
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:], logger.level = saved[0], saved[1]

    def test_installs_handlers_once(self, tmp_path):
        log_file = tmp_path / "logs" / "shopbook.log"
        logger = configure_logging("INFO", log_file)
        count = len(logger.handlers)
        configure_logging("DEBUG", log_file)

        assert count == 2
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG
        assert log_file.parent.is_dir()

    def test_console_only(self):
        logger = configure_logging("WARNING")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
