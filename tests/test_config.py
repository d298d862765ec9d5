"""Tests for settings and logging setup."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from language_manager.config import Settings, logger, setup_logging


@pytest.fixture
def restore_logger():
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ["STORAGE_DIR", "STORAGE_FILE", "LOG_LEVEL", "PERSIST_EMPTY_LIST", "CLEAR_EDIT_ON_DELETE"]:
            monkeypatch.delenv(f"LANGUAGE_MANAGER_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.storage_dir == Path("data")
        assert s.storage_path == Path("data") / "storage.json"
        assert s.log_level == "INFO"
        assert s.persist_empty_list is False
        assert s.clear_edit_on_delete is True

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LANGUAGE_MANAGER_STORAGE_DIR", str(tmp_path))
        monkeypatch.setenv("LANGUAGE_MANAGER_PERSIST_EMPTY_LIST", "true")
        s = Settings(_env_file=None)
        assert s.storage_path == tmp_path / "storage.json"
        assert s.persist_empty_list is True

    def test_lowercase_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LANGUAGE_MANAGER_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="loud")


class TestSetupLogging:
    def test_sets_level_and_single_handler(self, restore_logger):
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert restore_logger.level == logging.DEBUG
        assert len(restore_logger.handlers) == 1

    def test_numeric_level(self, restore_logger):
        setup_logging(logging.WARNING)
        assert restore_logger.level == logging.WARNING

    def test_lowercase_level_name(self, restore_logger):
        setup_logging("info")
        assert restore_logger.level == logging.INFO

    def test_level_from_settings(self, restore_logger):
        with patch("language_manager.config.get_settings") as mock_settings:
            mock_settings.return_value = Settings(_env_file=None, log_level="error")
            setup_logging()
        assert restore_logger.level == logging.ERROR
