"""
Unit Tests for Centralized Logging.

Tests the logging configuration and source handling.
"""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock, patch

import pytest

from modules.backend.core import logging as logging_module


@pytest.fixture
def logging_config():
    return {
        "level": "DEBUG",
        "format": "console",
        "handlers": {
            "console": {"enabled": True},
            "file": {
                "enabled": False,
                "path": "logs/system.jsonl",
                "max_bytes": 5242880,
                "backup_count": 3,
            },
        },
    }


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    logging_module._logging_config = None
    yield
    logging_module._logging_config = None
    root.handlers[:] = handlers
    root.setLevel(level)


class TestValidSources:
    """Tests for VALID_SOURCES constant."""

    def test_contains_expected_values(self):
        assert logging_module.VALID_SOURCES == frozenset({"web", "cli", "internal", "unknown"})


class TestLoggingConfigLoading:
    """Tests for logging configuration loading from YAML."""

    def test_reads_real_logging_yaml(self):
        config = logging_module._load_logging_config()

        assert config["level"] == "INFO"
        assert config["handlers"]["file"]["path"] == "logs/system.jsonl"

    def test_config_is_cached(self, logging_config):
        with patch(
            "modules.backend.core.logging.load_yaml_config", return_value=logging_config
        ) as mock_load:
            logging_module._load_logging_config()
            logging_module._load_logging_config()

        mock_load.assert_called_once_with("logging.yaml")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_applies_yaml_level_and_console_handler(self, logging_config):
        with patch(
            "modules.backend.core.logging.load_yaml_config", return_value=logging_config
        ):
            logging_module.setup_logging()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_arguments_override_yaml(self, logging_config):
        with patch(
            "modules.backend.core.logging.load_yaml_config", return_value=logging_config
        ):
            logging_module.setup_logging(level="WARNING", enable_console=False)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert root.handlers == []

    def test_file_handler_writes_under_project_root(self, logging_config, tmp_path):
        with patch(
            "modules.backend.core.logging.load_yaml_config", return_value=logging_config
        ), patch(
            "modules.backend.core.logging.find_project_root", return_value=tmp_path
        ):
            logging_module.setup_logging(enable_console=False, enable_file_logging=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert (tmp_path / "logs").is_dir()
        handlers[0].close()


class TestLogWithSource:
    """Tests for log_with_source."""

    def test_passes_source_and_context(self):
        logger = MagicMock()

        logging_module.log_with_source(logger, "cli", "info", "Server starting", port=80)

        logger.info.assert_called_once_with("Server starting", source="cli", port=80)

    def test_invalid_level_raises(self):
        logger = MagicMock(spec=["info"])

        with pytest.raises(AttributeError):
            logging_module.log_with_source(logger, "cli", "loud", "x")

    @pytest.mark.parametrize("source", sorted(logging_module.VALID_SOURCES))
    def test_accepts_every_known_source(self, source):
        logger = MagicMock()

        logging_module.log_with_source(logger, source, "debug", "hello")

        logger.debug.assert_called_once_with("hello", source=source)

    def test_unknown_source_raises_without_logging(self):
        logger = MagicMock()

        with pytest.raises(ValueError, match="Unknown log source"):
            logging_module.log_with_source(logger, "scheduler", "info", "x")

        logger.info.assert_not_called()
