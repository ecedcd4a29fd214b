"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging
from unittest.mock import patch

import pytest

from wordboard.core.logging_config import (
    DETAILED_FORMAT,
    FORMATS,
    JSON_FORMAT,
    LOG_FILE_NAME,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


def _console_handler() -> logging.Handler:
    return next(
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    )


def _file_handler():
    return next((h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)), None)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    handler = _file_handler()
    if handler is not None:
        handler.close()
    setup_logging(enable_file=False)


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("debug", logging.DEBUG),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        setup_logging(log_level=log_level, enable_file=False)

        assert _console_handler().level == expected_level

    def test_root_logger_level_is_debug(self):
        """Root captures everything, filtering happens at handler level."""
        setup_logging(log_level="WARNING", enable_file=False)

        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingFormats:
    """Test setup_logging with different log formats."""

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format):
        setup_logging(log_format=log_format, enable_file=False)

        assert _console_handler().formatter._fmt == expected_format

    def test_unknown_format_falls_back_to_detailed(self):
        setup_logging(log_format="fancy", enable_file=False)

        assert _console_handler().formatter._fmt == DETAILED_FORMAT

    def test_date_format(self):
        setup_logging(enable_file=False)

        assert _console_handler().formatter.datefmt == "%Y-%m-%d %H:%M:%S"

    def test_formats_mapping(self):
        assert set(FORMATS) == {"simple", "detailed", "json"}


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_file_logging_off_by_configuration(self, tmp_path):
        with patch("wordboard.core.logging_config.ENABLE_FILE_LOGGING", False), patch(
            "wordboard.core.logging_config.LOG_FILE_DIR", str(tmp_path)
        ):
            setup_logging(enable_file=True)

        assert _file_handler() is None
        assert not (tmp_path / LOG_FILE_NAME).exists()

    def test_file_logging_creates_directory_and_file(self, tmp_path):
        log_dir = tmp_path / "nested" / "logs"
        with patch("wordboard.core.logging_config.ENABLE_FILE_LOGGING", True), patch(
            "wordboard.core.logging_config.LOG_FILE_DIR", str(log_dir)
        ):
            setup_logging(log_level="ERROR", enable_file=True)

        handler = _file_handler()
        assert handler is not None
        assert handler.level == logging.DEBUG
        assert (log_dir / LOG_FILE_NAME).exists()

    def test_enable_file_false_wins(self, tmp_path):
        with patch("wordboard.core.logging_config.ENABLE_FILE_LOGGING", True), patch(
            "wordboard.core.logging_config.LOG_FILE_DIR", str(tmp_path)
        ):
            setup_logging(enable_file=False)

        assert _file_handler() is None


class TestSetupLoggingHandlerManagement:
    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(logging.getLogger().handlers) == 1

    def test_all_module_log_levels_configured(self):
        setup_logging(enable_file=False)

        for module_name, expected_level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == getattr(logging, expected_level)

    def test_pymongo_is_quiet(self):
        setup_logging(log_level="DEBUG", enable_file=False)

        assert logging.getLogger("pymongo").level == logging.WARNING


class TestGetLogger:
    def test_get_logger_returns_named_logger(self):
        logger = get_logger("wordboard.server.api.v1.boards")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "wordboard.server.api.v1.boards"

    def test_get_logger_same_name_returns_same_instance(self):
        assert get_logger("same_module") is get_logger("same_module")

    def test_child_logger_inherits_module_level(self):
        setup_logging(enable_file=False)

        assert get_logger("wordboard.server.api.v1.boards").getEffectiveLevel() == logging.DEBUG
        assert get_logger("pymongo.connection").getEffectiveLevel() == logging.WARNING
