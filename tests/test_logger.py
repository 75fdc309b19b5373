"""Tests for logger setup."""

import logging
import sys

import pytest

from utils.logger import QUIET_LOGGERS, setup_logger


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_project_logger_defaults(self):
        logger = setup_logger()
        assert logger.name == "repo_explorer"
        assert logger.level == logging.INFO

    def test_module_logger_uses_given_level(self):
        logger = setup_logger("debug", name="backend.routes")
        assert logger.name == "backend.routes"
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logger(log_level="verbose", name="fallback_logger")
        assert logger.level == logging.INFO

    def test_logs_to_stdout(self):
        setup_logger()
        handlers = logging.getLogger().handlers
        assert any(getattr(h, "stream", None) is sys.stdout for h in handlers)

    @pytest.mark.parametrize("level,expected", [
        ("INFO", logging.WARNING),
        ("WARNING", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("DEBUG", logging.DEBUG),
    ])
    def test_http_libraries_quieted_below_debug(self, level, expected):
        """Connection logs from the HTTP clients only show at DEBUG."""
        setup_logger(level)
        for library in QUIET_LOGGERS:
            assert logging.getLogger(library).level == expected
