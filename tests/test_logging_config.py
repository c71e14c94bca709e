"""Tests for logging setup."""

import logging

import pytest

from sloc.exceptions import InvalidConfigError
from sloc.logging_config import LOG_LEVELS, NOTICE, get_logger, parse_log_level, setup_logging


class TestParseLogLevel:
    @pytest.mark.parametrize("name", list(LOG_LEVELS))
    def test_known_levels(self, name):
        assert parse_log_level(name) == LOG_LEVELS[name]

    def test_case_insensitive(self):
        assert parse_log_level("debug") == logging.DEBUG

    def test_notice_between_info_and_warning(self):
        assert logging.INFO < NOTICE < logging.WARNING
        assert logging.getLevelName(NOTICE) == "NOTICE"

    def test_unknown_level(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            parse_log_level("TRACE")
        assert exc_info.value.key == "log_level"


class TestSetupLogging:
    def test_sets_sloc_logger_level(self):
        logger = setup_logging("NOTICE")
        assert logger.name == "sloc"
        assert logger.level == NOTICE

    def test_invalid_level_raises_before_configuring(self):
        with pytest.raises(InvalidConfigError):
            setup_logging("LOUD")


class TestGetLogger:
    def test_root(self):
        assert get_logger().name == "sloc"

    def test_prefixes_foreign_names(self):
        assert get_logger("walker").name == "sloc.walker"

    def test_keeps_package_names(self):
        assert get_logger("sloc.counting.walker").name == "sloc.counting.walker"
