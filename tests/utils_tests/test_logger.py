# tests/utils_tests/test_logger.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Tests for the project logger configuration

"""Tests for logger levels and formatting."""

import logging

import pytest
from utils.logger import (
    LogicFormatter,
    LogLevel,
    configure_logging,
    get_logger,
    set_log_level,
)


class TestLogger:
    """Test cases for the global logger."""

    def teardown_method(self):
        """Restore the default level for other tests."""
        set_log_level(LogLevel.INFO)

    def test_singleton(self):
        assert get_logger() is get_logger()

    @pytest.mark.parametrize(
        "debug, expected",
        [
            (False, logging.INFO),
            (True, logging.DEBUG),
        ],
    )
    def test_configure_logging(self, debug, expected):
        configure_logging(debug=debug)

        logger = get_logger().logger
        assert logger.level == expected
        assert all(handler.level == expected for handler in logger.handlers)

    def test_formatter(self):
        formatter = LogicFormatter()

        def record(level):
            return logging.LogRecord("logic_parser", level, __file__, 1, "msg", None, None)

        assert formatter.format(record(logging.INFO)) == "msg"
        assert formatter.format(record(logging.ERROR)) == "msg"
        assert formatter.format(record(logging.DEBUG)) == "[DEBUG] msg"
