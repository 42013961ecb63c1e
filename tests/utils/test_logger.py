"""Tests for logging setup."""

import logging

import pytest

from nexus_tool.utils.logger import WrappingFormatter, setup_logging, verbosity_to_level


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestVerbosity:
    """Test verbosity mapping."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG), (-1, logging.WARNING)],
    )
    def test_verbosity_to_level(self, verbosity, level):
        """Test the -d count to level mapping."""
        assert verbosity_to_level(verbosity) == level


class TestSetupLogging:
    """Test setup_logging."""

    def test_wrapping_handler(self, restore_root_logger):
        """Test that wrapping mode installs a single WrappingFormatter handler."""
        setup_logging(2, use_wrapping=True)

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, WrappingFormatter)

    def test_http_loggers_quiet_by_default(self, restore_root_logger):
        """Test that httpx request logs are hidden below -ddd."""
        setup_logging(2, use_wrapping=True)

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_http_loggers_enabled(self, restore_root_logger):
        """Test that -ddd enables HTTP logs."""
        setup_logging(3, use_wrapping=True)

        assert logging.getLogger("httpx").level == logging.DEBUG
        logging.getLogger("httpx").setLevel(logging.NOTSET)
        logging.getLogger("httpcore").setLevel(logging.NOTSET)


class TestWrappingFormatter:
    """Test WrappingFormatter."""

    def _record(self, message):
        return logging.LogRecord("test", logging.INFO, __file__, 1, message, None, None)

    def test_short_message_unchanged(self):
        """Test that short messages are not wrapped."""
        formatter = WrappingFormatter(fmt="%(message)s", width=40)
        assert formatter.format(self._record("short message")) == "short message"

    def test_long_message_wrapped(self):
        """Test that long messages are wrapped with indented continuation lines."""
        formatter = WrappingFormatter(fmt="%(message)s", width=20)
        lines = formatter.format(self._record("word " * 12)).split("\n")

        assert len(lines) > 1
        assert all(len(line) <= 20 for line in lines)
        assert all(line.startswith("    ") for line in lines[1:])
