"""
Tests for logger construction and root logging setup.
"""

import logging

import pytest

from utils import setup_logging
from utils.get_logger import Default_Level, LocalTimeFormatter, get_logger

pytestmark = pytest.mark.unit


def test_get_logger_is_cached():
    first = get_logger("proxy.test.cached")
    second = get_logger("proxy.test.cached")

    assert first is second
    assert first.propagate is False
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0].formatter, LocalTimeFormatter)


def test_get_logger_level_is_fixed_at_creation():
    logger = get_logger("proxy.test.level", logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
    # A later lookup returns the cached logger unchanged
    assert get_logger("proxy.test.level", logging.ERROR).level == logging.DEBUG
    assert get_logger("proxy.test.default").level == Default_Level


def test_local_time_formatter_marks_errors():
    record = logging.LogRecord("proxy", logging.ERROR, __file__, 1, "upstream down", None, None)

    output = LocalTimeFormatter().format(record)

    assert "ERROR" in output
    assert "upstream down" in output


def test_setup_cloud_logging_emulator(monkeypatch):
    monkeypatch.setattr(setup_logging, "_configured", False)
    monkeypatch.setenv("FUNCTIONS_EMULATOR", "true")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        configured = setup_logging.setup_cloud_logging("DEBUG")

        assert configured is root
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_cloud_logging_formatter_prefixes_level():
    formatter = setup_logging.CloudLoggingFormatter("%(message)s")
    record = logging.LogRecord("proxy", logging.WARNING, __file__, 1, "quota", None, None)

    assert formatter.format(record) == "WARNING: quota"
