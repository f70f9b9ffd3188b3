# topmark:header:start
#
#   project      : Buckify
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for Buckify's TRACE level, formatter and logging setup."""

from __future__ import annotations

import logging as std_logging
import sys

import pytest

from buckify.config import logging
from buckify.config.logging import ChalkFormatter, get_logger, setup_logging


def _record(level: int, msg: str = "hi %s") -> std_logging.LogRecord:
    return std_logging.LogRecord("buckify.test", level, __file__, 7, msg, ("there",), None)


def test_trace_level_is_registered() -> None:
    assert std_logging.getLevelName(logging.TRACE_LEVEL) == "TRACE"
    assert logging.TRACE_LEVEL < std_logging.DEBUG


def test_trace_records_carry_trace_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("buckify.tests.trace")
    with caplog.at_level(logging.TRACE_LEVEL, logger="buckify.tests.trace"):
        logger.trace("token %d", 3)

    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "token 3")]


def test_formatter_without_color_is_plain() -> None:
    formatter = ChalkFormatter(logging.LOG_FORMAT, color=False)
    assert formatter.format(_record(std_logging.WARNING)) == "[WARNING] hi there"


def test_formatter_with_color_keeps_message() -> None:
    formatter = ChalkFormatter(logging.LOG_FORMAT)
    assert "hi there" in formatter.format(_record(std_logging.ERROR))


def test_debug_format_names_the_logger() -> None:
    formatter = ChalkFormatter(logging.DEBUG_LOG_FORMAT, color=False)
    assert formatter.format(_record(std_logging.DEBUG)) == "[DEBUG] [buckify.test:7] hi there"


def test_setup_logging_uses_env_and_replaces_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    root = std_logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setenv(logging.ENV_LOG_LEVEL, "info")

    setup_logging(color=False)

    assert root.level == std_logging.INFO
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, std_logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert isinstance(handler.formatter, ChalkFormatter)
    assert handler.formatter.color is False


def test_setup_logging_defaults_to_critical(monkeypatch: pytest.MonkeyPatch) -> None:
    root = std_logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)

    setup_logging()

    assert root.level == std_logging.CRITICAL
