# topmark:header:start
#
#   project      : LitDoc
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-aware LitDoc logger and env-driven log levels."""

from __future__ import annotations

import logging

import pytest

from litdoc.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    LitdocLogger,
    get_logger,
    resolve_env_log_level,
)
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("20", logging.INFO),
        ("chatty", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv("LITDOC_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


def test_unset_env_log_level() -> None:
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("litdoc.tests.trace")
    assert isinstance(logger, LitdocLogger)
    with caplog.at_level(TRACE_LEVEL, logger="litdoc.tests.trace"):
        logger.trace("fine-grained %d", 42)
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "fine-grained 42")]


def test_chalk_formatter_keeps_message() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "careful" in ChalkFormatter("%(message)s").format(record)
