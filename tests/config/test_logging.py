# topmark:header:start
#
#   project      : UrlRel
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging: TRACE level, env level resolution and logger class."""

from __future__ import annotations

import io
import logging
import sys

import pytest

from tests.conftest import parametrize
from urlrel.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    UrlrelLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)


@parametrize(
    "raw, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("loud", None),
    ],
)
def test_parse_log_level(raw: str, expected: int | None) -> None:
    """Names are case-insensitive; digits are taken as numbers."""
    assert parse_log_level(raw) == expected


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The level comes from URLREL_LOG_LEVEL, or None when unset."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")
    assert resolve_env_log_level() == logging.INFO


def test_get_logger_returns_urlrel_logger() -> None:
    """Loggers created after import support `.trace()`."""
    logger = get_logger("urlrel.tests.logging")
    assert isinstance(logger, UrlrelLogger)


def test_trace_is_emitted(caplog: pytest.LogCaptureFixture) -> None:
    """TRACE records carry the TRACE level name."""
    logger = get_logger("urlrel.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="urlrel.tests.trace"):
        logger.trace("tracing %s", "value")
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert caplog.records[0].getMessage() == "tracing value"


def test_chalk_formatter_keeps_message() -> None:
    """Coloring wraps but does not alter the formatted message."""
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom %d", (1,), None)
    assert "[ERROR] boom 1" in ChalkFormatter("[%(levelname)s] %(message)s").format(record)


def test_setup_logging_writes_to_stderr_by_default() -> None:
    """Diagnostics never share stdout with program output."""
    try:
        setup_logging(level=logging.INFO)
        (handler,) = logging.getLogger().handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_setup_logging_uses_given_stream() -> None:
    """Records go to the stream passed in, formatted with their level."""
    buffer = io.StringIO()
    try:
        setup_logging(level=logging.INFO, stream=buffer)
        get_logger("urlrel.tests.stream").warning("careful %s", "now")
    finally:
        setup_logging(level=TRACE_LEVEL)
    assert "[WARNING] careful now" in buffer.getvalue()
