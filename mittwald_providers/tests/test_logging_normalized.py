"""Focused tests for mittwald_providers.base.logging.

Covers:
- _parse_level string parsing
- child logger naming under the shared base logger
- normalized_log_event emits required keys and omits an empty error_code
- JsonFormatter hoists structured message keys
- configure_logger adjusts the shared level at runtime
"""
from __future__ import annotations

import json
import logging

from mittwald_providers.base.log_support import JsonFormatter, LogContext
from mittwald_providers.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from mittwald_providers.base.models import TokenUsage


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_child_loggers_hang_off_the_base_logger():
    logger = get_logger("mittwald.catalog")
    assert logger.name == f"{BASE_LOGGER_NAME}.mittwald.catalog"  # nosec B101
    assert get_logger(f"{BASE_LOGGER_NAME}.x").name == f"{BASE_LOGGER_NAME}.x"  # nosec B101
    assert get_logger().propagate is False  # nosec B101


def test_normalized_log_event_emits_required_keys(log_events):
    logger = get_logger("tests.logging")
    normalized_log_event(
        logger,
        "stream.end",
        LogContext(model="gpt-oss-120b", operation="chat"),
        phase="finalize",
        error_code="rate_limit",
        emitted=True,
        tokens=TokenUsage(input=3, output=2, total=5),
        chunks=4,
    )
    payload = log_events[-1]
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload  # nosec B101
    assert payload["provider"] == "mittwald" and payload["model"] == "gpt-oss-120b"  # nosec B101
    assert payload["tokens"]["total"] == 5 and payload["chunks"] == 4  # nosec B101


def test_error_code_is_omitted_when_absent(log_events):
    normalized_log_event(get_logger("tests.logging"), "chat.start", phase="start", phase_extra=None)
    payload = log_events[-1]
    assert "error_code" not in payload  # nosec B101
    assert payload["attempt"] is None and payload["tokens"] is None  # nosec B101
    assert "phase_extra" not in payload  # nosec B101


def test_log_event_level_and_none_pruning(log_events):
    log_event(get_logger("tests.logging"), "warned", level=logging.WARNING, keep=1, dropped=None)
    payload = log_events[-1]
    assert payload["_level"] == logging.WARNING  # nosec B101
    assert payload["keep"] == 1 and "dropped" not in payload  # nosec B101


def test_json_formatter_hoists_message_keys():
    record = logging.LogRecord("mittwald_providers.x", logging.INFO, __file__, 1, json.dumps({"event": "e", "n": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e" and out["n"] == 1  # nosec B101
    assert "msg" not in out and out["level"] == "INFO"  # nosec B101


def test_json_formatter_keeps_plain_messages():
    record = logging.LogRecord("mittwald_providers.x", logging.WARNING, __file__, 1, "plain text", None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["msg"] == "plain text"  # nosec B101


def test_configure_logger_sets_level_by_name():
    base = get_logger()
    previous = base.level
    try:
        assert configure_logger("debug") is base  # nosec B101
        assert base.level == logging.DEBUG  # nosec B101
        assert all(h.level == logging.DEBUG for h in base.handlers)  # nosec B101
        configure_logger("nonsense")
        assert base.level == logging.DEBUG  # nosec B101
        configure_logger(logging.ERROR)
        assert base.level == logging.ERROR  # nosec B101
    finally:
        configure_logger(previous)
