"""Structured logging utilities for the mittwald adapter.

Rationale:
- Central place to configure consistent JSON logging.
- Avoid ad-hoc logger setup across modules.

``normalized_log_event`` wraps ``log_event`` and injects the canonical keys
``structured`` (bool), ``phase`` (str), ``attempt`` (int|None),
``error_code`` (str|None), ``emitted`` (bool|None) and ``tokens``
(mapping|None) so events can be filtered uniformly.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, Mapping, Optional, Union

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "mittwald_providers"
LOG_LEVEL_ENV = "MITTWALD_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_mittwald_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_mittwald_console_handler"


def _parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a logging level name case-insensitively, falling back to ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(level: int) -> logging.Logger:
    """Initialize and return the shared base logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger

    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(JsonFormatter())
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the configured base logger.

    Child loggers carry no handlers of their own and propagate to the base
    logger, so configuration happens in exactly one place.
    """
    base_logger = _ensure_base_logger(level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(level: Union[int, str]) -> logging.Logger:
    """Set the level of the shared logger and its console handler at runtime.

    Level names are matched case-insensitively; an unknown name keeps the
    current level.
    """
    logger = _ensure_base_logger(level=logging.INFO)
    resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
    logger.setLevel(resolved)
    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            handler.setLevel(resolved)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: Optional[LogContext] = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON message.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally obtained from ``get_logger``).
    event: str
        Event name (e.g. ``stream.start``).
    ctx: LogContext | None
        Provider/model/operation context; merged shallowly.
    level: int
        Logging level used for the record.
    keep_none: bool
        When ``True``, keys whose value is ``None`` are preserved as ``null``.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload.update(ctx.to_dict())
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "structured",
    "phase",
    "attempt",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce token usage info (None, mapping, or object with ``to_dict``) to JSON-friendly form."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    to_dict = getattr(tokens, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: Optional[LogContext] = None,
    *,
    phase: str,
    attempt: Optional[int] = None,
    error_code: Optional[str] = None,
    emitted: Optional[bool] = None,
    tokens: Any = None,
    structured: bool = True,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a structured log event guaranteeing the normalized key set.

    ``error_code`` is the one required key omitted when ``None``, so "no
    error" reads naturally. Extra fields with ``None`` values are dropped.
    """
    base_fields: Dict[str, Any] = {
        "structured": structured,
        "phase": phase,
        "attempt": attempt,
        "error_code": error_code,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is None:
        base_fields.pop("error_code")
    for k, v in extra_fields.items():
        if v is not None:
            base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
