"""Rate limit probe run after setup.

Free or trial accounts on mittwald AI hosting get a very small request
budget. :class:`RateLimitProbe` sends one tiny chat completion with plain
``httpx`` (HTTP errors are inspected, not raised) and reports a warning when
the account is out of quota or its request limit is at or below
``RATE_LIMIT_WARN_THRESHOLD``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..config.defaults import (
    INSUFFICIENT_QUOTA_CODE,
    PROVIDER_NAME,
    RATE_LIMIT_HEADER,
    RATE_LIMIT_PROBE_MODEL,
    RATE_LIMIT_PROBE_PROMPT,
    RATE_LIMIT_WARN_THRESHOLD,
    TERMS_OF_USE_URL,
)
from .endpoint import resolve_endpoint

QUOTA_WARNING = (
    "You have exceeded your mittwald AI usage quota. This will limit almost all the ways "
    f"you can use AI. You can read more here {TERMS_OF_USE_URL}"
)

_logger = get_logger("mittwald.rate_limit")


class LoggingNotifier:
    """Notifier writing user-facing warnings to the structured log."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("mittwald.notifier")

    def warning(self, message: str) -> None:
        self._logger.warning(message)


def _request_limit(response: httpx.Response) -> Optional[int]:
    value = response.headers.get(RATE_LIMIT_HEADER)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _error_code(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    error = body.get("error") if isinstance(body, dict) else None
    code = error.get("code") if isinstance(error, dict) else None
    return code if isinstance(code, str) else None


class RateLimitProbe:
    """Detect quota-limited accounts with a single request.

    Args:
        host: Optional host override; same semantics as the adapter's.
        client: Optional ``httpx.Client``; defaults to the shared pool.
    """

    def __init__(self, host: Optional[str] = None, client: Optional[httpx.Client] = None) -> None:
        self._endpoint = resolve_endpoint(host) + "/chat/completions"
        self._client = client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def _payload(self) -> Dict[str, Any]:
        return {
            "model": RATE_LIMIT_PROBE_MODEL,
            "messages": [{"role": "user", "content": RATE_LIMIT_PROBE_PROMPT}],
        }

    def check(self, api_key: str) -> Optional[str]:
        """Run the probe and return the warning text, or ``None`` when all is well.

        Transport failures (DNS, connection refused, timeouts) propagate as
        ``httpx`` exceptions; HTTP error statuses do not.
        """
        client = self._client or get_httpx_client("rate_limit_probe")
        response = client.post(
            self._endpoint,
            headers={"Authorization": f"Bearer {api_key}"},
            json=self._payload(),
        )
        code = _error_code(response)
        limit = _request_limit(response)
        limited = code == INSUFFICIENT_QUOTA_CODE or (limit is not None and limit <= RATE_LIMIT_WARN_THRESHOLD)
        normalized_log_event(
            _logger,
            "setup.rate_limit.warning" if limited else "setup.rate_limit.ok",
            LogContext(provider=PROVIDER_NAME, model=RATE_LIMIT_PROBE_MODEL),
            phase="setup",
            error_code=code,
            emitted=limited,
            level=logging.WARNING if limited else logging.INFO,
            status=response.status_code,
            request_limit=limit,
        )
        return QUOTA_WARNING if limited else None


__all__ = ["LoggingNotifier", "QUOTA_WARNING", "RateLimitProbe"]
