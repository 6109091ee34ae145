"""Rate limit exception (request too large / too many requests)."""
from __future__ import annotations

from dataclasses import dataclass, field

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class RateLimitError(ProviderError):
    """The vendor throttled the request; the host should try again later."""

    code: ErrorCode = field(default=ErrorCode.RATE_LIMIT, init=False)
    message: str = ""
    provider: str = "mittwald"


__all__ = ["RateLimitError"]
