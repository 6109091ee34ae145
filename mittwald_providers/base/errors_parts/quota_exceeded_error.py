"""Quota exhaustion exception."""
from __future__ import annotations

from dataclasses import dataclass, field

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class QuotaExceededError(ProviderError):
    """The account ran out of quota; the host should ask for credits or an upgrade."""

    code: ErrorCode = field(default=ErrorCode.QUOTA_EXCEEDED, init=False)
    message: str = ""
    provider: str = "mittwald"


__all__ = ["QuotaExceededError"]
