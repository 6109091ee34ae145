"""Setup failure exception raised while initializing the transport client."""
from __future__ import annotations

from dataclasses import dataclass, field

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class SetupFailureError(ProviderError):
    """Endpoint or credential initialization failed; configuration needs checking.

    The original cause is kept both in ``raw`` and as ``__cause__`` when the
    error is raised with ``from``.
    """

    code: ErrorCode = field(default=ErrorCode.SETUP_FAILURE, init=False)
    message: str = ""
    provider: str = "mittwald"


__all__ = ["SetupFailureError"]
