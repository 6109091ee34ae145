"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

The mittwald endpoint does not expose machine-readable error kinds through the
SDK exceptions we get back, so classification relies on the vendor's message
wording. Matching is case-sensitive substring search, mirroring the vendor's
conventions.

Known fragility: if the vendor rewords these messages, classification silently
degrades to ``UNCLASSIFIED`` and the original exception is re-raised. The unit
tests pin the exact marker strings so such a change is at least visible.
"""
from __future__ import annotations

from typing import NoReturn, Optional, Tuple

from .error_code import ErrorCode
from .provider_error import ProviderError
from .quota_exceeded_error import QuotaExceededError
from .rate_limit_error import RateLimitError


RATE_LIMIT_MARKERS: Tuple[str, ...] = (
    "Request too large",
    "Too Many Requests",
)

QUOTA_MARKERS: Tuple[str, ...] = ("exceeded your current quota",)


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into ``RATE_LIMIT``, ``QUOTA_EXCEEDED`` or ``UNCLASSIFIED``.

    Precedence:
        1. ProviderError passthrough.
        2. Rate limit markers.
        3. Quota markers.
        4. ``UNCLASSIFIED`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    msg = str(exc)
    if any(marker in msg for marker in RATE_LIMIT_MARKERS):
        return ErrorCode.RATE_LIMIT
    if any(marker in msg for marker in QUOTA_MARKERS):
        return ErrorCode.QUOTA_EXCEEDED
    return ErrorCode.UNCLASSIFIED


def raise_classified(exc: BaseException, *, provider: str, model: Optional[str] = None) -> NoReturn:
    """Raise the classified variant of ``exc`` or re-raise ``exc`` itself.

    Parameters:
        exc: The exception caught around a transport call.
        provider: Provider key recorded on the raised error.
        model: Model id the call targeted, when known.

    Raises:
        RateLimitError: When a rate limit marker is present.
        QuotaExceededError: When a quota marker is present.
        BaseException: ``exc`` unchanged for anything else.
    """
    code = classify_exception(exc)
    if isinstance(exc, ProviderError) or code is ErrorCode.UNCLASSIFIED:
        raise exc
    if code is ErrorCode.RATE_LIMIT:
        raise RateLimitError(message=str(exc), provider=provider, model=model, raw=exc) from exc
    raise QuotaExceededError(message=str(exc), provider=provider, model=model, raw=exc) from exc


__all__ = [
    "classify_exception",
    "raise_classified",
    "RATE_LIMIT_MARKERS",
    "QUOTA_MARKERS",
]
