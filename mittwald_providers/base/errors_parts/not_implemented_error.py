"""Exception for operation types the adapter does not implement."""
from __future__ import annotations

from dataclasses import dataclass, field

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class NotImplementedOperationError(ProviderError, NotImplementedError):
    """Raised synchronously for operations without an implementation.

    Subclasses :class:`NotImplementedError` as well so generic host code that
    already handles the builtin keeps working.
    """

    code: ErrorCode = field(default=ErrorCode.NOT_IMPLEMENTED, init=False)
    message: str = "not implemented"
    provider: str = "mittwald"


__all__ = ["NotImplementedOperationError"]
