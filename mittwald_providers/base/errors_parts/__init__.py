"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `mittwald_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .rate_limit_error import RateLimitError
from .quota_exceeded_error import QuotaExceededError
from .setup_failure_error import SetupFailureError
from .not_implemented_error import NotImplementedOperationError
from .classification import classify_exception, raise_classified

__all__ = [
    "ErrorCode",
    "ProviderError",
    "RateLimitError",
    "QuotaExceededError",
    "SetupFailureError",
    "NotImplementedOperationError",
    "classify_exception",
    "raise_classified",
]
