"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``mittwald_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts import (
    ErrorCode,
    NotImplementedOperationError,
    ProviderError,
    QuotaExceededError,
    RateLimitError,
    SetupFailureError,
    classify_exception,
    raise_classified,
)

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
