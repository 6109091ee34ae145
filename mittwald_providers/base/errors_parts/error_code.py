"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the adapter, the error classifier
and structured logging. Values are lowercase snake_case and are considered a
stable public contract for logging and host-side handling.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories.

    ``RATE_LIMIT`` means "try again later", ``QUOTA_EXCEEDED`` means "add
    credits or upgrade", ``SETUP_FAILURE`` means "check configuration" and
    ``NOT_IMPLEMENTED`` means "feature unavailable". ``UNCLASSIFIED`` marks a
    transport error that is passed through untouched.
    """

    RATE_LIMIT = "rate_limit"
    QUOTA_EXCEEDED = "quota_exceeded"
    SETUP_FAILURE = "setup_failure"
    NOT_IMPLEMENTED = "not_implemented"
    UNCLASSIFIED = "unclassified"


__all__ = ["ErrorCode"]
