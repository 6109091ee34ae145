"""Token usage helpers package."""

from .extraction import extract_token_usage, extract_usage_fields

__all__ = [
    "extract_token_usage",
    "extract_usage_fields",
]
