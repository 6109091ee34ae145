"""Token usage extraction helpers.

This module centralizes best-effort extraction of token accounting from raw
vendor responses and stream chunks. The vendor reports OpenAI-style fields
which map onto :class:`TokenUsage` as follows::

    prompt_tokens                               -> input
    completion_tokens                           -> output
    total_tokens                                -> total
    completion_tokens_details.reasoning_tokens  -> reasoning
    prompt_tokens_details.cached_tokens         -> cached

Some deployments report ``cached_tokens`` under
``completion_tokens_details`` instead; that location is consulted when the
prompt-side detail is absent.

Both mapping-style payloads (dicts) and SDK objects with attributes are
accepted. Missing or invalid values degrade to ``None`` per field; the helper
never raises.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..models import TokenUsage

_FIELD_MAP = (
    ("input", "prompt_tokens"),
    ("output", "completion_tokens"),
    ("total", "total_tokens"),
)


def _get(obj: Any, name: str) -> Any:
    """Read ``name`` from a mapping or attribute object, returning ``None`` when absent."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _coerce_int(value: Any) -> Optional[int]:
    """Coerce an arbitrary value to a non-negative ``int`` or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError):
        return None
    return iv if iv >= 0 else None


def extract_usage_fields(usage_obj: Any) -> Dict[str, Optional[int]]:
    """Map a vendor ``usage`` object to canonical field names.

    Returns:
        dict: Keys ``input``, ``output``, ``total``, ``reasoning`` and
        ``cached``; a value is ``None`` when the vendor did not report it.
    """
    fields: Dict[str, Optional[int]] = {
        name: _coerce_int(_get(usage_obj, vendor_name)) for name, vendor_name in _FIELD_MAP
    }
    completion_details = _get(usage_obj, "completion_tokens_details")
    prompt_details = _get(usage_obj, "prompt_tokens_details")
    fields["reasoning"] = _coerce_int(_get(completion_details, "reasoning_tokens"))
    cached = _coerce_int(_get(prompt_details, "cached_tokens"))
    if cached is None:
        cached = _coerce_int(_get(completion_details, "cached_tokens"))
    fields["cached"] = cached
    return fields


def extract_token_usage(raw_response: Any) -> Optional[TokenUsage]:
    """Extract :class:`TokenUsage` from a raw response or chunk.

    Args:
        raw_response: Vendor response/chunk object or mapping carrying ``usage``.

    Returns:
        TokenUsage | None: ``None`` when the object carries no usage at all;
        otherwise a usage record with unreported fields set to ``0``.
    """
    usage_obj = _get(raw_response, "usage")
    if usage_obj is None:
        return None
    fields = extract_usage_fields(usage_obj)
    return TokenUsage(**{k: v or 0 for k, v in fields.items()})


__all__ = [
    "extract_token_usage",
    "extract_usage_fields",
]
