"""mittwald_providers.config.env
=============================

Environment variable names and helpers for the adapter configuration.

Design Notes
------------
- ``ENV_FIELD_MAP`` maps configuration keys to the ``MITTWALD_*`` variable
  suffix that overrides them.
- Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

ENV_PREFIX = "MITTWALD"

# config key -> env var suffix
ENV_FIELD_MAP: Dict[str, str] = {
    "api_key": "API_KEY_NAME",  # pragma: allowlist secret - env suffix name, not a secret
    "host": "HOST",
    "moderation": "MODERATION",
    "system_message": "SYSTEM_MESSAGE",
}

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme' or 'example', or starts
    with 'test_'. Case-insensitive.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def parse_bool(value: Any, default: bool = False) -> bool:
    """Interpret common truthy/falsey spellings; unknown values yield ``default``."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    v = str(value).strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return default


def env_overrides(prefix: str = ENV_PREFIX) -> Dict[str, Any]:
    """Collect configuration values set through ``<PREFIX>_<SUFFIX>`` variables."""
    out: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is None:
            continue
        out[field] = parse_bool(val, default=True) if field == "moderation" else val
    return out


def env_var_for_identifier(identifier: str) -> str:
    """Return the environment variable holding the secret named ``identifier``."""
    return identifier.strip().upper().replace("-", "_").replace(".", "_")


__all__ = [
    "ENV_PREFIX",
    "ENV_FIELD_MAP",
    "is_placeholder",
    "parse_bool",
    "env_overrides",
    "env_var_for_identifier",
]
