"""
Keys Repository

Purpose
- Turn a credential identifier (the ``api_key`` configuration value) into the
  secret it names.
- Prefer an explicit mapping supplied by the host, then the environment.
- Read-only: the repository never writes secrets anywhere.

Usage
- repo = KeysRepository()
- key = repo.resolve("mittwald_api_key")   # reads MITTWALD_API_KEY
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ...config.env import env_var_for_identifier, is_placeholder


@dataclass
class KeyResolution:
    identifier: str
    api_key: Optional[str]
    source: str  # "mapping", "env", "none"
    extra: Dict[str, Any] = field(default_factory=dict)


class KeysRepository:
    """
    Resolve credentials with a strict priority order:

    1) Explicit mapping passed at construction (host-managed secrets)
    2) Environment variable named after the identifier, upper-cased
    3) None

    Placeholder-looking values (see :func:`is_placeholder`) are ignored.
    """

    def __init__(self, secrets: Optional[Mapping[str, str]] = None) -> None:
        self._secrets: Dict[str, str] = dict(secrets or {})

    def resolve(self, identifier: str) -> Optional[str]:
        return self.get_resolution(identifier).api_key

    def get_resolution(self, identifier: str) -> KeyResolution:
        ident = (identifier or "").strip()
        if not ident:
            return KeyResolution(identifier=ident, api_key=None, source="none")

        val = self._secrets.get(ident)
        if val and not is_placeholder(val):
            return KeyResolution(identifier=ident, api_key=val, source="mapping")

        env_var = env_var_for_identifier(ident)
        val = os.getenv(env_var)
        if val and not is_placeholder(val):
            return KeyResolution(identifier=ident, api_key=val, source="env", extra={"env_var": env_var})

        return KeyResolution(identifier=ident, api_key=None, source="none", extra={"env_var": env_var})


__all__ = ["KeyResolution", "KeysRepository"]
