"""Unified configuration layer for the mittwald adapter.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``PROVIDERS_CONFIG_FILE``
    3. Environment variables (``MITTWALD_API_KEY_NAME``, ``MITTWALD_HOST``,
       ``MITTWALD_MODERATION``, ``MITTWALD_SYSTEM_MESSAGE``)
    4. In-code overrides passed to the helper

External Config File
--------------------
JSON is attempted first, then YAML. Only the ``mittwald`` section is read::

    mittwald:
      api_key: mittwald_api_key     # credential identifier
      host: llm.aihosting.mittwald.de/v1
      moderation: true
      system_message: "You are helpful."
      options:
        temperature: 0.2

Public API
----------
* get_provider_config(provider: str = "mittwald", overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import DEFAULT_API_KEY_IDENTIFIER, PROVIDER_NAME
from .env import env_overrides, parse_bool

CONFIG_FILE_ENV = "PROVIDERS_CONFIG_FILE"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    PROVIDER_NAME: {
        "api_key": DEFAULT_API_KEY_IDENTIFIER,
        "host": None,
        "moderation": True,
        "system_message": None,
        "options": {},
    },
}

_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the parsed external config file so it is re-read on next access."""
    global _FILE_CACHE
    _FILE_CACHE = None


def get_provider_config(provider: str = PROVIDER_NAME, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``options`` mappings are merged key by key rather than replaced.

    Raises:
        yaml.YAMLError: When the external file is neither JSON nor valid YAML.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {k: (dict(v) if isinstance(v, dict) else v) for k, v in DEFAULTS.get(name, {}).items()}

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        _merge(cfg, file_cfg)

    _merge(cfg, env_overrides(name.upper()))

    if overrides:
        _merge(cfg, {k: v for k, v in overrides.items() if v is not None})

    if "moderation" in cfg:
        cfg["moderation"] = parse_bool(cfg["moderation"], default=True)
    return cfg


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key == "options" and isinstance(value, dict) and isinstance(target.get(key), dict):
            target[key] = {**target[key], **value}
        else:
            target[key] = value


__all__ = [
    "CONFIG_FILE_ENV",
    "DEFAULTS",
    "get_provider_config",
    "reset_config_cache",
]
