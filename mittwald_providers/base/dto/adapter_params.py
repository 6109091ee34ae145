"""Typed parameter object for adapter initialization.

Purpose
-------
Capture the settings the mittwald adapter is constructed from in one
validated object instead of a long argument list. Values normally come from
:func:`mittwald_providers.config.get_provider_config`.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()`` convenience.

Failure modes & side effects
----------------------------
- Pure data container: no I/O. ``pydantic.ValidationError`` is raised for
  inputs of the wrong type.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ...config.defaults import DEFAULT_API_KEY_IDENTIFIER


class AdapterParams(BaseModel):
    """Adapter initialization parameters.

    Attributes
    ----------
    api_key:
        Identifier of the credential, resolved through the credential
        resolver (not the secret itself).
    host:
        Optional endpoint override, with or without scheme. Empty means the
        default mittwald endpoint.
    moderation:
        Whether moderation is enabled for this installation.
    system_message:
        Optional system role text prepended to chat conversations.
    options:
        Base payload options merged into every request (e.g. ``temperature``).
    """

    api_key: str = DEFAULT_API_KEY_IDENTIFIER
    host: Optional[str] = None
    moderation: bool = True
    system_message: Optional[str] = None
    options: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("host", "system_message", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        """Treat blank strings as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


__all__ = ["AdapterParams"]
