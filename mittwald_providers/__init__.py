"""mittwald_providers package

Adapter for the mittwald AI hosting LLM API (an OpenAI-compatible endpoint)
behind a uniform, operation-typed interface.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode` and the
      classified variants
    - Factory: :func:`create`
    - Adapter: :class:`MittwaldProvider`
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .base.dto import AdapterParams
from .base.errors import (
    ErrorCode,
    NotImplementedOperationError,
    ProviderError,
    QuotaExceededError,
    RateLimitError,
    SetupFailureError,
)
from .base.models import ChatInput, ChatMessage, ChatOutput, EmbeddingsInput, ModelCapability, OperationType
from .config import get_provider_config
from .config.defaults import PROVIDER_NAME
from .mittwald import MittwaldProvider

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AdapterParams",
    "ChatInput",
    "ChatMessage",
    "ChatOutput",
    "EmbeddingsInput",
    "ErrorCode",
    "MittwaldProvider",
    "ModelCapability",
    "NotImplementedOperationError",
    "OperationType",
    "ProviderError",
    "QuotaExceededError",
    "RateLimitError",
    "SetupFailureError",
    "create",
]


def create(*, params: Optional[AdapterParams] = None, **overrides: Any) -> MittwaldProvider:
    """Instantiate a :class:`MittwaldProvider`.

    Parameters
    ----------
    params:
        Fully built adapter parameters. When omitted they are loaded through
        :func:`get_provider_config` with ``overrides`` applied last.
    **overrides:
        Configuration overrides (``host``, ``api_key``, ``moderation``,
        ``system_message``, ``options``) or collaborator keyword arguments
        accepted by :class:`MittwaldProvider` (``credentials``, ``cache``,
        ``notifier``, ``transport_factory``, ``rate_limit_probe``).
    """
    collaborators: Dict[str, Any] = {
        k: overrides.pop(k)
        for k in ("credentials", "cache", "notifier", "transport_factory", "rate_limit_probe")
        if k in overrides
    }
    if params is None:
        params = AdapterParams(**get_provider_config(PROVIDER_NAME, overrides))
    return MittwaldProvider(params, **collaborators)
