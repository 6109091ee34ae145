"""
mittwald model catalog resolution.

The vendor's listing does not say which model serves which purpose, so the
catalog is derived from model id naming conventions:

- models owned by ``openai-dev`` are internal and never offered;
- each operation type has an allowlist of id prefixes, and an operation
  without one matches nothing;
- requested capabilities narrow the list further and are ANDed; audio and
  video are not offered by any model.

Results are de-duplicated, sorted ascending and cached per
(operation type, capability set). Empty results are not cached, so a later
call fetches again. Transport failures propagate unchanged.
"""

from __future__ import annotations

import base64
import hashlib
import json
import re
from typing import Dict, Iterable, List, Optional, Pattern, Union

from ..base.interfaces import CacheStore, ChatTransport
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ModelCapability, ModelDescriptor, OperationType
from ..config.defaults import INTERNAL_MODEL_OWNERS, PROVIDER_NAME

CACHE_KEY_PREFIX = "mittwald_models_"

OPERATION_PATTERNS: Dict[OperationType, Pattern[str]] = {
    OperationType.CHAT: re.compile(r"^(gpt-oss|mistral-small-|qwen3-coder-)", re.IGNORECASE),
    OperationType.EMBEDDINGS: re.compile(r"^(qwen3-embedding)", re.IGNORECASE),
    OperationType.MODERATION: re.compile(r"^(text-moderation|omni-moderation)", re.IGNORECASE),
}

CAPABILITY_PATTERNS: Dict[ModelCapability, Pattern[str]] = {
    ModelCapability.CHAT_WITH_IMAGE_VISION: re.compile(r"^(mistral-small-)", re.IGNORECASE),
    ModelCapability.CHAT_JSON_OUTPUT: re.compile(r"^(gpt-oss-|mistral-small-|qwen3-coder-)", re.IGNORECASE),
}

UNSUPPORTED_CAPABILITIES = frozenset({ModelCapability.CHAT_WITH_AUDIO, ModelCapability.CHAT_WITH_VIDEO})

_logger = get_logger("mittwald.catalog")


def known_capabilities(capabilities: Iterable[Union[ModelCapability, str]]) -> List[ModelCapability]:
    """Return the recognised capabilities, sorted and de-duplicated.

    Unrecognised tags are dropped, so they never narrow a catalog.
    """
    values = {c.value if isinstance(c, ModelCapability) else str(c) for c in capabilities}
    return [c for c in sorted(ModelCapability, key=lambda c: c.value) if c.value in values]


def canonical_capabilities(capabilities: Iterable[Union[ModelCapability, str]]) -> List[str]:
    """Return recognised capability values sorted and de-duplicated."""
    return [c.value for c in known_capabilities(capabilities)]


def cache_key(operation_type: Union[OperationType, str], capabilities: Iterable[Union[ModelCapability, str]]) -> str:
    """Return ``mittwald_models_<operation>_<hash>`` for a lookup.

    The hash is the unpadded URL-safe base64 of the SHA-256 of the JSON
    encoded canonical capability list, so argument order does not matter.
    """
    op = OperationType(operation_type).value
    encoded = json.dumps(canonical_capabilities(capabilities), separators=(",", ":")).encode("utf-8")
    digest = base64.urlsafe_b64encode(hashlib.sha256(encoded).digest()).decode("ascii").rstrip("=")
    return f"{CACHE_KEY_PREFIX}{op}_{digest}"


def model_matches(
    model_id: str,
    operation_type: OperationType,
    capabilities: Iterable[ModelCapability],
) -> bool:
    """Return True when ``model_id`` qualifies for the operation and every capability."""
    pattern = OPERATION_PATTERNS.get(operation_type)
    if pattern is None:
        return False
    candidate = model_id.strip() if operation_type is OperationType.EMBEDDINGS else model_id
    if not pattern.search(candidate):
        return False
    for cap in capabilities:
        if cap in UNSUPPORTED_CAPABILITIES:
            return False
        cap_pattern = CAPABILITY_PATTERNS.get(cap)
        if cap_pattern is not None and not cap_pattern.search(model_id):
            return False
    return True


class ModelCatalogResolver:
    """Resolve and cache model ids per operation type and capability set.

    Args:
        transport: Source of the raw vendor listing.
        cache: Store for resolved catalogs.
    """

    def __init__(self, transport: ChatTransport, cache: CacheStore) -> None:
        self._transport = transport
        self._cache = cache

    def resolve(
        self,
        operation_type: Union[OperationType, str],
        capabilities: Iterable[Union[ModelCapability, str]] = (),
    ) -> List[str]:
        """Return the sorted, de-duplicated model ids for the request.

        Raises:
            ValueError: For an unknown operation type.
            Exception: Whatever the transport raises while listing models.
        """
        op = OperationType(operation_type)
        caps = known_capabilities(capabilities)
        key = cache_key(op, caps)
        ctx = LogContext(provider=PROVIDER_NAME, operation=op.value)

        cached: Optional[object] = self._cache.get(key)
        if cached:
            normalized_log_event(_logger, "models.list.cache_hit", ctx, phase="models", emitted=True, count=len(cached))
            return list(cached)

        listing: List[ModelDescriptor] = self._transport.list_models()
        models = sorted(
            {
                m.id
                for m in listing
                if m.owned_by not in INTERNAL_MODEL_OWNERS and model_matches(m.id, op, caps)
            }
        )
        if models:
            self._cache.set(key, models)
        normalized_log_event(
            _logger,
            "models.list.ok",
            ctx,
            phase="models",
            emitted=bool(models),
            listed=len(listing),
            count=len(models),
            capabilities=[c.value for c in caps] or None,
        )
        return models


__all__ = [
    "CACHE_KEY_PREFIX",
    "CAPABILITY_PATTERNS",
    "OPERATION_PATTERNS",
    "UNSUPPORTED_CAPABILITIES",
    "ModelCatalogResolver",
    "cache_key",
    "canonical_capabilities",
    "known_capabilities",
    "model_matches",
]
