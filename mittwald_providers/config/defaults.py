"""mittwald_providers.config.defaults
==================================

Central place for small, stable default values used across the
mittwald_providers package. These defaults can be overridden via environment
variables or external configuration.

This module avoids importing from other packages to prevent circular
dependencies. Only plain constants live here.
"""

from __future__ import annotations

PROVIDER_NAME = "mittwald"

# ---- Endpoint ----
# Used when no host override is configured; a scheme is added when missing.
DEFAULT_ENDPOINT = "llm.aihosting.mittwald.de/v1"
DEFAULT_SCHEME = "https://"

# ---- Credentials ----
# Identifier handed to the credential resolver; it is not the secret itself.
DEFAULT_API_KEY_IDENTIFIER = "mittwald_api_key"
API_KEY_CONFIG_NAME = "api_key"  # pragma: allowlist secret - config field name

# ---- Models ----
DEFAULT_CHAT_MODEL = "Mistral-Small-3.2-24B-Instruct"
DEFAULT_EMBEDDINGS_MODEL = "Qwen3-Embedding-8B"
QWEN3_EMBEDDING_8B_VECTOR_SIZE = 4096

# Owners whose models are never offered to hosts.
INTERNAL_MODEL_OWNERS = ("openai-dev",)

# ---- Reasoning ----
REASONING_EFFORT_VALUES = ("minimal", "low", "medium", "high")
DEFAULT_REASONING_EFFORT = "medium"

# ---- Rate limit probe ----
RATE_LIMIT_PROBE_MODEL = DEFAULT_CHAT_MODEL
RATE_LIMIT_PROBE_PROMPT = "Answer with Hello"
RATE_LIMIT_HEADER = "x-ratelimit-limit-requests"
# A request limit at or below this value indicates a free or trial tier.
RATE_LIMIT_WARN_THRESHOLD = 200
INSUFFICIENT_QUOTA_CODE = "insufficient_quota"
TERMS_OF_USE_URL = "https://developer.mittwald.de/docs/v2/platform/aihosting/access-and-usage/terms-of-use/"
HTTP_TIMEOUT_SECONDS = 30.0

# ---- Messages ----
INVALID_CREDENTIALS_MESSAGE = (
    "The selected API key is not working. Please double-check the correct API key "
    "was entered and that it has credit(s) available."
)
SETUP_FAILURE_PREFIX = "Failed to initialize mittwald client: "

# ---- CLI ----
CLI_DEFAULT_PROMPT = "Say hello."
