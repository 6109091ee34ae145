"""
mittwald AI hosting provider package.

Exports:
- MittwaldProvider: adapter exposing chat, embeddings and model catalog
  operations against the mittwald OpenAI-compatible endpoint
- ModelCatalogResolver, PayloadBuilder, OpenAITransport, RateLimitProbe:
  the composed parts, for hosts wiring their own collaborators
"""

from .catalog import ModelCatalogResolver
from .client import MittwaldProvider
from .payload import PayloadBuilder
from .rate_limit import LoggingNotifier, RateLimitProbe
from .transport import OpenAITransport

__all__ = [
    "LoggingNotifier",
    "MittwaldProvider",
    "ModelCatalogResolver",
    "OpenAITransport",
    "PayloadBuilder",
    "RateLimitProbe",
]
