"""
Providers Base Package

Exports provider-agnostic contracts, value types, the error taxonomy and the
provider factory shared by the concrete provider packages.

- Interfaces: ``AiProvider`` / ``ModelListingProvider`` protocols
- Models: ``ModelId``, ``AiRequest``, ``AiResponse``, ``TokenUsage``
- Catalog: ``AiModel`` capability and narrowing
- Streaming: SSE framing, ``StreamDecoder``, accumulation
- Factory: creation of provider clients by canonical name
"""

from .catalog import AiModel, CatalogModel, model_catalog, narrow_model
from .errors import (
    ApiError,
    ErrorCode,
    InvalidModelError,
    LatchError,
    ParseError,
    ProviderError,
    TransportError,
    normalize_exception,
)
from .factory import ProviderFactory, create_provider
from .http import new_async_client
from .http_provider import HttpProvider
from .interfaces import AiProvider, ModelListingProvider
from .models import AiRequest, AiResponse, ModelId, TokenUsage
from .streaming import StreamDecoder, accumulate_responses
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "ModelId",
    "AiRequest",
    "AiResponse",
    "TokenUsage",
    # Catalog
    "AiModel",
    "CatalogModel",
    "model_catalog",
    "narrow_model",
    # Interfaces
    "AiProvider",
    "ModelListingProvider",
    "HttpProvider",
    # Errors
    "ErrorCode",
    "LatchError",
    "TransportError",
    "ApiError",
    "ParseError",
    "InvalidModelError",
    "ProviderError",
    "normalize_exception",
    # Factory & transport
    "ProviderFactory",
    "create_provider",
    "new_async_client",
    "TimeoutConfig",
    "get_timeout_config",
    # Streaming
    "StreamDecoder",
    "accumulate_responses",
]
