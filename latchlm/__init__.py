"""latchlm package

Provider-agnostic facade over Gemini, the OpenAI Responses API and OpenRouter.

Purpose:
    Issue one uniform request (``AiRequest``) and receive one uniform
    response (``AiResponse``) or an async stream of them, whichever provider
    serves the call. Packaging is configured via the repository root
    ``pyproject.toml``.

Public API (re-exported):
    - Version: ``__version__``
    - Values: :class:`ModelId`, :class:`AiRequest`, :class:`AiResponse`,
      :class:`TokenUsage`
    - Capabilities: :class:`AiModel`, :class:`AiProvider`,
      :class:`ModelListingProvider`, :func:`narrow_model`
    - Errors: :class:`LatchError` and its subclasses, :class:`ErrorCode`
    - Providers: :class:`Gemini`, :class:`Openai`, :class:`Openrouter` and
      their model types
    - Helpers: :func:`create_provider`, :func:`new_async_client`,
      :func:`accumulate_responses`

Example::

    async with new_async_client() as http:
        gemini = Gemini.builder().client(http).api_key_from_env().build()
        async for chunk in gemini.send_streaming(GeminiModel.FLASH_20, AiRequest("Hello")):
            print(chunk.text, end="")
"""

from .base.catalog import AiModel, narrow_model
from .base.errors import (
    ApiError,
    ErrorCode,
    InvalidModelError,
    LatchError,
    ParseError,
    ProviderError,
    TransportError,
)
from .base.factory import create_provider
from .base.http import new_async_client
from .base.interfaces import AiProvider, ModelListingProvider
from .base.models import AiRequest, AiResponse, ModelId, TokenUsage
from .base.streaming import accumulate_responses
from .gemini import Gemini, GeminiModel
from .openai import Openai, OpenaiModel
from .openrouter import Openrouter, OpenrouterModel

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Values
    "ModelId",
    "AiRequest",
    "AiResponse",
    "TokenUsage",
    # Capabilities
    "AiModel",
    "AiProvider",
    "ModelListingProvider",
    "narrow_model",
    # Exceptions
    "ErrorCode",
    "LatchError",
    "TransportError",
    "ApiError",
    "ParseError",
    "InvalidModelError",
    "ProviderError",
    # Providers
    "Gemini",
    "GeminiModel",
    "Openai",
    "OpenaiModel",
    "Openrouter",
    "OpenrouterModel",
    # Helpers
    "create_provider",
    "new_async_client",
    "accumulate_responses",
]
