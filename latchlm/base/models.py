"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``latchlm.base.models_parts``.
"""

from .models_parts.model_id import ModelId
from .models_parts.ai_request import AiRequest
from .models_parts.token_usage import TokenUsage
from .models_parts.ai_response import AiResponse

__all__ = [
    "ModelId",
    "AiRequest",
    "TokenUsage",
    "AiResponse",
]
