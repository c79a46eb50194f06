"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`latchlm.base.models_parts` if needed, while `latchlm.base.models` remains
the primary stable import path.
"""

from .model_id import ModelId
from .ai_request import AiRequest
from .token_usage import TokenUsage
from .ai_response import AiResponse

__all__ = [
    "ModelId",
    "AiRequest",
    "TokenUsage",
    "AiResponse",
]
