"""
AiResponse DTO representing normalized provider responses.

Produced once per blocking request, or once per decoded stream event. Provider
wire shapes never leak into this type; only the text they contribute and the
usage they report survive normalization.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .token_usage import TokenUsage


@dataclass(frozen=True)
class AiResponse:
    """Response from an LLM API provider.

    Attributes:
        text: Generated text (empty string when the provider returned none).
        token_usage: Usage reported alongside this response, possibly empty.
    """

    text: str
    token_usage: TokenUsage = field(default_factory=TokenUsage)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {"text": self.text, "token_usage": self.token_usage.to_dict()}


__all__ = ["AiResponse"]
