"""
TokenUsage DTO.

Fields are optional because providers do not report usage on every response;
intermediate streaming chunks usually omit it and only a terminal event
carries the totals.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TokenUsage:
    """Token usage information returned by LLM providers.

    Attributes:
        input_tokens: Number of tokens in the input prompt.
        output_tokens: Number of tokens in the generated output.
        total_tokens: Total tokens used during the interaction.
    """

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    def is_empty(self) -> bool:
        """Return True when no field was reported."""
        return self.input_tokens is None and self.output_tokens is None and self.total_tokens is None

    def merged_with(self, newer: "TokenUsage") -> "TokenUsage":
        """Return a copy where each field reported by ``newer`` wins."""
        return TokenUsage(
            input_tokens=newer.input_tokens if newer.input_tokens is not None else self.input_tokens,
            output_tokens=newer.output_tokens if newer.output_tokens is not None else self.output_tokens,
            total_tokens=newer.total_tokens if newer.total_tokens is not None else self.total_tokens,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["TokenUsage"]
