"""AiRequest DTO: a single free-text prompt."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AiRequest:
    """A request for an LLM.

    Attributes:
        text: The input text to be processed by the model.
    """

    text: str


__all__ = ["AiRequest"]
