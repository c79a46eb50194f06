"""OpenRouter model value.

OpenRouter's catalog is data (``GET /models``), not code, so any model slug
is representable; the server decides whether it exists.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..base.models import ModelId


@dataclass(frozen=True)
class OpenrouterModel:
    """A model slug such as ``"openai/gpt-4o"`` or ``"openrouter/auto"``."""

    id: str

    def as_string(self) -> str:
        return self.id

    def model_id(self) -> ModelId:
        return ModelId(id=self.id, name=self.id)

    def __str__(self) -> str:
        return self.id


__all__ = ["OpenrouterModel"]
