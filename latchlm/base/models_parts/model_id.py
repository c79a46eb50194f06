"""
ModelId value type for model listings and display.

A ``ModelId`` pairs the technical identifier sent on the wire with a
human-readable name. It is never used to build requests; concrete model
values carry their own ``as_string()`` projection for that.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True, order=True)
class ModelId:
    """A unique identifier for an LLM model.

    Attributes:
        id: Technical identifier used in API requests.
        name: Human-readable display name.

    Equality and ordering compare ``(id, name)``.
    """

    id: str
    name: str

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, str]:
        """Return a JSON-serializable dictionary representation."""
        return asdict(self)


__all__ = ["ModelId"]
