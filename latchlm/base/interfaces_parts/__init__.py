"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``latchlm.base.interfaces`` to re-export a stable API.
"""

from .ai_provider import AiProvider
from .model_listing_provider import ModelListingProvider

__all__ = [
    "AiProvider",
    "ModelListingProvider",
]
