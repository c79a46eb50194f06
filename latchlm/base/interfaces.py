"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports Protocols split into single-class modules under
``latchlm.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import AiProvider, ModelListingProvider

__all__ = [
    "AiProvider",
    "ModelListingProvider",
]
