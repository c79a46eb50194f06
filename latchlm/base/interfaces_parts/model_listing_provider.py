"""ModelListingProvider Protocol (single-class module).

Interface for providers that can enumerate their models.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from ..models import ModelId


@runtime_checkable
class ModelListingProvider(Protocol):
    """Interface to list the models a provider knows about."""

    def list_models(self) -> List[ModelId]:
        """Return the provider's model catalog.

        Never performs network I/O. Providers whose catalog is remote return
        the result of their last async fetch, or an empty list before it.
        """
        ...
