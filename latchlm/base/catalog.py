"""Model identity capability, narrowing, and static catalog helpers.

Purpose:
    Callers hand providers an opaque model value typed only as :class:`AiModel`.
    Each provider recovers its own concrete model type with
    :func:`narrow_model` and treats anything else as foreign.

Catalogs:
    Providers with a fixed model list declare an ``Enum`` whose members are
    ``(wire id, display name)`` records and mix in :class:`CatalogModel`. That
    one table drives string conversion, parsing, and enumeration. The
    :func:`model_catalog` decorator validates the table when the class is
    created (non-empty fields, unique ids).

    Providers whose catalog is data rather than code (OpenRouter) use a plain
    frozen value type instead.
"""

from __future__ import annotations

import copy
from typing import List, Optional, Protocol, Type, TypeVar, runtime_checkable

from .errors import InvalidModelError
from .models import ModelId

M = TypeVar("M")
C = TypeVar("C", bound="CatalogModel")


@runtime_checkable
class AiModel(Protocol):
    """Capability every model value exposes, independent of its provider."""

    def as_string(self) -> str:
        """Return the identifier sent as the ``model`` field on the wire."""
        ...

    def model_id(self) -> ModelId:
        """Return the id/display-name pair for listings."""
        ...


def narrow_model(model: AiModel, target: Type[M]) -> Optional[M]:
    """Return a copy of ``model`` if its concrete type is exactly ``target``.

    Subclasses do not match. Foreign values yield ``None``; this function never
    raises so the calling provider decides how to fail.
    """
    if type(model) is not target:
        return None
    return copy.copy(model)


class CatalogModel:
    """Mixin for ``Enum`` based model catalogs.

    Members are declared as ``NAME = ("wire-id", "Display Name")``.
    """

    def __init__(self, wire_id: str, display_name: str) -> None:
        self._wire_id = wire_id
        self._display_name = display_name

    def as_string(self) -> str:
        return self._wire_id

    def model_id(self) -> ModelId:
        return ModelId(id=self._wire_id, name=self._display_name)

    def __str__(self) -> str:
        return self._wire_id

    @classmethod
    def parse(cls: Type[C], wire_id: str) -> C:
        """Return the member whose wire id equals ``wire_id``.

        Raises:
            InvalidModelError: when no member matches.
        """
        for member in cls:  # type: ignore[attr-defined]
            if member.as_string() == wire_id:
                return member
        raise InvalidModelError(wire_id)

    @classmethod
    def variants(cls) -> List[ModelId]:
        """Return every catalog entry in declaration order."""
        return [member.model_id() for member in cls]  # type: ignore[attr-defined]


def model_catalog(cls: Type[C]) -> Type[C]:
    """Validate a :class:`CatalogModel` enum at class creation time.

    Raises:
        ValueError: on an empty id or name, or on a repeated id. Repeated
            records would otherwise silently become enum aliases.
    """
    seen: dict = {}
    for attr, member in cls.__members__.items():  # type: ignore[attr-defined]
        if member.name != attr:
            raise ValueError(f"{cls.__name__}.{attr}: repeated model id '{member.as_string()}'")
        wire_id = member.as_string()
        if not wire_id:
            raise ValueError(f"{cls.__name__}.{attr}: missing model id")
        if not member.model_id().name:
            raise ValueError(f"{cls.__name__}.{attr}: missing model name")
        if wire_id in seen:
            raise ValueError(f"{cls.__name__}.{attr}: repeated model id '{wire_id}' (also {seen[wire_id]})")
        seen[wire_id] = attr
    return cls


__all__ = [
    "AiModel",
    "narrow_model",
    "CatalogModel",
    "model_catalog",
]
