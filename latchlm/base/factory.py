"""Provider Factory utilities.

Purpose
-------
Create provider clients by canonical name (``"gemini"``, ``"openai"``,
``"openrouter"``) from merged configuration (see
:func:`latchlm.config.get_provider_config`). Provider modules are imported
lazily with ``importlib`` so that importing the factory has no side effects.

Failure modes
-------------
Every failure is a :class:`~latchlm.base.errors.ProviderError`: unknown
provider names, unexpected settings, and the builder's own validation
(missing API key, malformed header values).
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple

import httpx

from ..config import get_provider_config
from .errors import ProviderError
from .interfaces import AiProvider

_SETTINGS = ("api_key", "base_url", "http_referer", "x_title")


def create_provider(provider: str, client: httpx.AsyncClient, **overrides: Any) -> AiProvider:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, client, **overrides)


class ProviderFactory:
    """Create provider clients based on a canonical name."""

    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "gemini": {"module": "latchlm.gemini.client", "class": "Gemini"},
        "openai": {"module": "latchlm.openai.client", "class": "Openai"},
        "openrouter": {"module": "latchlm.openrouter.client", "class": "Openrouter"},
    }

    @classmethod
    def create(cls, provider: str, client: httpx.AsyncClient, **overrides: Any) -> AiProvider:
        """Build a provider client.

        Parameters
        ----------
        provider:
            Canonical provider name (case-insensitive).
        client:
            Shared ``httpx.AsyncClient`` handed to the provider.
        **overrides:
            ``api_key``, ``base_url`` and, for OpenRouter, ``http_referer`` /
            ``x_title``. They win over file and environment configuration.

        Raises
        ------
        ProviderError
            Unknown provider, unexpected setting, or failed builder validation.
        """
        name = (provider or "").lower().strip()
        entry = cls._PROVIDERS.get(name)
        if not entry:
            raise ProviderError(provider or "<empty>", f"Unknown provider '{provider}'")
        if unexpected := sorted(set(overrides) - set(_SETTINGS)):
            raise ProviderError(provider, f"Unexpected settings: {', '.join(unexpected)}")

        klass = getattr(import_module(entry["module"]), entry["class"])
        cfg = get_provider_config(name, overrides)

        builder = klass.builder().client(client)
        if cfg.get("api_key"):
            builder.api_key(cfg["api_key"])
        if cfg.get("base_url"):
            builder.base_url(cfg["base_url"])
        for key in ("http_referer", "x_title"):
            value = cfg.get(key)
            setter = getattr(builder, key, None)
            if value and setter is not None:
                setter(value)
        return builder.build()

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())


__all__ = ["create_provider", "ProviderFactory"]
