"""Shared builder for provider clients.

A provider client is assembled from optional pieces (HTTP client, API key,
base URL, provider specific headers) and validated once in ``build()``. The
builder performs no I/O; missing required pieces surface as
:class:`ProviderError` before any request can be attempted.
"""

from __future__ import annotations

import os
from typing import ClassVar, Generic, Optional, Tuple, TypeVar, Union

import httpx
from pydantic import SecretStr

from ..config.env import get_env_var_name, is_placeholder, resolve_provider_key
from .errors import ProviderError
from .http import validate_header_value

P = TypeVar("P")
B = TypeVar("B", bound="ProviderBuilder")


class ProviderBuilder(Generic[P]):
    """Fluent builder base; subclasses implement :meth:`build`.

    Class attributes:
        provider_slug: canonical lowercase name (env lookups).
        provider_name: display name used in errors.
        default_base_url: used when :meth:`base_url` was not called.
    """

    provider_slug: ClassVar[str]
    provider_name: ClassVar[str]
    default_base_url: ClassVar[str]

    def __init__(self) -> None:
        self._client: Optional[httpx.AsyncClient] = None
        self._api_key: Optional[SecretStr] = None
        self._base_url: Optional[str] = None

    def client(self: B, client: httpx.AsyncClient) -> B:
        """Set the shared async HTTP client (required)."""
        self._client = client
        return self

    def api_key(self: B, api_key: Union[str, SecretStr]) -> B:
        """Set the API key (required)."""
        self._api_key = api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
        return self

    def api_key_from_env(self: B, env_var: Optional[str] = None) -> B:
        """Read the API key from ``env_var`` or the provider's canonical variables.

        Leaves the key unset when nothing usable is found, so :meth:`build`
        reports it as missing.
        """
        if env_var:
            value = os.environ.get(env_var)
            if value and not is_placeholder(value):
                self._api_key = SecretStr(value)
            return self
        value, _ = resolve_provider_key(self.provider_slug)
        if value:
            self._api_key = SecretStr(value)
        return self

    def base_url(self: B, base_url: str) -> B:
        """Override the provider base URL."""
        self._base_url = base_url
        return self

    def _required(self) -> Tuple[httpx.AsyncClient, SecretStr, str]:
        if self._client is None:
            raise ProviderError(self.provider_name, "Missing HTTP client")
        if self._api_key is None or not self._api_key.get_secret_value():
            hint = get_env_var_name(self.provider_slug)
            detail = f"Missing API key (set {hint} or call api_key())" if hint else "Missing API key"
            raise ProviderError(self.provider_name, detail)
        validate_header_value(self.provider_name, "api key", self._api_key.get_secret_value())
        base = (self._base_url or self.default_base_url).rstrip("/")
        if not base:
            raise ProviderError(self.provider_name, "Missing base URL")
        try:
            parsed = httpx.URL(base)
        except httpx.InvalidURL as exc:
            raise ProviderError(self.provider_name, f"Invalid base URL: {exc}") from exc
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise ProviderError(self.provider_name, f"Invalid base URL: {base}")
        return self._client, self._api_key, base

    def build(self) -> P:
        """Validate the collected pieces and return the provider client."""
        raise NotImplementedError


__all__ = ["ProviderBuilder"]
