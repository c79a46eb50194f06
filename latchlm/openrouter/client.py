"""OpenRouter provider client (OpenAI-style chat completions over HTTP).

Summary:
- Blocking requests via ``POST {base}/chat/completions``.
- Streaming via the same endpoint with ``"stream": true``; the stream ends on
  the literal ``[DONE]`` payload.
- Bearer authentication plus the optional ``HTTP-Referer`` / ``X-Title``
  attribution headers.
- Live model listing with :meth:`Openrouter.models`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from pydantic import SecretStr

from ..base.builder import ProviderBuilder
from ..base.http import validate_header_value
from ..base.http_provider import HttpProvider
from ..base.models import AiRequest, AiResponse, ModelId
from ..base.streaming import DecodedEvent, ServerSentEvent
from ..config.defaults import OPENROUTER_DEFAULT_BASE_URL, OPENROUTER_PROVIDER_NAME
from .get_openrouter_models import fetch_models
from .models import OpenrouterModel
from .response import DONE_SENTINEL, decode_stream_event, normalize_response

HTTP_REFERER_HEADER = "HTTP-Referer"
X_TITLE_HEADER = "X-Title"


class Openrouter(HttpProvider):
    """Client for the OpenRouter API.

    Parameters:
        client: Shared ``httpx.AsyncClient``.
        api_key: OpenRouter key.
        base_url: API base URL.
        http_referer: Optional site URL for OpenRouter rankings.
        x_title: Optional site title for OpenRouter rankings.
    """

    provider_name = OPENROUTER_PROVIDER_NAME
    model_type = OpenrouterModel
    stream_sentinel = DONE_SENTINEL

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: SecretStr,
        base_url: str,
        *,
        http_referer: Optional[str] = None,
        x_title: Optional[str] = None,
    ) -> None:
        super().__init__(client, api_key, base_url)
        self._http_referer = http_referer
        self._x_title = x_title
        self._listing: List[ModelId] = []

    @classmethod
    def builder(cls) -> "OpenrouterBuilder":
        return OpenrouterBuilder()

    async def models(self) -> List[ModelId]:
        """Return the live model listing from ``GET {base}/models``."""
        listing = await fetch_models(self._client, self._base_url, self._headers(), logger=self._logger)
        self._listing = list(listing)
        return listing

    def list_models(self) -> List[ModelId]:
        """Return the listing fetched by the last :meth:`models` call (empty before)."""
        return list(self._listing)

    def _request_url(self, model: OpenrouterModel) -> str:
        return f"{self._base_url}/chat/completions"

    def _headers(self) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self._api_key.get_secret_value()}"}
        if self._http_referer:
            headers[HTTP_REFERER_HEADER] = self._http_referer
        if self._x_title:
            headers[X_TITLE_HEADER] = self._x_title
        return headers

    def _payload(self, model: OpenrouterModel, request: AiRequest, *, stream: bool) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": model.as_string(),
            "messages": [{"role": "user", "content": request.text}],
        }
        if stream:
            payload["stream"] = True
        return payload

    def _normalize(self, body: bytes) -> AiResponse:
        return normalize_response(body)

    def _decode_event(self, event: ServerSentEvent) -> DecodedEvent:
        return decode_stream_event(event)


class OpenrouterBuilder(ProviderBuilder[Openrouter]):
    """Builder for :class:`Openrouter`; attribution headers are optional."""

    provider_slug = "openrouter"
    provider_name = OPENROUTER_PROVIDER_NAME
    default_base_url = OPENROUTER_DEFAULT_BASE_URL

    def __init__(self) -> None:
        super().__init__()
        self._http_referer: Optional[str] = None
        self._x_title: Optional[str] = None

    def http_referer(self, http_referer: str) -> "OpenrouterBuilder":
        self._http_referer = http_referer
        return self

    def x_title(self, x_title: str) -> "OpenrouterBuilder":
        self._x_title = x_title
        return self

    def build(self) -> Openrouter:
        client, api_key, base_url = self._required()
        if self._http_referer is not None:
            validate_header_value(self.provider_name, HTTP_REFERER_HEADER, self._http_referer)
        if self._x_title is not None:
            validate_header_value(self.provider_name, X_TITLE_HEADER, self._x_title)
        return Openrouter(
            client,
            api_key,
            base_url,
            http_referer=self._http_referer,
            x_title=self._x_title,
        )


__all__ = ["Openrouter", "OpenrouterBuilder", "HTTP_REFERER_HEADER", "X_TITLE_HEADER"]
