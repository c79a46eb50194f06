"""Gemini provider client (``generativelanguage.googleapis.com``).

Summary:
- Blocking requests via ``POST /v1beta/models/{id}:generateContent``.
- Streaming via ``:streamGenerateContent?alt=sse``; the stream ends when the
  server closes the connection (no sentinel).
- Authentication with the ``x-goog-api-key`` header.

Request/response handling, logging and error mapping live in
:class:`~latchlm.base.http_provider.HttpProvider`; this module only describes
the wire protocol.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..base.builder import ProviderBuilder
from ..base.http_provider import HttpProvider
from ..base.models import AiRequest, AiResponse, ModelId
from ..base.streaming import DecodedEvent, ServerSentEvent
from ..config.defaults import GEMINI_DEFAULT_BASE_URL, GEMINI_PROVIDER_NAME
from .models import GeminiModel
from .response import decode_stream_event, normalize_response

API_KEY_HEADER = "x-goog-api-key"


class Gemini(HttpProvider):
    """Client for the Gemini API.

    Build one with :meth:`builder`::

        gemini = Gemini.builder().client(http).api_key_from_env().build()
        reply = await gemini.send_request(GeminiModel.FLASH_20, AiRequest("Hi"))
    """

    provider_name = GEMINI_PROVIDER_NAME
    model_type = GeminiModel

    @classmethod
    def builder(cls) -> "GeminiBuilder":
        return GeminiBuilder()

    def list_models(self) -> List[ModelId]:
        return GeminiModel.variants()

    def _model_url(self, model: GeminiModel) -> str:
        return f"{self._base_url}/v1beta/models/{model.as_string()}"

    def _request_url(self, model: GeminiModel) -> str:
        return f"{self._model_url(model)}:generateContent"

    def _stream_url(self, model: GeminiModel) -> str:
        return f"{self._model_url(model)}:streamGenerateContent?alt=sse"

    def _headers(self) -> Dict[str, str]:
        return {API_KEY_HEADER: self._api_key.get_secret_value()}

    def _payload(self, model: GeminiModel, request: AiRequest, *, stream: bool) -> Dict[str, Any]:
        # streaming is selected by the endpoint, not the body
        return {"contents": [{"parts": [{"text": request.text}]}]}

    def _normalize(self, body: bytes) -> AiResponse:
        return normalize_response(body)

    def _decode_event(self, event: ServerSentEvent) -> DecodedEvent:
        return decode_stream_event(event)


class GeminiBuilder(ProviderBuilder[Gemini]):
    """Builder for :class:`Gemini`; requires a client and an API key."""

    provider_slug = "gemini"
    provider_name = GEMINI_PROVIDER_NAME
    default_base_url = GEMINI_DEFAULT_BASE_URL

    def build(self) -> Gemini:
        client, api_key, base_url = self._required()
        return Gemini(client, api_key, base_url)


__all__ = ["Gemini", "GeminiBuilder", "API_KEY_HEADER"]
