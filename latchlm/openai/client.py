"""OpenAI provider client (Responses API).

Summary:
- Blocking requests via ``POST {base}/responses``.
- Streaming via the same endpoint with ``"stream": true``; the stream ends on
  the typed ``response.completed`` event rather than a sentinel payload.
- Bearer authentication.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..base.builder import ProviderBuilder
from ..base.http_provider import HttpProvider
from ..base.models import AiRequest, AiResponse, ModelId
from ..base.streaming import DecodedEvent, ServerSentEvent
from ..config.defaults import OPENAI_DEFAULT_BASE_URL, OPENAI_PROVIDER_NAME
from .models import OpenaiModel
from .response import decode_stream_event, normalize_response


class Openai(HttpProvider):
    """Client for the OpenAI Responses API."""

    provider_name = OPENAI_PROVIDER_NAME
    model_type = OpenaiModel

    @classmethod
    def builder(cls) -> "OpenaiBuilder":
        return OpenaiBuilder()

    def list_models(self) -> List[ModelId]:
        return OpenaiModel.variants()

    def _request_url(self, model: OpenaiModel) -> str:
        return f"{self._base_url}/responses"

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key.get_secret_value()}"}

    def _payload(self, model: OpenaiModel, request: AiRequest, *, stream: bool) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"model": model.as_string(), "input": request.text}
        if stream:
            payload["stream"] = True
        return payload

    def _normalize(self, body: bytes) -> AiResponse:
        return normalize_response(body)

    def _decode_event(self, event: ServerSentEvent) -> DecodedEvent:
        return decode_stream_event(event)


class OpenaiBuilder(ProviderBuilder[Openai]):
    provider_slug = "openai"
    provider_name = OPENAI_PROVIDER_NAME
    default_base_url = OPENAI_DEFAULT_BASE_URL

    def build(self) -> Openai:
        client, api_key, base_url = self._required()
        return Openai(client, api_key, base_url)


__all__ = ["Openai", "OpenaiBuilder"]
