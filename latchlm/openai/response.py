"""OpenAI Responses API schema, normalization and stream decoding.

Blocking bodies carry an ``output`` list of items; message items hold
``content`` entries with ``text``. Reasoning items (``summary``) and refusals
contribute no text.

Streams are typed by the ``type`` field of each event:

- ``response.output_text.delta``: one text fragment;
- ``response.completed`` / ``response.incomplete``: final usage, ends the stream;
- ``response.failed`` / ``error``: in-band failure (``ProviderError``);
- anything else is lifecycle bookkeeping and is skipped.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from ..base.errors import ProviderError
from ..base.models import AiResponse, TokenUsage
from ..base.streaming import DecodedEvent, ServerSentEvent
from ..config.defaults import OPENAI_PROVIDER_NAME

TEXT_DELTA = "response.output_text.delta"
TERMINAL_EVENTS = frozenset({"response.completed", "response.incomplete"})
FAILED_EVENT = "response.failed"
ERROR_EVENT = "error"
FAILED_STATUS = "failed"


class OpenaiContent(BaseModel):
    type: Optional[str] = None
    text: Optional[str] = None
    refusal: Optional[str] = None


class OpenaiOutputItem(BaseModel):
    type: Optional[str] = None
    id: Optional[str] = None
    status: Optional[str] = None
    role: Optional[str] = None
    content: List[OpenaiContent] = Field(default_factory=list)
    summary: List[Any] = Field(default_factory=list)


class OpenaiUsage(BaseModel):
    input_tokens: Optional[int] = Field(default=None, ge=0)
    output_tokens: Optional[int] = Field(default=None, ge=0)
    total_tokens: Optional[int] = Field(default=None, ge=0)


class OpenaiError(BaseModel):
    code: Optional[str] = None
    message: Optional[str] = None


class OpenaiResponse(BaseModel):
    """Response object returned by ``POST /responses`` and embedded in events."""

    id: Optional[str] = None
    model: Optional[str] = None
    status: Optional[str] = None
    output: List[OpenaiOutputItem] = Field(default_factory=list)
    usage: Optional[OpenaiUsage] = None
    error: Optional[OpenaiError] = None

    def extract_text(self) -> str:
        return "".join(
            content.text
            for item in self.output
            for content in item.content
            if content.text
        )

    def token_usage(self) -> TokenUsage:
        if self.usage is None:
            return TokenUsage()
        return TokenUsage(
            input_tokens=self.usage.input_tokens,
            output_tokens=self.usage.output_tokens,
            total_tokens=self.usage.total_tokens,
        )

    def to_ai_response(self) -> AiResponse:
        return AiResponse(text=self.extract_text(), token_usage=self.token_usage())


class OpenaiStreamEvent(BaseModel):
    """One streamed event; only the fields used by the decoder are modeled."""

    type: str
    delta: Optional[str] = None
    response: Optional[OpenaiResponse] = None
    code: Optional[str] = None
    message: Optional[str] = None
    sequence_number: Optional[int] = None


def normalize_response(body: Union[bytes, str]) -> AiResponse:
    """Decode a ``POST /responses`` body.

    Raises:
        ProviderError: the body reports ``status: failed`` or an ``error`` object.
    """
    parsed = OpenaiResponse.model_validate_json(body)
    if parsed.error is not None or parsed.status == FAILED_STATUS:
        err = parsed.error
        detail = (err.message or err.code) if err is not None else None
        raise ProviderError(OPENAI_PROVIDER_NAME, detail or "response failed")
    return parsed.to_ai_response()


def _failure_detail(event: OpenaiStreamEvent) -> str:
    if event.response is not None and event.response.error is not None:
        err = event.response.error
        return err.message or err.code or "response failed"
    return event.message or event.code or event.type


def decode_stream_event(event: ServerSentEvent) -> DecodedEvent:
    """Map one Responses API stream event to a :class:`DecodedEvent`.

    Raises:
        ProviderError: for ``response.failed`` and ``error`` events.
        pydantic.ValidationError: for payloads that do not match the schema.
    """
    parsed = OpenaiStreamEvent.model_validate_json(event.data)
    if parsed.type == TEXT_DELTA:
        if not parsed.delta:
            return DecodedEvent()
        return DecodedEvent(response=AiResponse(text=parsed.delta))
    if parsed.type in TERMINAL_EVENTS:
        usage = parsed.response.token_usage() if parsed.response is not None else TokenUsage()
        return DecodedEvent(response=AiResponse(text="", token_usage=usage), terminal=True)
    if parsed.type in (FAILED_EVENT, ERROR_EVENT):
        raise ProviderError(OPENAI_PROVIDER_NAME, _failure_detail(parsed))
    return DecodedEvent()


__all__ = [
    "OpenaiContent",
    "OpenaiOutputItem",
    "OpenaiUsage",
    "OpenaiError",
    "OpenaiResponse",
    "OpenaiStreamEvent",
    "normalize_response",
    "decode_stream_event",
]
