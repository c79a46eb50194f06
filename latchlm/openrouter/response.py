"""OpenRouter (chat-completions) schemas and normalization.

Blocking bodies carry ``choices[].message.content``; streamed chunks carry
``choices[].delta.content`` and end with a literal ``[DONE]`` payload. Errors
that occur after the HTTP status was sent arrive in-band as an ``error``
object and are raised as :class:`ProviderError`.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from ..base.errors import ProviderError
from ..base.models import AiResponse, ModelId, TokenUsage
from ..base.streaming import DecodedEvent, ServerSentEvent
from ..config.defaults import OPENROUTER_PROVIDER_NAME

DONE_SENTINEL = "[DONE]"


class OpenrouterUsage(BaseModel):
    prompt_tokens: Optional[int] = Field(default=None, ge=0)
    completion_tokens: Optional[int] = Field(default=None, ge=0)
    total_tokens: Optional[int] = Field(default=None, ge=0)

    def to_token_usage(self) -> TokenUsage:
        return TokenUsage(
            input_tokens=self.prompt_tokens,
            output_tokens=self.completion_tokens,
            total_tokens=self.total_tokens,
        )


class OpenrouterError(BaseModel):
    code: Optional[Union[int, str]] = None
    message: Optional[str] = None


class OpenrouterMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None


class OpenrouterChoice(BaseModel):
    index: Optional[int] = None
    message: Optional[OpenrouterMessage] = None
    finish_reason: Optional[str] = None


class OpenrouterDelta(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None


class OpenrouterStreamChoice(BaseModel):
    index: Optional[int] = None
    delta: Optional[OpenrouterDelta] = None
    finish_reason: Optional[str] = None


def _usage(usage: Optional[OpenrouterUsage]) -> TokenUsage:
    return usage.to_token_usage() if usage is not None else TokenUsage()


def _raise_in_band(error: Optional[OpenrouterError]) -> None:
    if error is not None:
        detail = error.message or "unknown error"
        if error.code is not None:
            detail = f"{detail} (code {error.code})"
        raise ProviderError(OPENROUTER_PROVIDER_NAME, detail)


class OpenrouterResponse(BaseModel):
    """Body of ``POST /chat/completions``."""

    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[OpenrouterChoice] = Field(default_factory=list)
    usage: Optional[OpenrouterUsage] = None
    error: Optional[OpenrouterError] = None

    def extract_text(self) -> str:
        return "".join(
            choice.message.content
            for choice in self.choices
            if choice.message is not None and choice.message.content
        )

    def to_ai_response(self) -> AiResponse:
        return AiResponse(text=self.extract_text(), token_usage=_usage(self.usage))


class OpenrouterStreamResponse(BaseModel):
    """One streamed chunk."""

    id: Optional[str] = None
    model: Optional[str] = None
    provider: Optional[str] = None
    choices: List[OpenrouterStreamChoice] = Field(default_factory=list)
    usage: Optional[OpenrouterUsage] = None
    error: Optional[OpenrouterError] = None

    def extract_text(self) -> str:
        return "".join(
            choice.delta.content
            for choice in self.choices
            if choice.delta is not None and choice.delta.content
        )


class OpenrouterModelsItem(BaseModel):
    id: str
    name: Optional[str] = None


class OpenrouterModelsList(BaseModel):
    data: List[OpenrouterModelsItem] = Field(default_factory=list)

    def to_model_ids(self) -> List[ModelId]:
        return [ModelId(id=item.id, name=item.name or item.id) for item in self.data]


def normalize_response(body: Union[bytes, str]) -> AiResponse:
    """Decode a chat-completions body.

    Raises:
        ProviderError: the body carries an ``error`` object and no choices.
        pydantic.ValidationError: malformed JSON or mismatched field types.
    """
    parsed = OpenrouterResponse.model_validate_json(body)
    if not parsed.choices:
        _raise_in_band(parsed.error)
    return parsed.to_ai_response()


def decode_stream_event(event: ServerSentEvent) -> DecodedEvent:
    """Decode one chunk; chunks with neither text nor usage are skipped."""
    chunk = OpenrouterStreamResponse.model_validate_json(event.data)
    _raise_in_band(chunk.error)
    text = chunk.extract_text()
    usage = _usage(chunk.usage)
    if not text and usage.is_empty():
        return DecodedEvent()
    return DecodedEvent(response=AiResponse(text=text, token_usage=usage))


def parse_models_list(body: Union[bytes, str]) -> List[ModelId]:
    """Decode a ``GET /models`` body into listing entries."""
    return OpenrouterModelsList.model_validate_json(body).to_model_ids()


__all__ = [
    "DONE_SENTINEL",
    "OpenrouterUsage",
    "OpenrouterError",
    "OpenrouterMessage",
    "OpenrouterChoice",
    "OpenrouterResponse",
    "OpenrouterDelta",
    "OpenrouterStreamChoice",
    "OpenrouterStreamResponse",
    "OpenrouterModelsItem",
    "OpenrouterModelsList",
    "normalize_response",
    "decode_stream_event",
    "parse_models_list",
]
