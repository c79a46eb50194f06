"""Gemini response schema and normalization.

Only the fields that contribute text or usage are modeled; everything else in
the payload is ignored. Streaming chunks (``streamGenerateContent?alt=sse``)
share the blocking schema, so one normalizer serves both paths.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..base.errors import ProviderError
from ..base.models import AiResponse, TokenUsage
from ..base.streaming import DecodedEvent, ServerSentEvent
from ..config.defaults import GEMINI_PROVIDER_NAME


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())


class GeminiPart(_CamelModel):
    text: Optional[str] = None


class GeminiContent(_CamelModel):
    parts: List[GeminiPart] = Field(default_factory=list)
    role: Optional[str] = None


class GeminiCandidate(_CamelModel):
    content: Optional[GeminiContent] = None
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")
    index: Optional[int] = None


class GeminiUsageMetadata(_CamelModel):
    prompt_token_count: Optional[int] = Field(default=None, ge=0, alias="promptTokenCount")
    candidates_token_count: Optional[int] = Field(default=None, ge=0, alias="candidatesTokenCount")
    total_token_count: Optional[int] = Field(default=None, ge=0, alias="totalTokenCount")


class GeminiError(_CamelModel):
    code: Optional[int] = None
    message: Optional[str] = None
    status: Optional[str] = None

    def detail(self) -> str:
        text = self.message or self.status or "unknown error"
        return f"{text} (code {self.code})" if self.code is not None else text


class GeminiResponse(_CamelModel):
    """Body of ``generateContent`` and of each streamed chunk."""

    candidates: List[GeminiCandidate] = Field(default_factory=list)
    usage_metadata: Optional[GeminiUsageMetadata] = Field(default=None, alias="usageMetadata")
    model_version: Optional[str] = Field(default=None, alias="modelVersion")
    response_id: Optional[str] = Field(default=None, alias="responseId")
    error: Optional[GeminiError] = None

    def extract_text(self) -> str:
        """Concatenate every candidate's part texts in document order."""
        return "".join(
            part.text
            for candidate in self.candidates
            if candidate.content is not None
            for part in candidate.content.parts
            if part.text
        )

    def token_usage(self) -> TokenUsage:
        usage = self.usage_metadata
        if usage is None:
            return TokenUsage()
        return TokenUsage(
            input_tokens=usage.prompt_token_count,
            output_tokens=usage.candidates_token_count,
            total_tokens=usage.total_token_count,
        )

    def to_ai_response(self) -> AiResponse:
        return AiResponse(text=self.extract_text(), token_usage=self.token_usage())


def normalize_response(body: Union[bytes, str]) -> AiResponse:
    """Decode a ``generateContent`` body.

    Raises:
        ProviderError: the body is an in-band ``error`` object.
        pydantic.ValidationError: malformed JSON or mismatched field types.
    """
    parsed = GeminiResponse.model_validate_json(body)
    if parsed.error is not None:
        raise ProviderError(GEMINI_PROVIDER_NAME, parsed.error.detail())
    return parsed.to_ai_response()


def decode_stream_event(event: ServerSentEvent) -> DecodedEvent:
    """Decode one streamed chunk; chunks without text or usage are skipped."""
    response = normalize_response(event.data)
    if not response.text and response.token_usage.is_empty():
        return DecodedEvent()
    return DecodedEvent(response=response)


__all__ = [
    "GeminiPart",
    "GeminiContent",
    "GeminiCandidate",
    "GeminiUsageMetadata",
    "GeminiError",
    "GeminiResponse",
    "normalize_response",
    "decode_stream_event",
]
