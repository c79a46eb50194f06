"""
Exception types making up the shared error taxonomy.

Every provider raises only these classes. Each carries its :class:`ErrorCode`
so callers can branch on ``err.code`` or on the concrete class, whichever reads
better at the call site.
"""
from __future__ import annotations

from typing import ClassVar, Dict, Optional

from .error_code import ErrorCode


class LatchError(Exception):
    """Base class of the taxonomy. Never raised directly."""

    code: ClassVar[ErrorCode]


class TransportError(LatchError):
    """Network level failure (connect, TLS, timeout) reported by the transport.

    Attributes:
        message: Transport-layer description of the failure.
        cause: The original transport exception, kept for diagnostics.
    """

    code = ErrorCode.TRANSPORT

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return f"Request failed: {self.message}"


# Coarse HTTP classification used for log fields only.
_HTTP_STATUS_CATEGORY: Dict[int, str] = {
    400: "validation",
    401: "auth",
    403: "auth",
    404: "not_found",
    408: "timeout",
    409: "conflict",
    422: "validation",
    429: "rate_limit",
    500: "server_error",
    502: "transient",
    503: "unavailable",
    504: "timeout",
}


class ApiError(LatchError):
    """Non-2xx HTTP response.

    The body is carried verbatim in ``message``; error body shapes differ per
    provider and are not parsed.
    """

    code = ErrorCode.API

    def __init__(self, status: int, message: str) -> None:
        super().__init__(status, message)
        self.status = status
        self.message = message

    @property
    def category(self) -> str:
        """Return a coarse label for the status (``auth``, ``rate_limit`` ...)."""
        if self.status in _HTTP_STATUS_CATEGORY:
            return _HTTP_STATUS_CATEGORY[self.status]
        if 500 <= self.status < 600:
            return "server_error"
        return "unknown"

    def __str__(self) -> str:
        return f"Api error: {self.status} - {self.message}"


class ParseError(LatchError):
    """A success body (or stream event) failed schema decoding."""

    code = ErrorCode.PARSE

    def __init__(self, message: str = "", cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.message:
            return f"Failed to parse the response: {self.message}"
        return "Failed to parse the response"


class InvalidModelError(LatchError):
    """The model value does not belong to the provider it was sent to.

    ``model`` is the wire identifier the caller supplied.
    """

    code = ErrorCode.INVALID_MODEL

    def __init__(self, model: str) -> None:
        super().__init__(model)
        self.model = model

    def __str__(self) -> str:
        return f"Invalid model name: {self.model}"


class ProviderError(LatchError):
    """Provider-specific setup or protocol failure.

    Covers missing credentials or HTTP clients at build time, malformed header
    values, in-band stream errors and interrupted event streams.

    Attributes:
        provider: Display name of the provider (``"Gemini"``, ``"OpenAI"`` ...).
        detail: Human-readable description.
    """

    code = ErrorCode.PROVIDER

    def __init__(self, provider: str, detail: str) -> None:
        super().__init__(provider, detail)
        self.provider = provider
        self.detail = detail

    def __str__(self) -> str:
        return f"Provider settings error: {self.provider} : {self.detail}"


__all__ = [
    "LatchError",
    "TransportError",
    "ApiError",
    "ParseError",
    "InvalidModelError",
    "ProviderError",
]
