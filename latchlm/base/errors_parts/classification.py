"""
Normalization of arbitrary exceptions into the shared taxonomy.

Provider code funnels unexpected failures through :func:`normalize_exception`
at its boundary so that nothing outside the taxonomy ever reaches callers.
"""
from __future__ import annotations

import json

import httpx
from pydantic import ValidationError

from .latch_error import (
    ApiError,
    LatchError,
    ParseError,
    ProviderError,
    TransportError,
)


def normalize_exception(exc: BaseException, provider: str) -> LatchError:
    """Map ``exc`` to a :class:`LatchError`.

    Precedence:
        1. ``LatchError`` passthrough.
        2. ``httpx.HTTPStatusError`` -> :class:`ApiError` with the raw body.
        3. ``httpx.RequestError`` (connect, TLS, timeout) -> :class:`TransportError`.
        4. JSON / pydantic validation failures -> :class:`ParseError`.
        5. Anything else -> :class:`ProviderError` carrying ``str(exc)``.
    """
    if isinstance(exc, LatchError):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        try:
            body = response.text
        except httpx.ResponseNotRead:
            body = ""
        return ApiError(response.status_code, body)
    if isinstance(exc, httpx.RequestError):
        return TransportError(str(exc) or type(exc).__name__, cause=exc)
    if isinstance(exc, (json.JSONDecodeError, ValidationError)):
        return ParseError(_first_line(str(exc)), cause=exc)
    return ProviderError(provider, str(exc) or type(exc).__name__)


def _first_line(text: str) -> str:
    return text.splitlines()[0] if text else text


__all__ = ["normalize_exception"]
