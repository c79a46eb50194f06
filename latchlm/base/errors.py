"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``latchlm.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.latch_error import (
    ApiError,
    InvalidModelError,
    LatchError,
    ParseError,
    ProviderError,
    TransportError,
)
from .errors_parts.classification import normalize_exception

__all__ = [
    "ErrorCode",
    "LatchError",
    "TransportError",
    "ApiError",
    "ParseError",
    "InvalidModelError",
    "ProviderError",
    "normalize_exception",
]
