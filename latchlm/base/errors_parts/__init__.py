"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `latchlm.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .latch_error import (
    ApiError,
    InvalidModelError,
    LatchError,
    ParseError,
    ProviderError,
    TransportError,
)
from .classification import normalize_exception

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
