"""
Normalized error kinds (taxonomy).

Defines the closed `ErrorCode` enumeration shared by every provider. Values are
lowercase snake_case and are considered a stable public contract for logging.
Provider-specific detail travels as data on the exception, never as a new kind.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error kinds representing failure categories."""

    TRANSPORT = "transport"
    API = "api"
    PARSE = "parse"
    INVALID_MODEL = "invalid_model"
    PROVIDER = "provider"


__all__ = ["ErrorCode"]
