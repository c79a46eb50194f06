"""Unified timeout configuration for the HTTP transport.

All timeout values used when this package builds an ``httpx.AsyncClient``
come from :func:`get_timeout_config`; no other module hard-codes numbers.
Callers that supply their own client keep full control over its timeouts.

Supported environment variables (all optional, positive floats, seconds):
    LATCHLM_TIMEOUT_CONNECT_SECONDS
    LATCHLM_TIMEOUT_READ_SECONDS
    LATCHLM_TIMEOUT_WRITE_SECONDS
    LATCHLM_TIMEOUT_POOL_SECONDS

The read timeout doubles as the idle timeout between streamed events.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Establishing the TCP/TLS connection.
        read_timeout_seconds: Waiting for response bytes, including the gap
            between two streamed events.
        write_timeout_seconds: Sending the request body.
        pool_timeout_seconds: Waiting for a free pooled connection.
    """

    connect_timeout_seconds: float = 10.0
    read_timeout_seconds: float = 60.0
    write_timeout_seconds: float = 10.0
    pool_timeout_seconds: float = 10.0

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(
            connect=self.connect_timeout_seconds,
            read=self.read_timeout_seconds,
            write=self.write_timeout_seconds,
            pool=self.pool_timeout_seconds,
        )


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, returning ``default`` otherwise."""
    raw: Optional[str] = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return a `TimeoutConfig` built from defaults and environment overrides."""
    defaults = TimeoutConfig()
    return TimeoutConfig(
        connect_timeout_seconds=_parse_env_float("LATCHLM_TIMEOUT_CONNECT_SECONDS", defaults.connect_timeout_seconds),
        read_timeout_seconds=_parse_env_float("LATCHLM_TIMEOUT_READ_SECONDS", defaults.read_timeout_seconds),
        write_timeout_seconds=_parse_env_float("LATCHLM_TIMEOUT_WRITE_SECONDS", defaults.write_timeout_seconds),
        pool_timeout_seconds=_parse_env_float("LATCHLM_TIMEOUT_POOL_SECONDS", defaults.pool_timeout_seconds),
    )


__all__ = ["TimeoutConfig", "get_timeout_config"]
