"""Async HTTP client construction for providers.

Purpose:
    Provider clients never create connections on their own; they are handed an
    ``httpx.AsyncClient`` (the transport collaborator) through their builder.
    :func:`new_async_client` is the default way to obtain one, configured with
    timeouts from :func:`get_timeout_config`.

Lifecycle:
    The caller owns the returned client and closes it (``await client.aclose()``
    or ``async with``). One client may be shared by any number of providers
    and concurrent calls; httpx pools connections internally.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..timeouts import get_timeout_config


def new_async_client(*, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` with centrally configured timeouts.

    Parameters:
        transport: Optional transport override (tests pass
            ``httpx.MockTransport``).
    """
    return httpx.AsyncClient(timeout=get_timeout_config().to_httpx(), transport=transport)


__all__ = ["new_async_client"]
