"""
OpenRouter: get models

Behavior
- Fetches the live model listing via the OpenRouter HTTP API:
    GET {base_url}/models
- Maps ``data[].{id, name}`` to ``ModelId`` (``name`` falls back to ``id``).
- Failures surface as taxonomy errors; there is no cached fallback.
"""

from __future__ import annotations

import logging
import time
from typing import List, Mapping, Optional

import httpx

from ..base.errors import ApiError, normalize_exception
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ModelId
from ..config.defaults import OPENROUTER_PROVIDER_NAME
from .response import parse_models_list


async def fetch_models(
    client: httpx.AsyncClient,
    base_url: str,
    headers: Mapping[str, str],
    *,
    logger: Optional[logging.Logger] = None,
) -> List[ModelId]:
    """Fetch the model listing.

    Args:
        client: Shared async HTTP client.
        base_url: API base URL (``https://openrouter.ai/api/v1``).
        headers: Authentication and attribution headers.
        logger: Destination for ``models.*`` events.

    Returns:
        Listing entries in server order.

    Raises:
        TransportError, ApiError, ParseError: as for ``send_request``.
    """
    log = logger or get_logger("latchlm.openrouter")
    ctx = LogContext(provider=OPENROUTER_PROVIDER_NAME)
    url = base_url.rstrip("/") + "/models"
    started = time.perf_counter()
    try:
        resp = await client.get(url, headers={"Accept": "application/json", **headers})
        if not resp.is_success:
            raise ApiError(resp.status_code, resp.text)
        items = parse_models_list(resp.content)
    except Exception as exc:
        err = normalize_exception(exc, OPENROUTER_PROVIDER_NAME)
        log_event(log, "models.error", ctx, level=logging.ERROR, code=err.code.value, error=type(err).__name__)
        if err is exc:
            raise
        raise err from exc
    log_event(
        log,
        "models.end",
        ctx,
        count=len(items),
        latency_ms=int((time.perf_counter() - started) * 1000),
    )
    return items


__all__ = ["fetch_models"]
