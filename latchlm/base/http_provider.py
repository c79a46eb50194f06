"""Shared request/stream template for HTTP providers.

Both :class:`~latchlm.base.interfaces.AiProvider` operations are implemented
once here. Provider modules only describe their wire protocol through the
hooks below:

- ``model_type``: concrete model class accepted by the provider;
- ``_request_url`` / ``_stream_url``: endpoints for one model;
- ``_headers``: authentication and provider headers;
- ``_payload``: JSON body for one request;
- ``_normalize``: success body -> :class:`AiResponse`;
- ``_decode_event``: one SSE event -> :class:`DecodedEvent`;
- ``stream_sentinel``: end-of-stream payload, if the provider uses one.

Errors & Observability:
- Foreign models fail with ``InvalidModelError`` before any request is built.
- Transport failures, non-2xx statuses and undecodable bodies are mapped with
  :func:`normalize_exception` / :class:`ApiError` so only taxonomy errors
  escape.
- ``request.*`` and ``stream.*`` events are logged with provider and model;
  credentials never appear in log lines.
"""

from __future__ import annotations

import contextlib
import logging
import time
from typing import Any, AsyncIterator, ClassVar, Dict, Optional, Type

import httpx
from pydantic import SecretStr

from .catalog import AiModel, narrow_model
from .errors import ApiError, InvalidModelError, LatchError, normalize_exception
from .logging import LogContext, get_logger, log_event
from .models import AiRequest, AiResponse
from .streaming import DecodedEvent, ServerSentEvent, StreamDecoder


class HttpProvider:
    """Base class of the concrete provider clients.

    Instances hold only immutable configuration and may be shared across
    concurrent tasks.
    """

    provider_name: ClassVar[str]
    model_type: ClassVar[Type[Any]]
    stream_sentinel: ClassVar[Optional[str]] = None

    def __init__(self, client: httpx.AsyncClient, api_key: SecretStr, base_url: str) -> None:
        self._client = client
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._logger = get_logger(f"latchlm.{self.provider_name.lower()}")

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    # ---- hooks ----

    def _request_url(self, model: Any) -> str:
        raise NotImplementedError

    def _stream_url(self, model: Any) -> str:
        return self._request_url(model)

    def _headers(self) -> Dict[str, str]:
        raise NotImplementedError

    def _payload(self, model: Any, request: AiRequest, *, stream: bool) -> Dict[str, Any]:
        raise NotImplementedError

    def _normalize(self, body: bytes) -> AiResponse:
        raise NotImplementedError

    def _decode_event(self, event: ServerSentEvent) -> DecodedEvent:
        raise NotImplementedError

    # ---- AiProvider ----

    def _require_model(self, model: AiModel) -> Any:
        concrete = narrow_model(model, self.model_type)
        if concrete is None:
            wire_id = model.as_string()
            log_event(
                self._logger,
                "model.invalid",
                LogContext(provider=self.provider_name, model=wire_id),
                level=logging.WARNING,
            )
            raise InvalidModelError(wire_id)
        return concrete

    async def send_request(self, model: AiModel, request: AiRequest) -> AiResponse:
        """Send one request and return the normalized response."""
        concrete = self._require_model(model)
        ctx = LogContext(provider=self.provider_name, model=concrete.as_string())
        log_event(self._logger, "request.start", ctx)
        started = time.perf_counter()
        try:
            response = await self._client.post(
                self._request_url(concrete),
                headers=self._headers(),
                json=self._payload(concrete, request, stream=False),
            )
            if not response.is_success:
                raise ApiError(response.status_code, response.text)
            result = self._normalize(response.content)
        except Exception as exc:
            err = normalize_exception(exc, self.provider_name)
            self._log_error("request.error", ctx, err)
            if err is exc:
                raise
            raise err from exc
        log_event(
            self._logger,
            "request.end",
            ctx,
            latency_ms=int((time.perf_counter() - started) * 1000),
            input_tokens=result.token_usage.input_tokens,
            output_tokens=result.token_usage.output_tokens,
        )
        return result

    async def send_streaming(self, model: AiModel, request: AiRequest) -> AsyncIterator[AiResponse]:
        """Stream normalized responses; see :class:`StreamDecoder` for termination."""
        concrete = self._require_model(model)
        ctx = LogContext(provider=self.provider_name, model=concrete.as_string())
        log_event(self._logger, "stream.start", ctx)
        started = time.perf_counter()
        emitted = 0
        headers = {**self._headers(), "Accept": "text/event-stream"}
        try:
            async with self._client.stream(
                "POST",
                self._stream_url(concrete),
                headers=headers,
                json=self._payload(concrete, request, stream=True),
            ) as response:
                if not response.is_success:
                    body = await response.aread()
                    raise ApiError(response.status_code, body.decode("utf-8", errors="replace"))
                decoder = StreamDecoder(
                    self.provider_name,
                    self._decode_event,
                    sentinel=self.stream_sentinel,
                    logger=self._logger,
                    ctx=ctx,
                )
                async with contextlib.aclosing(decoder.decode(response.aiter_lines())) as items:
                    async for item in items:
                        emitted += 1
                        yield item
        except Exception as exc:
            err = normalize_exception(exc, self.provider_name)
            self._log_error("stream.error", ctx, err, emitted=emitted)
            if err is exc:
                raise
            raise err from exc
        log_event(
            self._logger,
            "stream.end",
            ctx,
            emitted=emitted,
            total_duration_ms=int((time.perf_counter() - started) * 1000),
        )

    def _log_error(self, event: str, ctx: LogContext, err: LatchError, **fields: Any) -> None:
        log_event(
            self._logger,
            event,
            ctx,
            level=logging.ERROR,
            code=err.code.value,
            status=getattr(err, "status", None),
            category=getattr(err, "category", None),
            error=type(err).__name__,
            **fields,
        )


__all__ = ["HttpProvider"]
