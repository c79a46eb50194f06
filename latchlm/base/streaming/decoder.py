"""Stream decoder: SSE events to normalized responses.

Each streaming call owns one :class:`StreamDecoder`. The decoder walks the
state machine below for every event and yields responses strictly in receipt
order, holding at most one event at a time::

    AWAITING_EVENT -> EVENT_RECEIVED -> DECODED | DECODE_FAILED | STREAM_TERMINATED

Termination rules:
    - a transport failure while reading raises ``ProviderError`` (terminal);
    - a payload equal to the provider sentinel ends the stream cleanly;
    - a payload the provider decoder rejects raises ``ParseError`` (terminal,
      fragments are never dropped silently);
    - a decoded event flagged ``terminal`` ends the stream after its response;
    - otherwise the stream ends when the connection closes.
"""

from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterable, AsyncIterator, Callable, Optional

import httpx

from ..errors import LatchError, ParseError, ProviderError
from ..logging import LogContext, get_logger, log_event
from ..models import AiResponse
from .sse import ServerSentEvent, iter_sse_events


class DecoderState(str, Enum):
    """Position of a :class:`StreamDecoder` in its per-event cycle."""

    AWAITING_EVENT = "awaiting_event"
    EVENT_RECEIVED = "event_received"
    DECODED = "decoded"
    DECODE_FAILED = "decode_failed"
    STREAM_TERMINATED = "stream_terminated"


@dataclass(frozen=True)
class DecodedEvent:
    """Outcome of decoding one event.

    ``response`` is ``None`` for event kinds that carry neither text nor usage;
    ``terminal`` marks the provider's explicit completion event.
    """

    response: Optional[AiResponse] = None
    terminal: bool = False


EventDecoder = Callable[[ServerSentEvent], DecodedEvent]


class StreamDecoder:
    """Decode one provider event stream.

    Parameters
    ----------
    provider: str
        Provider display name used in errors and logs.
    decode: EventDecoder
        Provider-specific payload decoder. It may raise ``LatchError`` for
        in-band provider errors; ``ValueError`` (including JSON and pydantic
        validation errors) is reported as ``ParseError``.
    sentinel: Optional[str]
        Payload that ends the stream without an element (``"[DONE]"``).
    logger: Optional[logging.Logger]
        Destination for ``stream.event`` debug lines.
    ctx: Optional[LogContext]
        Provider/model context attached to log lines.
    """

    def __init__(
        self,
        provider: str,
        decode: EventDecoder,
        *,
        sentinel: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self.provider = provider
        self._decode = decode
        self.sentinel = sentinel
        self._logger = logger or get_logger("latchlm.streaming")
        self._ctx = ctx or LogContext(provider=provider)
        self.state = DecoderState.AWAITING_EVENT
        self.events_seen = 0

    async def decode(self, lines: AsyncIterable[str]) -> AsyncIterator[AiResponse]:
        """Yield the normalized responses carried by ``lines``."""
        async with contextlib.aclosing(iter_sse_events(lines)) as events:
            while True:
                self.state = DecoderState.AWAITING_EVENT
                try:
                    event = await events.__anext__()
                except StopAsyncIteration:
                    break
                except httpx.HTTPError as exc:
                    self.state = DecoderState.STREAM_TERMINATED
                    raise ProviderError(self.provider, f"Event stream interrupted: {exc}") from exc

                self.state = DecoderState.EVENT_RECEIVED
                self.events_seen += 1
                log_event(
                    self._logger,
                    "stream.event",
                    self._ctx,
                    level=logging.DEBUG,
                    index=self.events_seen,
                    sse_event=event.event,
                )

                if self.sentinel is not None and event.data.strip() == self.sentinel:
                    self.state = DecoderState.STREAM_TERMINATED
                    return

                decoded = self._decode_event(event)
                self.state = DecoderState.DECODED
                if decoded.response is not None:
                    yield decoded.response
                if decoded.terminal:
                    self.state = DecoderState.STREAM_TERMINATED
                    return
        self.state = DecoderState.STREAM_TERMINATED

    def _decode_event(self, event: ServerSentEvent) -> DecodedEvent:
        try:
            return self._decode(event)
        except LatchError:
            self.state = DecoderState.DECODE_FAILED
            raise
        except ValueError as exc:
            self.state = DecoderState.DECODE_FAILED
            detail = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
            raise ParseError(detail, cause=exc) from exc


__all__ = [
    "DecoderState",
    "DecodedEvent",
    "EventDecoder",
    "StreamDecoder",
]
