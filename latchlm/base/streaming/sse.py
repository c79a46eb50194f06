"""Server-Sent-Events framing.

Turns the line sequence of a ``text/event-stream`` body (as produced by
``httpx.Response.aiter_lines()``) into discrete events. Only the framing rules
the providers rely on are implemented: ``data``/``event``/``id``/``retry``
fields, ``:`` comments, and blank-line dispatch. Payload interpretation is
left to the provider event decoders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterable, AsyncIterator, List, Optional


@dataclass(frozen=True)
class ServerSentEvent:
    """One dispatched SSE event.

    Fields:
      event: event type (``"message"`` when the stream does not name one)
      data: payload, multiple ``data:`` lines joined with ``\\n``
      id: last ``id:`` value seen in the event, if any
      retry: reconnection hint in milliseconds, if any
    """

    event: str = "message"
    data: str = ""
    id: Optional[str] = None
    retry: Optional[int] = None


class _EventBuffer:
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.event: Optional[str] = None
        self.data: List[str] = []
        self.id: Optional[str] = None
        self.retry: Optional[int] = None

    def feed(self, field: str, value: str) -> None:
        if field == "data":
            self.data.append(value)
        elif field == "event":
            self.event = value
        elif field == "id":
            if "\0" not in value:
                self.id = value
        elif field == "retry":
            if value.isdigit():
                self.retry = int(value)
        # unknown fields are ignored

    def flush(self) -> Optional[ServerSentEvent]:
        """Return the pending event (``None`` when it had no data) and reset."""
        if not self.data:
            self.reset()
            return None
        sse = ServerSentEvent(
            event=self.event or "message",
            data="\n".join(self.data),
            id=self.id,
            retry=self.retry,
        )
        self.reset()
        return sse


def _split_field(line: str) -> tuple[str, str]:
    field, sep, value = line.partition(":")
    if not sep:
        return line, ""
    if value.startswith(" "):
        value = value[1:]
    return field, value


async def iter_sse_events(lines: AsyncIterable[str]) -> AsyncIterator[ServerSentEvent]:
    """Yield events from ``lines`` in receipt order.

    ``lines`` must already be split on line terminators with the terminator
    removed. An event still pending when the line source ends is dispatched.
    Exceptions raised by the line source propagate unchanged.
    """
    buffer = _EventBuffer()
    async for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            if (sse := buffer.flush()) is not None:
                yield sse
            continue
        if line.startswith(":"):
            continue
        field, value = _split_field(line)
        buffer.feed(field, value)
    if (sse := buffer.flush()) is not None:
        yield sse


__all__ = ["ServerSentEvent", "iter_sse_events"]
