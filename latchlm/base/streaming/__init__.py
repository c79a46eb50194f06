"""Streaming package: SSE framing, per-call decoding, accumulation."""

from .sse import ServerSentEvent, iter_sse_events
from .decoder import DecodedEvent, DecoderState, EventDecoder, StreamDecoder
from .accumulate import accumulate_responses

__all__ = [
    "ServerSentEvent",
    "iter_sse_events",
    "DecoderState",
    "DecodedEvent",
    "EventDecoder",
    "StreamDecoder",
    "accumulate_responses",
]
