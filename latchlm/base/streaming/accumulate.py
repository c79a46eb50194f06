"""Collapse a response stream into a single response."""

from __future__ import annotations

from typing import AsyncIterable, List

from ..models import AiResponse, TokenUsage


async def accumulate_responses(stream: AsyncIterable[AiResponse]) -> AiResponse:
    """Drain ``stream`` and return one response.

    - Concatenates text fragments in order (no separator).
    - Keeps the last reported value of each usage field.
    - Errors raised by the stream propagate; nothing partial is returned.
    """
    parts: List[str] = []
    usage = TokenUsage()
    async for response in stream:
        if response.text:
            parts.append(response.text)
        usage = usage.merged_with(response.token_usage)
    return AiResponse(text="".join(parts), token_usage=usage)


__all__ = ["accumulate_responses"]
