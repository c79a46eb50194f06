"""AiProvider Protocol (single-class module).

Defines the dispatch contract every concrete provider satisfies.
"""

from __future__ import annotations

from typing import AsyncIterator, Protocol, runtime_checkable

from ..catalog import AiModel
from ..models import AiRequest, AiResponse


@runtime_checkable
class AiProvider(Protocol):
    """Uniform interface over LLM HTTP APIs.

    Both operations take the model typed only as :class:`AiModel`; a provider
    narrows it to its own concrete model type and raises
    :class:`~latchlm.base.errors.InvalidModelError` for a foreign one before
    any network I/O.

    Implementations hold only immutable configuration and are safe for
    concurrent use.
    """

    async def send_request(self, model: AiModel, request: AiRequest) -> AiResponse:
        """Perform exactly one request/response exchange.

        The body is fully buffered before it is normalized.

        Raises:
            InvalidModelError: foreign model.
            TransportError: connection, TLS, or timeout failure.
            ApiError: non-2xx status (raw body kept in ``message``).
            ParseError: malformed or schema-mismatched success body.
        """
        ...

    def send_streaming(self, model: AiModel, request: AiRequest) -> AsyncIterator[AiResponse]:
        """Return a single-use async iterator over normalized responses.

        Nothing is sent until the first pull. The iterator ends when the
        provider signals completion, or raises one taxonomy error at the point
        of failure; elements already pulled stay valid. Closing the iterator
        early releases the underlying connection.
        """
        ...
