"""Pytest configuration for the latchlm test suite.

Backends are simulated with ``httpx.MockTransport``; every request a provider
sends is recorded so tests can assert on URLs, headers, bodies, and on the
absence of any request at all.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterable, List, Optional, Union

import httpx
import pytest

from latchlm.config import reset_config_cache
from latchlm.gemini import Gemini
from latchlm.openai import Openai
from latchlm.openrouter import Openrouter

BASE_URL = "https://mock.test"
TEST_KEY = "key-123"  # pragma: allowlist secret - fake credential for mocks

_ENV_VARS = (
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "OPENAI_API_KEY",
    "OPENROUTER_API_KEY",
    "GEMINI_BASE_URL",
    "OPENAI_BASE_URL",
    "OPENROUTER_BASE_URL",
    "OPENROUTER_HTTP_REFERER",
    "OPENROUTER_X_TITLE",
    "LATCHLM_CONFIG_FILE",
    "LATCHLM_LOG_LEVEL",
    "LATCHLM_TIMEOUT_CONNECT_SECONDS",
    "LATCHLM_TIMEOUT_READ_SECONDS",
    "LATCHLM_TIMEOUT_WRITE_SECONDS",
    "LATCHLM_TIMEOUT_POOL_SECONDS",
)

Payload = Union[str, dict]


def sse_body(*payloads: Payload) -> str:
    """Frame payloads as ``data:`` events (dicts are JSON encoded)."""
    return "".join(f"data: {p if isinstance(p, str) else json.dumps(p)}\n\n" for p in payloads)


class RecordingBackend:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responder: Callable[[httpx.Request], httpx.Response] = lambda _req: httpx.Response(
            500, text="no response configured"
        )

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    def respond_with(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self._responder = responder

    def respond_json(self, payload: Any, status: int = 200) -> None:
        self._responder = lambda _req: httpx.Response(status, json=payload)

    def respond_text(self, text: str, status: int = 200) -> None:
        self._responder = lambda _req: httpx.Response(status, text=text)

    def respond_sse(self, *payloads: Payload, status: int = 200) -> None:
        body = sse_body(*payloads)
        self._responder = lambda _req: httpx.Response(
            status, text=body, headers={"content-type": "text/event-stream"}
        )

    def respond_chunks(self, chunks: Iterable[bytes], fail_with: Optional[Exception] = None) -> None:
        """Stream ``chunks`` and then raise ``fail_with`` from the body, if given."""
        chunk_list = list(chunks)

        async def _body():
            for chunk in chunk_list:
                yield chunk
            if fail_with is not None:
                raise fail_with

        self._responder = lambda _req: httpx.Response(
            200, content=_body(), headers={"content-type": "text/event-stream"}
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Hide host credentials and config files from every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture()
def http_client(backend: RecordingBackend) -> httpx.AsyncClient:
    return backend.client()


@pytest.fixture()
def gemini(http_client: httpx.AsyncClient) -> Gemini:
    return Gemini.builder().client(http_client).api_key(TEST_KEY).base_url(BASE_URL).build()


@pytest.fixture()
def openai_client(http_client: httpx.AsyncClient) -> Openai:
    return Openai.builder().client(http_client).api_key(TEST_KEY).base_url(BASE_URL).build()


@pytest.fixture()
def openrouter(http_client: httpx.AsyncClient) -> Openrouter:
    return (
        Openrouter.builder()
        .client(http_client)
        .api_key(TEST_KEY)
        .base_url(BASE_URL)
        .http_referer("https://latchlm.test")
        .x_title("LatchLM Tests")
        .build()
    )
