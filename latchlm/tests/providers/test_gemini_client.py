"""Gemini client against a recorded mock backend."""

from __future__ import annotations

import json

import httpx
import pytest

from latchlm.base.errors import ApiError, InvalidModelError, ParseError, ProviderError, TransportError
from latchlm.base.logging import get_logger
from latchlm.base.models import AiRequest, AiResponse, TokenUsage
from latchlm.base.streaming import accumulate_responses
from latchlm.gemini import GeminiModel
from latchlm.openai import OpenaiModel

MOCK_TEXT = "This is a mock response"
FIXTURE_KEY = "key-123"  # pragma: allowlist secret - matches the conftest credential


def _chunk(text: str, **usage) -> dict:
    body: dict = {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}
    if usage:
        body["usageMetadata"] = usage
    return body


@pytest.mark.asyncio
async def test_send_request_returns_mock_text_with_absent_usage(gemini, backend):
    backend.respond_json(_chunk(MOCK_TEXT))
    resp = await gemini.send_request(GeminiModel.FLASH_20, AiRequest(text="Hello"))
    assert resp == AiResponse(text=MOCK_TEXT, token_usage=TokenUsage())  # nosec B101 - asserts are appropriate in tests


@pytest.mark.asyncio
async def test_request_shape(gemini, backend):
    backend.respond_json(_chunk("ok"))
    await gemini.send_request(GeminiModel.PRO_25, AiRequest(text="Hello"))
    req = backend.last_request
    assert req.method == "POST"  # nosec B101
    assert str(req.url) == "https://mock.test/v1beta/models/gemini-2.5-pro:generateContent"  # nosec B101
    assert req.headers["x-goog-api-key"] == "key-123"  # nosec B101
    assert "authorization" not in req.headers  # nosec B101
    assert backend.last_json == {"contents": [{"parts": [{"text": "Hello"}]}]}  # nosec B101


@pytest.mark.asyncio
async def test_unauthenticated_blocking(gemini, backend):
    backend.respond_text(json.dumps({"error": {"code": 401, "status": "UNAUTHENTICATED"}}), status=401)
    with pytest.raises(ApiError) as exc:
        await gemini.send_request(GeminiModel.FLASH_20, AiRequest(text="Hello"))
    assert exc.value.status == 401  # nosec B101
    assert "UNAUTHENTICATED" in exc.value.message  # nosec B101


@pytest.mark.asyncio
async def test_unauthenticated_streaming(gemini, backend):
    backend.respond_text(json.dumps({"error": {"code": 401, "status": "UNAUTHENTICATED"}}), status=401)
    with pytest.raises(ApiError) as exc:
        async for _ in gemini.send_streaming(GeminiModel.FLASH_20, AiRequest(text="Hello")):
            pass
    assert exc.value.status == 401  # nosec B101
    assert "UNAUTHENTICATED" in exc.value.message  # nosec B101


@pytest.mark.asyncio
async def test_foreign_model_fails_without_request(gemini, backend):
    with pytest.raises(InvalidModelError) as exc:
        await gemini.send_request(OpenaiModel.GPT_4O, AiRequest(text="Hello"))
    assert exc.value.model == "gpt-4o"  # nosec B101

    stream = gemini.send_streaming(OpenaiModel.GPT_4O, AiRequest(text="Hello"))
    with pytest.raises(InvalidModelError):
        await stream.__anext__()
    assert backend.requests == []  # nosec B101 - zero requests reached the backend


@pytest.mark.asyncio
async def test_streaming_round_trip_matches_blocking(gemini, backend):
    backend.respond_json(_chunk(MOCK_TEXT))
    blocking = await gemini.send_request(GeminiModel.FLASH_25, AiRequest(text="Hello"))

    backend.respond_sse(
        _chunk("This is"),
        _chunk(" a mock"),
        {"candidates": []},
        _chunk(" response", promptTokenCount=2, candidatesTokenCount=5, totalTokenCount=7),
    )
    chunks = [r async for r in gemini.send_streaming(GeminiModel.FLASH_25, AiRequest(text="Hello"))]
    assert [c.text for c in chunks] == ["This is", " a mock", " response"]  # nosec B101
    assert "".join(c.text for c in chunks) == blocking.text  # nosec B101
    assert chunks[-1].token_usage == TokenUsage(input_tokens=2, output_tokens=5, total_tokens=7)  # nosec B101


@pytest.mark.asyncio
async def test_stream_request_shape(gemini, backend):
    backend.respond_sse(_chunk("x"))
    await accumulate_responses(gemini.send_streaming(GeminiModel.FLASH_20, AiRequest(text="Hi")))
    req = backend.last_request
    assert req.url.path == "/v1beta/models/gemini-2.0-flash:streamGenerateContent"  # nosec B101
    assert req.url.params["alt"] == "sse"  # nosec B101
    assert req.headers["accept"] == "text/event-stream"  # nosec B101
    assert "stream" not in backend.last_json  # nosec B101


@pytest.mark.asyncio
async def test_malformed_success_body_is_parse_error(gemini, backend):
    backend.respond_text("<html>oops</html>")
    with pytest.raises(ParseError):
        await gemini.send_request(GeminiModel.FLASH_20, AiRequest(text="Hello"))


@pytest.mark.asyncio
async def test_connect_failure_is_transport_error(gemini, backend):
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    backend.respond_with(_refuse)
    with pytest.raises(TransportError) as exc:
        await gemini.send_request(GeminiModel.FLASH_20, AiRequest(text="Hello"))
    assert "connection refused" in str(exc.value)  # nosec B101
    with pytest.raises(TransportError):
        async for _ in gemini.send_streaming(GeminiModel.FLASH_20, AiRequest(text="Hello")):
            pass


@pytest.mark.asyncio
async def test_mid_stream_read_failure_keeps_earlier_chunks(gemini, backend):
    first = f"data: {json.dumps(_chunk('partial'))}\n\n".encode()
    backend.respond_chunks([first], fail_with=httpx.ReadError("reset by peer"))
    received = []
    with pytest.raises(ProviderError) as exc:
        async for item in gemini.send_streaming(GeminiModel.FLASH_20, AiRequest(text="Hello")):
            received.append(item.text)
    assert received == ["partial"]  # nosec B101
    assert exc.value.provider == "Gemini"  # nosec B101


@pytest.mark.asyncio
async def test_event_split_across_network_chunks(gemini, backend):
    payload = f"data: {json.dumps(_chunk(MOCK_TEXT))}\n\n".encode()
    backend.respond_chunks([payload[:10], payload[10:25], payload[25:]])
    result = await accumulate_responses(gemini.send_streaming(GeminiModel.FLASH_20, AiRequest(text="Hello")))
    assert result.text == MOCK_TEXT  # nosec B101


def test_list_models_is_catalog(gemini):
    assert gemini.list_models() == GeminiModel.variants()  # nosec B101


@pytest.mark.asyncio
async def test_request_lifecycle_is_logged_without_key(gemini, backend, capsys):
    get_logger()
    backend.respond_json(_chunk(MOCK_TEXT, promptTokenCount=1, candidatesTokenCount=4))
    await gemini.send_request(GeminiModel.FLASH_20, AiRequest(text="Hello"))
    err = capsys.readouterr().err
    events = [json.loads(line) for line in err.splitlines() if line.strip()]
    names = [e["event"] for e in events]
    assert names == ["request.start", "request.end"]  # nosec B101
    assert events[1]["provider"] == "Gemini"  # nosec B101
    assert events[1]["model"] == "gemini-2.0-flash"  # nosec B101
    assert events[1]["output_tokens"] == 4  # nosec B101
    assert FIXTURE_KEY not in err  # nosec B101 - credentials never reach the log


@pytest.mark.asyncio
async def test_in_band_error_chunk_fails_the_stream(gemini, backend):
    backend.respond_sse(_chunk("partial"), {"error": {"code": 500, "message": "Internal error", "status": "INTERNAL"}})
    received = []
    with pytest.raises(ProviderError) as exc:
        async for item in gemini.send_streaming(GeminiModel.FLASH_20, AiRequest(text="Hello")):
            received.append(item.text)
    assert received == ["partial"]  # nosec B101
    assert exc.value.detail == "Internal error (code 500)"  # nosec B101


@pytest.mark.asyncio
async def test_error_body_with_success_status_is_not_an_empty_response(gemini, backend):
    backend.respond_json({"error": {"code": 500, "message": "Internal error"}})
    with pytest.raises(ProviderError, match="Internal error"):
        await gemini.send_request(GeminiModel.FLASH_20, AiRequest(text="Hello"))
