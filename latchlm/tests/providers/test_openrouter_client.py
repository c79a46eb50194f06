"""OpenRouter client against a recorded mock backend."""

from __future__ import annotations

import json

import httpx
import pytest
from pydantic import SecretStr

from latchlm.base.errors import ApiError, InvalidModelError, LatchError, ParseError, ProviderError
from latchlm.base.interfaces import ModelListingProvider
from latchlm.base.models import AiRequest, AiResponse, ModelId, TokenUsage
from latchlm.base.streaming import accumulate_responses
from latchlm.gemini import GeminiModel
from latchlm.openrouter import Openrouter, OpenrouterModel

MOCK_TEXT = "This is a mock response"
MODEL = OpenrouterModel("openai/gpt-4o-mini")


def _completion(text: str) -> dict:
    return {
        "id": "gen-1",
        "model": MODEL.id,
        "object": "chat.completion",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": text}, "finish_reason": "stop"}],
    }


def _chunk(text: str | None, usage: dict | None = None) -> dict:
    body: dict = {
        "id": "gen-1",
        "provider": "OpenAI",
        "model": MODEL.id,
        "object": "chat.completion.chunk",
        "choices": [{"index": 0, "delta": {"role": "assistant", "content": text}, "finish_reason": None}],
    }
    if usage is not None:
        body["usage"] = usage
    return body


@pytest.mark.asyncio
async def test_send_request_returns_mock_text_with_absent_usage(openrouter, backend):
    backend.respond_json(_completion(MOCK_TEXT))
    resp = await openrouter.send_request(MODEL, AiRequest(text="Hello"))
    assert resp == AiResponse(text=MOCK_TEXT, token_usage=TokenUsage())  # nosec B101 - asserts are appropriate in tests


@pytest.mark.asyncio
async def test_request_shape_includes_attribution_headers(openrouter, backend):
    backend.respond_json(_completion("ok"))
    await openrouter.send_request(MODEL, AiRequest(text="Hello"))
    req = backend.last_request
    assert str(req.url) == "https://mock.test/chat/completions"  # nosec B101
    assert req.headers["authorization"] == "Bearer key-123"  # nosec B101
    assert req.headers["http-referer"] == "https://latchlm.test"  # nosec B101
    assert req.headers["x-title"] == "LatchLM Tests"  # nosec B101
    assert backend.last_json == {  # nosec B101
        "model": "openai/gpt-4o-mini",
        "messages": [{"role": "user", "content": "Hello"}],
    }


@pytest.mark.asyncio
async def test_unauthenticated_blocking_and_streaming(openrouter, backend):
    backend.respond_text(json.dumps({"error": {"code": 401, "message": "UNAUTHENTICATED"}}), status=401)
    with pytest.raises(ApiError) as blocking:
        await openrouter.send_request(MODEL, AiRequest(text="Hello"))
    with pytest.raises(ApiError) as streaming:
        async for _ in openrouter.send_streaming(MODEL, AiRequest(text="Hello")):
            pass
    for exc in (blocking, streaming):
        assert exc.value.status == 401  # nosec B101
        assert "UNAUTHENTICATED" in exc.value.message  # nosec B101


@pytest.mark.asyncio
async def test_foreign_model_fails_without_request(openrouter, backend):
    with pytest.raises(InvalidModelError) as exc:
        async for _ in openrouter.send_streaming(GeminiModel.FLASH_20, AiRequest(text="Hello")):
            pass
    assert exc.value.model == "gemini-2.0-flash"  # nosec B101
    assert backend.requests == []  # nosec B101


@pytest.mark.asyncio
async def test_done_sentinel_ends_stream_cleanly(openrouter, backend):
    backend.respond_sse(_chunk("This is"), _chunk(" a mock"), _chunk(" response"), "[DONE]", _chunk("after done"))
    chunks = [r.text async for r in openrouter.send_streaming(MODEL, AiRequest(text="Hello"))]
    assert chunks == ["This is", " a mock", " response"]  # nosec B101
    assert backend.last_json["stream"] is True  # nosec B101


@pytest.mark.asyncio
async def test_stream_comments_and_usage_chunk(openrouter, backend):
    usage = {"prompt_tokens": 4, "completion_tokens": 3, "total_tokens": 7}
    body = (
        ": OPENROUTER PROCESSING\n\n"
        f"data: {json.dumps(_chunk('Hi'))}\n\n"
        f"data: {json.dumps(_chunk(None))}\n\n"
        f"data: {json.dumps({'id': 'gen-1', 'choices': [], 'usage': usage})}\n\n"
        "data: [DONE]\n\n"
    )
    backend.respond_with(lambda _req: httpx.Response(200, text=body))
    result = await accumulate_responses(openrouter.send_streaming(MODEL, AiRequest(text="Hello")))
    assert result == AiResponse(  # nosec B101
        text="Hi", token_usage=TokenUsage(input_tokens=4, output_tokens=3, total_tokens=7)
    )


@pytest.mark.asyncio
async def test_streaming_round_trip_matches_blocking(openrouter, backend):
    backend.respond_json(_completion(MOCK_TEXT))
    blocking = await openrouter.send_request(MODEL, AiRequest(text="Hello"))
    backend.respond_sse(*[_chunk(word) for word in ("This", " is", " a", " mock", " response")], "[DONE]")
    streamed = await accumulate_responses(openrouter.send_streaming(MODEL, AiRequest(text="Hello")))
    assert streamed.text == blocking.text  # nosec B101


@pytest.mark.asyncio
async def test_in_band_stream_error(openrouter, backend):
    backend.respond_sse(_chunk("partial"), {"id": "gen-1", "error": {"code": 502, "message": "Upstream error"}})
    received = []
    with pytest.raises(ProviderError) as exc:
        async for item in openrouter.send_streaming(MODEL, AiRequest(text="Hello")):
            received.append(item.text)
    assert received == ["partial"]  # nosec B101
    assert exc.value.detail == "Upstream error (code 502)"  # nosec B101


@pytest.mark.asyncio
async def test_undecodable_chunk_is_terminal(openrouter, backend):
    backend.respond_sse(_chunk("a"), "{broken", _chunk("b"), "[DONE]")
    received = []
    with pytest.raises(ParseError):
        async for item in openrouter.send_streaming(MODEL, AiRequest(text="Hello")):
            received.append(item.text)
    assert received == ["a"]  # nosec B101


@pytest.mark.asyncio
async def test_early_close_releases_stream(openrouter, backend):
    backend.respond_sse(_chunk("one"), _chunk("two"), "[DONE]")
    stream = openrouter.send_streaming(MODEL, AiRequest(text="Hello"))
    first = await stream.__anext__()
    await stream.aclose()
    assert first.text == "one"  # nosec B101
    with pytest.raises(StopAsyncIteration):
        await stream.__anext__()


@pytest.mark.asyncio
async def test_models_listing(openrouter, backend):
    backend.respond_json({"data": [{"id": "openai/gpt-4o", "name": "OpenAI: GPT-4o"}, {"id": "meta/llama"}]})
    models = await openrouter.models()
    assert models == [  # nosec B101
        ModelId(id="openai/gpt-4o", name="OpenAI: GPT-4o"),
        ModelId(id="meta/llama", name="meta/llama"),
    ]
    req = backend.last_request
    assert req.method == "GET"  # nosec B101
    assert str(req.url) == "https://mock.test/models"  # nosec B101


@pytest.mark.asyncio
async def test_models_listing_errors(openrouter, backend):
    backend.respond_text("denied", status=403)
    with pytest.raises(ApiError) as exc:
        await openrouter.models()
    assert exc.value.category == "auth"  # nosec B101
    backend.respond_json({"data": "nope"})
    with pytest.raises(ParseError):
        await openrouter.models()


@pytest.mark.asyncio
async def test_unexpected_send_failure_maps_to_provider_error_on_both_paths(openrouter, backend):
    def _explode(request: httpx.Request) -> httpx.Response:
        raise RuntimeError("handler exploded")

    backend.respond_with(_explode)
    with pytest.raises(ProviderError, match="handler exploded"):
        await openrouter.send_request(MODEL, AiRequest(text="Hello"))
    with pytest.raises(ProviderError, match="handler exploded"):
        async for _ in openrouter.send_streaming(MODEL, AiRequest(text="Hello")):
            pass


@pytest.mark.asyncio
async def test_invalid_url_past_the_builder_stays_in_taxonomy(backend):
    client = Openrouter(backend.client(), SecretStr("key-123"), "https://[::1")
    with pytest.raises(LatchError):
        await client.send_request(MODEL, AiRequest(text="Hello"))
    with pytest.raises(LatchError):
        async for _ in client.send_streaming(MODEL, AiRequest(text="Hello")):
            pass
    assert backend.requests == []  # nosec B101


@pytest.mark.asyncio
async def test_list_models_returns_last_fetched_listing(openrouter, backend):
    assert isinstance(openrouter, ModelListingProvider)  # nosec B101
    assert openrouter.list_models() == []  # nosec B101
    backend.respond_json({"data": [{"id": "openai/gpt-4o", "name": "OpenAI: GPT-4o"}]})
    fetched = await openrouter.models()
    assert openrouter.list_models() == fetched  # nosec B101
    assert len(backend.requests) == 1  # nosec B101 - list_models adds no request
