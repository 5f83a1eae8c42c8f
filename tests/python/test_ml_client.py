import json

import httpx
import pytest

from smart_search.config.models import MachineLearningClientConfig
from smart_search.exceptions import EncoderUnavailableError
from smart_search.ml.client import MachineLearningClient, parse_embedding


def _client(handler) -> MachineLearningClient:
    return MachineLearningClient(
        MachineLearningClientConfig(auth_token="secret"),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_encode_text_posts_multipart_entries_and_text() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"clip": "[0.5,-0.25]"})

    client = _client(handler)
    embedding = await client.encode_text(
        ["http://ml:3003/"],
        "sunset beach",
        model_name="ViT-B-32__openai",
        language="de",
    )
    await client.aclose()

    assert embedding == [0.5, -0.25]
    request = seen[0]
    assert str(request.url) == "http://ml:3003/predict"
    assert request.headers["Authorization"] == "Bearer secret"
    body = request.content.decode()
    assert 'name="text"' in body
    assert "sunset beach" in body
    entries = {"clip": {"textual": {"modelName": "ViT-B-32__openai", "options": {"language": "de"}}}}
    assert json.dumps(entries) in body


@pytest.mark.asyncio
async def test_encode_text_falls_through_to_next_url() -> None:
    hosts: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        hosts.append(request.url.host)
        if request.url.host == "down":
            raise httpx.ConnectError("refused", request=request)
        if request.url.host == "broken":
            return httpx.Response(503)
        return httpx.Response(200, json={"clip": [1, 2, 3]})

    client = _client(handler)
    embedding = await client.encode_text(
        ["http://down:3003", "http://broken:3003", "http://up:3003"],
        "cat",
        model_name="clip",
        language=None,
    )

    assert embedding == [1.0, 2.0, 3.0]
    assert hosts == ["down", "broken", "up"]


@pytest.mark.asyncio
async def test_encode_text_raises_when_every_url_fails() -> None:
    client = _client(lambda request: httpx.Response(500))

    with pytest.raises(EncoderUnavailableError, match="모든 머신러닝 URL") as exc_info:
        await client.encode_text(["http://a", "http://b"], "cat", model_name="clip", language=None)

    assert exc_info.value.http_status == 502


@pytest.mark.asyncio
async def test_encode_text_requires_urls() -> None:
    client = _client(lambda request: httpx.Response(200, json={"clip": [1.0]}))

    with pytest.raises(EncoderUnavailableError):
        await client.encode_text([], "cat", model_name="clip", language=None)


@pytest.mark.asyncio
async def test_encode_text_rejects_response_without_clip() -> None:
    client = _client(lambda request: httpx.Response(200, json={"facial-recognition": []}))

    with pytest.raises(EncoderUnavailableError, match="clip"):
        await client.encode_text(["http://a"], "cat", model_name="clip", language=None)


@pytest.mark.parametrize("raw", ["not-json", "[]", [], ["a", "b"], 3])
def test_parse_embedding_rejects_invalid_payloads(raw) -> None:
    with pytest.raises(EncoderUnavailableError):
        parse_embedding(raw)
