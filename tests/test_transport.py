import json

import httpx
import pytest

from freshbooks_sdk.transport import get_transport
from freshbooks_sdk.transport.base import TransportResponse
from freshbooks_sdk.transport.httpx import HttpxTransport


def test_transport_response_helpers():
    response = TransportResponse(201, b'{"ok": true}')

    assert response.is_success
    assert response.json() == {"ok": True}
    assert response.text == '{"ok": true}'
    assert not TransportResponse(404).is_success
    with pytest.raises(ValueError):
        TransportResponse(200, b"<html>").json()


@pytest.mark.asyncio
async def test_httpx_transport_round_trip():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        seen["ids"] = request.url.params.get_list("search[ids][]")
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content) if request.content else None
        return httpx.Response(200, json={"response": {"result": {"client": {"id": 1}}}})

    transport = HttpxTransport(
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )

    response = await transport.request(
        "PUT",
        "https://api.test/users/clients/ACM123/1",
        headers={"Authorization": "Bearer tok"},
        params=[("search[ids][]", 1), ("search[ids][]", 2)],
        json={"client": {"fname": "Gordon"}},
    )
    await transport.close()

    assert response.status_code == 200
    assert response.json()["response"]["result"]["client"]["id"] == 1
    assert seen["method"] == "PUT"
    assert seen["url"] == "https://api.test/users/clients/ACM123/1"
    assert seen["ids"] == ["1", "2"]
    assert seen["auth"] == "Bearer tok"
    assert seen["body"] == {"client": {"fname": "Gordon"}}


def test_get_transport_httpx():
    assert isinstance(get_transport("HTTPX"), HttpxTransport)


def test_get_transport_optional_backends():
    pytest.importorskip("aiohttp")
    pytest.importorskip("requests")
    from freshbooks_sdk.transport.aiohttp import AiohttpTransport
    from freshbooks_sdk.transport.requests import RequestsTransport

    assert isinstance(get_transport("aiohttp", timeout=5), AiohttpTransport)
    assert isinstance(get_transport("requests", timeout=5), RequestsTransport)


def test_get_transport_unknown():
    with pytest.raises(ValueError):
        get_transport("ftp")
