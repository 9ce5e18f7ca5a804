import httpx
import pytest
from swapi_client.config import ClientConfig
from swapi_client.errors import TransportError
from swapi_client.http_client import HttpClient

from swapi_fixtures import API, mock_transport

@pytest.mark.asyncio
async def test_get_returns_raw_body_and_sends_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.headers)
        return httpx.Response(200, content=b'{"ok": 1}')

    config = ClientConfig(headers={"User-Agent": "holocron/1.0"})
    async with HttpClient(config, transport=httpx.MockTransport(handler)) as hc:
        body = await hc.get(f"{API}/people/1")
    assert body == b'{"ok": 1}'
    assert seen["accept"] == "application/json"
    assert seen["user-agent"] == "holocron/1.0"

@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 500, 503])
async def test_non_2xx_is_transport_error(status):
    calls = []
    async with HttpClient(transport=mock_transport({f"{API}/people/1": status}, calls)) as hc:
        with pytest.raises(TransportError) as info:
            await hc.get(f"{API}/people/1")
    assert str(status) in info.value.reason
    # fail once, no retry
    assert calls == [f"{API}/people/1"]

@pytest.mark.asyncio
async def test_network_failure_reason_is_verbatim():
    routes = {f"{API}/people/1": httpx.ConnectError("connection refused")}
    async with HttpClient(transport=mock_transport(routes)) as hc:
        with pytest.raises(TransportError) as info:
            await hc.get(f"{API}/people/1")
    assert info.value.reason == "connection refused"

@pytest.mark.asyncio
async def test_redirects_followed_by_default():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/people/1":
            return httpx.Response(301, headers={"Location": f"{API}/people/1/"})
        return httpx.Response(200, content=b"{}")

    async with HttpClient(transport=httpx.MockTransport(handler)) as hc:
        assert await hc.get(f"{API}/people/1") == b"{}"

    async with HttpClient(ClientConfig(follow_redirects=False), transport=httpx.MockTransport(handler)) as hc:
        with pytest.raises(TransportError):
            await hc.get(f"{API}/people/1")

def test_timeouts_come_from_config():
    timeout = ClientConfig(connect_timeout=1.5, read_timeout=9).timeout()
    assert timeout.connect == 1.5
    assert timeout.read == 9

@pytest.mark.asyncio
async def test_get_outside_context_is_programming_error():
    with pytest.raises(AssertionError):
        await HttpClient().get(f"{API}/")
