import httpx
import pytest

from cognito_auth.contracts import HTTPLayer
from cognito_auth.http import DEFAULT_TIMEOUT, HttpxHTTPLayer, create_http_client
from tests.provider_testkit import FakeAsyncHttpClient, FakeResponse


def test_http_layer_satisfies_protocol() -> None:
    assert isinstance(HttpxHTTPLayer(), HTTPLayer)


@pytest.mark.asyncio
async def test_create_http_client_defaults() -> None:
    async with create_http_client(headers={"User-Agent": "cognito-auth"}) as client:
        assert isinstance(client, httpx.AsyncClient)
        assert client.follow_redirects is True
        assert client.timeout.read == DEFAULT_TIMEOUT
        assert client.headers["User-Agent"] == "cognito-auth"


@pytest.mark.asyncio
async def test_get_uses_a_fresh_client_per_request() -> None:
    clients: list[FakeAsyncHttpClient] = []

    def factory() -> FakeAsyncHttpClient:
        client = FakeAsyncHttpClient(FakeResponse(200, {"username": "jdoe"}))
        clients.append(client)
        return client

    layer = HttpxHTTPLayer(client_factory=factory)  # type: ignore[arg-type]
    await layer.get("https://a.example/userInfo", headers={"Authorization": "Bearer t"})
    resp = await layer.get("https://b.example/userInfo")

    assert resp.json() == {"username": "jdoe"}
    assert len(clients) == 2
    assert all(client.closed for client in clients)
    assert clients[0].get_calls == [
        ("https://a.example/userInfo", {"Authorization": "Bearer t"})
    ]
    assert clients[1].get_calls == [("https://b.example/userInfo", {})]


@pytest.mark.asyncio
async def test_get_against_mock_transport() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"username": "jdoe"})

    layer = HttpxHTTPLayer(
        client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )
    resp = await layer.get(
        "https://acme.auth.eu-central-1.amazoncognito.com/oauth2/userInfo",
        headers={"Authorization": "Bearer abc123"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"username": "jdoe"}
    assert seen[0].headers["Authorization"] == "Bearer abc123"
    assert seen[0].url.host == "acme.auth.eu-central-1.amazoncognito.com"


@pytest.mark.asyncio
async def test_transport_errors_propagate() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    layer = HttpxHTTPLayer(
        client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )
    with pytest.raises(httpx.ConnectError):
        await layer.get("https://acme.example/userInfo")
