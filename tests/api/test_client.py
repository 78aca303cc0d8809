"""Tests for VercelClient request building and response decoding."""

import httpx
import pytest

from vercel_mcp.api.client import VercelAPIError, VercelClient

BASE_URL = "https://api.vercel.test"


def client_for(handler, **kwargs) -> VercelClient:
    return VercelClient(base_url=BASE_URL, transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_auth_header_and_query(mock_client, api_log):
    await mock_client.request("GET", "/v10/projects", params={"limit": 5, "search": None})

    request = api_log[0]
    assert request.headers["Authorization"] == "Bearer test-token"
    assert request.url.path == "/v10/projects"
    assert dict(request.url.params) == {"limit": "5"}
    await mock_client.close()


@pytest.mark.asyncio
async def test_no_auth_header_without_token():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={})

    async with client_for(handler) as client:
        await client.request("GET", "/v2/user")

    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_default_team_id_applied_unless_given():
    seen = []

    def handler(request):
        seen.append(dict(request.url.params))
        return httpx.Response(200, json={})

    async with client_for(handler, default_team_id="team_default") as client:
        await client.request("GET", "/v2/teams")
        await client.request("GET", "/v2/teams", params={"teamId": "team_other"})
        await client.request("GET", "/v2/teams", params={"slug": "acme"})

    assert seen == [
        {"teamId": "team_default"},
        {"teamId": "team_other"},
        {"slug": "acme"},
    ]


@pytest.mark.asyncio
async def test_error_status_raises():
    def handler(request):
        return httpx.Response(404, json={"error": {"code": "not_found"}})

    async with client_for(handler) as client:
        with pytest.raises(VercelAPIError) as exc_info:
            await client.request("GET", "/v9/projects/missing")

    assert exc_info.value.status_code == 404
    assert "not_found" in exc_info.value.body
    assert str(exc_info.value).startswith("HTTP 404")


@pytest.mark.asyncio
@pytest.mark.parametrize("response,expected", [
    (httpx.Response(204), {}),
    (httpx.Response(200, text="plain body"), "plain body"),
    (httpx.Response(200, json=[1, 2]), [1, 2]),
])
async def test_response_decoding(response, expected):
    async with client_for(lambda request: response) as client:
        assert await client.request("DELETE", "/v1/thing") == expected


@pytest.mark.asyncio
async def test_head_returns_status():
    async with client_for(lambda request: httpx.Response(200)) as client:
        assert await client.request("head", "/v8/artifacts/abc") == {"status": 200}
