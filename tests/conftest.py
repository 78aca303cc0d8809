"""Shared fixtures: a Vercel client backed by httpx.MockTransport."""

import httpx
import pytest

from vercel_mcp.api.client import VercelClient

BASE_URL = "https://api.vercel.test"


@pytest.fixture
def api_log():
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def mock_client(api_log):
    """VercelClient whose transport echoes method and path back as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        api_log.append(request)
        return httpx.Response(
            200,
            json={"method": request.method, "path": request.url.path}
        )

    return VercelClient(
        base_url=BASE_URL,
        token="test-token",
        transport=httpx.MockTransport(handler)
    )
