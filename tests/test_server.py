"""
Tests for VercelMCPServer tool dispatch.

Tests cover:
1. Bootstrap of the initial tool groups
2. Auto-loading the group of an unknown tool and LRU eviction
3. Meta tools for inspecting and loading groups
4. Error envelopes for bad arguments, API errors and unknown tools
"""

import json

import httpx
import pytest
import pytest_asyncio

from vercel_mcp.api.client import VercelClient
from vercel_mcp.config.settings import Settings
from vercel_mcp.server import META_TOOL_NAMES, VercelMCPServer
from vercel_mcp.utils.response import is_success

BASE_URL = "https://api.vercel.test"


@pytest.fixture
def server(mock_client):
    return VercelMCPServer(Settings(base_url=BASE_URL), client=mock_client)


@pytest_asyncio.fixture
async def started(server):
    await server.bootstrap()
    return server


DNS_RECORD = {"domain": "example.com", "name": "www", "type": "A", "value": "1.2.3.4"}


# ============================================================================
# Bootstrap and tool listing
# ============================================================================

@pytest.mark.asyncio
async def test_bootstrap_loads_initial_groups(server):
    failed = await server.bootstrap()

    assert failed == []
    assert server.tool_manager.get_active_groups() == ["projects", "infrastructure"]
    assert server.host.has_tool("list_projects")
    assert server.host.has_tool("create_edge_config")
    assert not server.host.has_tool("create_dns_record")


@pytest.mark.asyncio
async def test_bootstrap_reports_unknown_initial_group(mock_client):
    server = VercelMCPServer(
        Settings(base_url=BASE_URL, initial_groups=["projects", "billing"]),
        client=mock_client
    )

    assert await server.bootstrap() == ["billing"]
    assert server.tool_manager.get_active_groups() == ["projects"]


def test_list_tools_before_bootstrap_has_only_meta_tools(server):
    assert {t.name for t in server.list_tools()} == META_TOOL_NAMES


@pytest.mark.asyncio
async def test_list_tools_includes_loaded_tools(started):
    names = [t.name for t in started.list_tools()]

    assert names[:len(META_TOOL_NAMES)] == ["tool_groups_status", "load_tool_group", "suggest_tool_groups"]
    assert "list_projects" in names


# ============================================================================
# Tool calls
# ============================================================================

@pytest.mark.asyncio
async def test_call_loaded_tool(started, api_log):
    result = await started.handle_tool("list_projects", {"limit": 10})

    assert is_success(result)
    assert result["data"] == {"method": "GET", "path": "/v10/projects"}
    assert dict(api_log[0].url.params) == {"limit": "10"}


@pytest.mark.asyncio
async def test_unknown_tool_loads_its_group_and_evicts_lru(started, api_log):
    result = await started.handle_tool("create_dns_record", DNS_RECORD)

    assert is_success(result)
    assert result["data"] == {"method": "POST", "path": "/v2/domains/example.com/records"}
    assert json.loads(api_log[0].content) == {"name": "www", "type": "A", "value": "1.2.3.4"}
    assert started.tool_manager.get_active_groups() == ["infrastructure", "domains"]


@pytest.mark.asyncio
async def test_evicted_group_tools_stay_callable(started):
    await started.handle_tool("create_dns_record", DNS_RECORD)
    assert not started.tool_manager.is_active("projects")

    result = await started.handle_tool("list_projects", {})

    assert is_success(result)
    # Calling a tool of an inactive group does not reload the group
    assert started.tool_manager.get_active_groups() == ["infrastructure", "domains"]


@pytest.mark.asyncio
async def test_missing_arguments(started, api_log):
    result = await started.handle_tool("delete_project", {})

    assert not is_success(result)
    assert result["error"]["code"] == "INVALID_ARGUMENTS"
    assert "idOrName" in result["error"]["message"]
    assert api_log == []


@pytest.mark.asyncio
async def test_unclassifiable_tool(started):
    result = await started.handle_tool("xyz_totally_unrelated", {})

    assert result["error"]["code"] == "TOOL_NOT_FOUND"
    assert "details" not in result["error"]
    assert started.tool_manager.get_active_groups() == ["projects", "infrastructure"]


@pytest.mark.asyncio
async def test_tool_missing_from_suggested_group(started):
    result = await started.handle_tool("delete_domain_widget", {})

    assert result["error"]["code"] == "TOOL_NOT_FOUND"
    assert result["error"]["details"] == {"suggested_group": "domains"}


@pytest.mark.asyncio
async def test_api_error_envelope():
    def handler(request):
        return httpx.Response(403, json={"error": {"code": "forbidden"}})

    client = VercelClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    server = VercelMCPServer(Settings(base_url=BASE_URL), client=client)
    await server.bootstrap()

    result = await server.handle_tool("list_projects", {})

    assert result["error"]["code"] == "API_ERROR"
    assert result["error"]["details"] == {"status": 403}
    await client.close()


@pytest.mark.asyncio
async def test_transport_error_envelope():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = VercelClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    server = VercelMCPServer(Settings(base_url=BASE_URL), client=client)
    await server.bootstrap()

    result = await server.handle_tool("list_projects", {})

    assert result["error"]["code"] == "HTTP_ERROR"
    await client.close()


# ============================================================================
# Meta tools
# ============================================================================

@pytest.mark.asyncio
async def test_groups_status(started):
    result = await started.handle_tool("tool_groups_status", {})

    assert result["data"] == {
        "active": ["projects", "infrastructure"],
        "available": ["projects", "infrastructure", "access", "domains", "integrations"],
        "max_active": 2,
    }


@pytest.mark.asyncio
async def test_load_tool_group(started):
    result = await started.handle_tool("load_tool_group", {"group": "access"})

    assert is_success(result)
    assert result["data"]["active"] == ["infrastructure", "access"]
    assert started.host.has_tool("list_teams")


@pytest.mark.asyncio
@pytest.mark.parametrize("arguments,code", [
    ({}, "INVALID_ARGUMENTS"),
    ({"group": "billing"}, "UNKNOWN_GROUP"),
])
async def test_load_tool_group_errors(started, arguments, code):
    result = await started.handle_tool("load_tool_group", arguments)

    assert result["error"]["code"] == code
    assert started.tool_manager.get_active_groups() == ["projects", "infrastructure"]


@pytest.mark.asyncio
async def test_suggest_tool_groups(started):
    result = await started.handle_tool("suggest_tool_groups", {"query": "show integration marketplace listing"})

    assert result["data"]["suggested"] == "integrations"
    assert "integrations" in result["data"]["active"]


@pytest.mark.asyncio
async def test_suggest_tool_groups_without_match(started):
    result = await started.handle_tool("suggest_tool_groups", {"query": "xyz_totally_unrelated"})

    assert result["data"]["suggested"] is None
    assert result["data"]["active"] == ["projects", "infrastructure"]


@pytest.mark.asyncio
async def test_suggest_tool_groups_requires_query(started):
    result = await started.handle_tool("suggest_tool_groups", None)
    assert result["error"]["code"] == "INVALID_ARGUMENTS"


def test_server_info(server):
    info = server.server_info()

    assert info["name"] == "vercel-mcp"
    assert info["baseUrl"] == BASE_URL
    assert info["maxActiveGroups"] == 2
    assert info["activeGroups"] == []
