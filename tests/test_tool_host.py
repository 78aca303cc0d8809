"""Tests for ToolHost registration and dispatch."""

import pytest
from mcp.types import Tool

from vercel_mcp.registry.tool_host import InvalidToolDefinition, ToolHost, ToolNotFound


def make_tool(name: str, description: str = "test tool") -> Tool:
    return Tool(name=name, description=description, inputSchema={"type": "object", "properties": {}})


async def echo(arguments):
    return {"echo": arguments}


def test_register_and_list():
    host = ToolHost()
    host.register_tool(make_tool("b"), echo)
    host.register_tool(make_tool("a"), echo)

    assert host.tool_names() == ["b", "a"]
    assert [t.name for t in host.list_tools()] == ["b", "a"]
    assert host.has_tool("a")
    assert not host.has_tool("c")
    assert len(host) == 2


def test_reregistration_replaces_definition():
    """Loading a group again re-registers its tools without error."""
    host = ToolHost()
    host.register_tool(make_tool("a", "first"), echo)
    host.register_tool(make_tool("a", "second"), echo)

    entry = host.get("a")
    assert entry.tool.description == "second"
    assert entry.registrations == 2
    assert len(host) == 1


def test_invalid_definitions_rejected():
    host = ToolHost()

    with pytest.raises(InvalidToolDefinition):
        host.register_tool(make_tool(""), echo)

    with pytest.raises(InvalidToolDefinition):
        host.register_tool(make_tool("a"), None)


def test_get_missing_tool():
    with pytest.raises(ToolNotFound):
        ToolHost().get("missing")


@pytest.mark.asyncio
async def test_call_tool_passes_arguments():
    host = ToolHost()
    host.register_tool(make_tool("a"), echo)

    assert await host.call_tool("a", {"x": 1}) == {"echo": {"x": 1}}
    assert await host.call_tool("a") == {"echo": {}}


@pytest.mark.asyncio
async def test_call_missing_tool():
    with pytest.raises(ToolNotFound):
        await ToolHost().call_tool("missing", {})
