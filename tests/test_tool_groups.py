"""Tests for the group registry and the Vercel tool group modules."""

import pytest

from vercel_mcp.registry.tool_host import ToolHost
from vercel_mcp.tool_groups import (
    GROUP_MODULES,
    GroupRegistry,
    LoadError,
    UnknownGroup,
    create_group_registry,
)


# ============================================================================
# GroupRegistry
# ============================================================================

def test_registry_resolves_known_group():
    async def loader():
        return []

    registry = GroupRegistry({"a": loader})

    assert registry.resolve("a") is loader
    assert "a" in registry
    assert "b" not in registry


def test_unknown_group_lists_available():
    registry = GroupRegistry({"a": None, "b": None})

    with pytest.raises(UnknownGroup) as exc_info:
        registry.resolve("c")

    error = exc_info.value
    assert isinstance(error, LoadError)
    assert error.group == "c"
    assert "Available groups: a, b" in str(error)


def test_load_error_message_includes_cause():
    error = LoadError("domains", RuntimeError("boom"))
    assert str(error) == "Tool group 'domains' failed to load: boom"


def test_vercel_groups_in_definition_order(mock_client):
    registry = create_group_registry(ToolHost(), mock_client)

    assert registry.names() == ["projects", "infrastructure", "access", "domains", "integrations"]
    assert registry.names() == list(GROUP_MODULES)


# ============================================================================
# Group modules
# ============================================================================

EXPECTED_TOOLS = {
    "projects": ["list_projects", "create_deployment", "add_project_member"],
    "infrastructure": ["create_edge_config", "create_secret", "add_env", "create_webhook",
                       "logdrain_create", "send_web_vitals", "list_environments"],
    "access": ["list_teams", "get_user", "list_auth_tokens", "list_access_groups",
               "get_firewall_config"],
    "domains": ["add_domain", "create_dns_record", "issue_cert", "assign_alias"],
    "integrations": ["int_list", "marketplace_sso_token_exchange", "upload_artifact"],
}


@pytest.mark.asyncio
@pytest.mark.parametrize("group", list(GROUP_MODULES))
async def test_group_registers_its_tools(group, mock_client):
    host = ToolHost()
    registry = create_group_registry(host, mock_client)

    names = await registry.resolve(group)()

    assert names == host.tool_names()
    for tool_name in EXPECTED_TOOLS[group]:
        assert tool_name in names


@pytest.mark.asyncio
async def test_tool_names_unique_across_groups(mock_client):
    host = ToolHost()
    registry = create_group_registry(host, mock_client)

    all_names = []
    for group in registry.names():
        all_names.extend(await registry.resolve(group)())

    assert len(all_names) == len(set(all_names))
    assert len(host) == len(all_names)


@pytest.mark.asyncio
async def test_group_reload_replaces_tools(mock_client):
    host = ToolHost()
    registry = create_group_registry(host, mock_client)

    first = await registry.resolve("domains")()
    second = await registry.resolve("domains")()

    assert first == second
    assert len(host) == len(first)
    assert host.get("create_dns_record").registrations == 2
