"""Tests for the Vercel MCP resource provider."""

import json

import pytest

from vercel_mcp.resources.vercel_resources import (
    CONFIG_URI,
    USER_URI,
    ResourceNotFound,
    VercelResourceProvider,
)


@pytest.fixture
def provider(mock_client):
    return VercelResourceProvider(mock_client, lambda: {"name": "vercel-mcp"})


@pytest.mark.asyncio
async def test_static_resources(provider):
    uris = [str(r.uri).rstrip("/") for r in await provider.list_resources()]
    assert uris == [USER_URI, CONFIG_URI]


@pytest.mark.asyncio
async def test_templates_cover_parameterized_resources(provider):
    templates = {t.uriTemplate for t in await provider.list_resource_templates()}

    assert "projects://{projectId}" in templates
    assert "deployments://{deploymentId}" in templates
    assert not any(t.startswith("user://") for t in templates)


@pytest.mark.asyncio
async def test_read_project(provider, api_log):
    data = json.loads(await provider.read_resource("projects://prj_123"))

    assert data == {"method": "GET", "path": "/v9/projects/prj_123"}
    assert len(api_log) == 1


@pytest.mark.asyncio
async def test_read_user(provider):
    data = json.loads(await provider.read_resource(USER_URI))
    assert data["path"] == "/v2/user"


@pytest.mark.asyncio
async def test_read_config_does_not_call_api(provider, api_log):
    data = json.loads(await provider.read_resource(CONFIG_URI))

    assert data == {"name": "vercel-mcp"}
    assert api_log == []


@pytest.mark.asyncio
@pytest.mark.parametrize("uri", ["nope://x", "projects://", "not-a-uri"])
async def test_unknown_resources(provider, uri):
    with pytest.raises(ResourceNotFound):
        await provider.read_resource(uri)
