"""Tests for endpoint definitions and their tool bindings."""

import json

import pytest

from vercel_mcp.components.endpoint import (
    Endpoint,
    build_request,
    build_tool,
    body_param,
    make_handler,
    path_param,
    query_param,
    register_endpoints,
)
from vercel_mcp.registry.tool_host import ToolHost


@pytest.fixture
def update_record():
    return Endpoint(
        name="update_record",
        description="Update a record",
        method="PATCH",
        path="/v1/domains/{domain}/records/{recordId}",
        params=[
            path_param("domain", "Domain name"),
            path_param("recordId", "Record ID"),
            query_param("force", type="boolean"),
            body_param("value", "New value", required=True),
            body_param("ttl", type="integer"),
        ],
    )


class TestBuildTool:

    def test_schema_lists_params_and_required(self, update_record):
        tool = build_tool(update_record)

        assert tool.name == "update_record"
        properties = tool.inputSchema["properties"]
        assert properties["ttl"] == {"type": "integer"}
        assert properties["domain"]["description"] == "Domain name"
        assert tool.inputSchema["required"] == ["domain", "recordId", "value"]

    def test_team_params_added(self, update_record):
        properties = build_tool(update_record).inputSchema["properties"]
        assert "teamId" in properties
        assert "slug" in properties

    def test_unscoped_endpoint_has_no_team_params(self):
        endpoint = Endpoint(name="vitals", description="", method="POST", path="/v1/vitals",
                            team_scoped=False, params=[body_param("dsn", required=True)])
        assert list(build_tool(endpoint).inputSchema["properties"]) == ["dsn"]

    def test_enum_and_array_schema(self):
        endpoint = Endpoint(name="x", description="", path="/x", params=[
            query_param("kind", enum=["A", "B"]),
            body_param("names", type="array", items={"type": "string"}),
        ])
        properties = build_tool(endpoint).inputSchema["properties"]
        assert properties["kind"]["enum"] == ["A", "B"]
        assert properties["names"]["items"] == {"type": "string"}


class TestBuildRequest:

    def test_arguments_split_by_location(self, update_record):
        method, path, query, body = build_request(update_record, {
            "domain": "example.com",
            "recordId": "rec_1",
            "force": True,
            "value": "1.2.3.4",
            "teamId": "team_1",
        })

        assert method == "PATCH"
        assert path == "/v1/domains/example.com/records/rec_1"
        assert query == {"force": True, "teamId": "team_1"}
        assert body == {"value": "1.2.3.4"}

    def test_path_values_escaped(self, update_record):
        _, path, _, _ = build_request(update_record, {
            "domain": "a/b", "recordId": "r 1", "value": "v"
        })
        assert path == "/v1/domains/a%2Fb/records/r%201"

    def test_missing_required_arguments(self, update_record):
        with pytest.raises(ValueError) as exc_info:
            build_request(update_record, {"domain": "example.com"})

        message = str(exc_info.value)
        assert "update_record" in message
        assert "recordId" in message
        assert "value" in message

    def test_no_body_for_read_endpoints(self):
        endpoint = Endpoint(name="get_x", description="", path="/v1/x/{id}",
                            params=[path_param("id")])
        assert build_request(endpoint, {"id": "1"}) == ("GET", "/v1/x/1", {}, None)


@pytest.mark.asyncio
async def test_handler_sends_request(update_record, mock_client, api_log):
    handler = make_handler(update_record, mock_client)

    result = await handler({"domain": "example.com", "recordId": "rec_1", "value": "v"})

    assert result == {"method": "PATCH", "path": "/v1/domains/example.com/records/rec_1"}
    assert json.loads(api_log[0].content) == {"value": "v"}
    await mock_client.close()


def test_register_endpoints(update_record, mock_client):
    host = ToolHost()
    other = Endpoint(name="other", description="", path="/other")

    names = register_endpoints(host, mock_client, [update_record, other])

    assert names == ["update_record", "other"]
    assert host.tool_names() == ["update_record", "other"]
