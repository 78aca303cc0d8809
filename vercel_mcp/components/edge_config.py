"""Edge Config tools: stores, items, schema, tokens and backups."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

EDGE_CONFIG_ID = path_param("edgeConfigId", "The Edge Config identifier")

ENDPOINTS = [
    Endpoint(
        name="create_edge_config",
        description="Create a new Edge Config",
        method="POST",
        path="/v1/edge-config",
        params=[
            body_param("slug", "Name of the Edge Config", required=True),
            body_param("items", "Initial key/value items", type="object"),
        ],
    ),
    Endpoint(
        name="create_edge_config_token",
        description="Create a read token for an Edge Config",
        method="POST",
        path="/v1/edge-config/{edgeConfigId}/token",
        params=[EDGE_CONFIG_ID, body_param("label", "Token label", required=True)],
    ),
    Endpoint(
        name="list_edge_configs",
        description="List all Edge Configs",
        path="/v1/edge-config",
    ),
    Endpoint(
        name="get_edge_config",
        description="Get an Edge Config",
        path="/v1/edge-config/{edgeConfigId}",
        params=[EDGE_CONFIG_ID],
    ),
    Endpoint(
        name="update_edge_config",
        description="Update an Edge Config's name",
        method="PUT",
        path="/v1/edge-config/{edgeConfigId}",
        params=[EDGE_CONFIG_ID, body_param("slug", "New name of the Edge Config", required=True)],
    ),
    Endpoint(
        name="delete_edge_config",
        description="Delete an Edge Config",
        method="DELETE",
        path="/v1/edge-config/{edgeConfigId}",
        params=[EDGE_CONFIG_ID],
    ),
    Endpoint(
        name="list_edge_config_items",
        description="List all items of an Edge Config",
        path="/v1/edge-config/{edgeConfigId}/items",
        params=[EDGE_CONFIG_ID],
    ),
    Endpoint(
        name="get_edge_config_item",
        description="Get a single item of an Edge Config",
        path="/v1/edge-config/{edgeConfigId}/item/{itemKey}",
        params=[EDGE_CONFIG_ID, path_param("itemKey", "The item key")],
    ),
    Endpoint(
        name="update_edge_config_items",
        description="Create, update or delete items of an Edge Config",
        method="PATCH",
        path="/v1/edge-config/{edgeConfigId}/items",
        params=[
            EDGE_CONFIG_ID,
            body_param(
                "items",
                "Item operations ({operation: create|update|upsert|delete, key, value, description})",
                type="array",
                items={"type": "object"},
                required=True,
            ),
        ],
    ),
    Endpoint(
        name="get_edge_config_schema",
        description="Get the JSON schema of an Edge Config",
        path="/v1/edge-config/{edgeConfigId}/schema",
        params=[EDGE_CONFIG_ID],
    ),
    Endpoint(
        name="update_edge_config_schema",
        description="Set the JSON schema of an Edge Config",
        method="POST",
        path="/v1/edge-config/{edgeConfigId}/schema",
        params=[
            EDGE_CONFIG_ID,
            body_param("definition", "JSON schema definition", type="object", required=True),
            query_param("dryRun", "Validate without saving"),
        ],
    ),
    Endpoint(
        name="delete_edge_config_schema",
        description="Delete the JSON schema of an Edge Config",
        method="DELETE",
        path="/v1/edge-config/{edgeConfigId}/schema",
        params=[EDGE_CONFIG_ID],
    ),
    Endpoint(
        name="list_edge_config_tokens",
        description="List the read tokens of an Edge Config",
        path="/v1/edge-config/{edgeConfigId}/tokens",
        params=[EDGE_CONFIG_ID],
    ),
    Endpoint(
        name="get_edge_config_token",
        description="Get metadata about an Edge Config token",
        path="/v1/edge-config/{edgeConfigId}/token/{token}",
        params=[EDGE_CONFIG_ID, path_param("token", "The token value")],
    ),
    Endpoint(
        name="delete_edge_config_tokens",
        description="Delete read tokens of an Edge Config",
        method="DELETE",
        path="/v1/edge-config/{edgeConfigId}/tokens",
        params=[
            EDGE_CONFIG_ID,
            body_param("tokens", "Tokens to delete", type="array", items={"type": "string"},
                       required=True),
        ],
    ),
    Endpoint(
        name="list_edge_config_backups",
        description="List backups of an Edge Config",
        path="/v1/edge-config/{edgeConfigId}/backups",
        params=[
            EDGE_CONFIG_ID,
            query_param("next", "Pagination cursor"),
            query_param("limit", "Maximum number of backups to return", type="integer"),
            query_param("metadata", "Include backup metadata"),
        ],
    ),
    Endpoint(
        name="get_edge_config_backup",
        description="Get a specific backup of an Edge Config",
        path="/v1/edge-config/{edgeConfigId}/backups/{backupId}",
        params=[EDGE_CONFIG_ID, path_param("backupId", "The backup version ID")],
    ),
]


def register_edge_config_tools(host, client) -> List[str]:
    """Register Edge Config tools."""
    return register_endpoints(host, client, ENDPOINTS)
