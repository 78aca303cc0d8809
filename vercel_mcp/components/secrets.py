"""Secret tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

ENDPOINTS = [
    Endpoint(
        name="create_secret",
        description="Create a new secret",
        method="POST",
        path="/v2/secrets/{name}",
        params=[
            path_param("name", "The name of the secret"),
            body_param("value", "The value of the secret", required=True),
            body_param("decryptable", "Whether the secret value can be decrypted after creation",
                       type="boolean"),
            body_param("projectId", "Associate the secret with a project"),
        ],
    ),
    Endpoint(
        name="update_secret_name",
        description="Change the name of a secret",
        method="PATCH",
        path="/v2/secrets/{currentName}",
        params=[
            path_param("currentName", "The current name of the secret"),
            body_param("name", "The new name of the secret", required=True),
        ],
    ),
    Endpoint(
        name="delete_secret",
        description="Delete a secret",
        method="DELETE",
        path="/v2/secrets/{idOrName}",
        params=[path_param("idOrName", "The name or unique identifier of the secret")],
    ),
    Endpoint(
        name="get_secret",
        description="Get information for a specific secret",
        path="/v3/secrets/{idOrName}",
        params=[
            path_param("idOrName", "The name or unique identifier of the secret"),
            query_param("decrypt", "Whether to decrypt the value", enum=["true", "false"]),
        ],
    ),
    Endpoint(
        name="list_secrets",
        description="List all secrets",
        path="/v3/secrets",
        params=[
            query_param("id", "Filter by comma-separated secret IDs"),
            query_param("projectId", "Filter by project ID"),
        ],
    ),
]


def register_secret_tools(host, client) -> List[str]:
    """Register secret tools."""
    return register_endpoints(host, client, ENDPOINTS)
