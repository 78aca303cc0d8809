"""Deployment alias tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

ENDPOINTS = [
    Endpoint(
        name="assign_alias",
        description="Assign an alias to a deployment",
        method="POST",
        path="/v2/deployments/{id}/aliases",
        params=[
            path_param("id", "The deployment ID"),
            body_param("alias", "The alias to assign", required=True),
            body_param("redirect", "Hostname to redirect the alias to"),
        ],
    ),
    Endpoint(
        name="delete_alias",
        description="Delete an alias",
        method="DELETE",
        path="/v2/aliases/{aliasId}",
        params=[path_param("aliasId", "The alias ID or alias hostname")],
    ),
    Endpoint(
        name="get_alias",
        description="Get information about an alias",
        path="/v4/aliases/{idOrAlias}",
        params=[
            path_param("idOrAlias", "The alias ID or hostname"),
            query_param("projectId", "Get the alias only if it belongs to this project"),
            query_param("since", "Alias created after this timestamp", type="integer"),
            query_param("until", "Alias created before this timestamp", type="integer"),
        ],
    ),
    Endpoint(
        name="list_aliases",
        description="List aliases for the authenticated user or team",
        path="/v4/aliases",
        params=[
            query_param("domain", "Only aliases of this domain"),
            query_param("limit", "Maximum number of aliases", type="integer"),
            query_param("projectId", "Only aliases of this project"),
            query_param("since", "Aliases created after this timestamp", type="integer"),
            query_param("until", "Aliases created before this timestamp", type="integer"),
            query_param("rollbackDeploymentId", "Aliases that would be rolled back"),
        ],
    ),
    Endpoint(
        name="list_deployment_aliases",
        description="List the aliases assigned to a deployment",
        path="/v2/deployments/{id}/aliases",
        params=[path_param("id", "The deployment ID")],
    ),
]


def register_alias_tools(host, client) -> List[str]:
    """Register alias tools."""
    return register_endpoints(host, client, ENDPOINTS)
