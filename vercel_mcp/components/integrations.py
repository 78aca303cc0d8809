"""Integration configuration tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

ENDPOINTS = [
    Endpoint(
        name="int_delete",
        description="Delete an integration configuration",
        method="DELETE",
        path="/v1/integrations/configuration/{id}",
        params=[path_param("id", "The integration configuration ID")],
    ),
    Endpoint(
        name="int_list",
        description="List integration configurations",
        path="/v1/integrations/configurations",
        params=[
            query_param("view", "Which configurations to list", required=True,
                        enum=["account", "project"]),
            query_param("installationType", "Filter by installation type",
                        enum=["marketplace", "external"]),
            query_param("integrationIdOrSlug", "Filter by integration"),
        ],
    ),
    Endpoint(
        name="int_gitns",
        description="List git namespaces for an authenticated git provider",
        path="/v1/integrations/git-namespaces",
        params=[
            query_param("host", "Custom git host (self-hosted providers)"),
            query_param("provider", "Git provider", enum=["github", "gitlab", "bitbucket"]),
        ],
    ),
    Endpoint(
        name="int_search_repo",
        description="Search repositories of a git namespace",
        path="/v1/integrations/search-repo",
        params=[
            query_param("query", "Search text"),
            query_param("namespaceId", "The git namespace ID"),
            query_param("provider", "Git provider", enum=["github", "gitlab", "bitbucket"]),
            query_param("installationId", "The git installation ID"),
            query_param("host", "Custom git host"),
        ],
    ),
    Endpoint(
        name="int_get",
        description="Get an integration configuration",
        path="/v1/integrations/configuration/{id}",
        params=[path_param("id", "The integration configuration ID")],
    ),
    Endpoint(
        name="int_update_action",
        description="Update the status of an integration resource action on a deployment",
        method="PATCH",
        path=(
            "/v1/deployments/{deploymentId}/integrations/{integrationConfigurationId}"
            "/resources/{resourceId}/actions/{action}"
        ),
        params=[
            path_param("deploymentId", "The deployment ID"),
            path_param("integrationConfigurationId", "The integration configuration ID"),
            path_param("resourceId", "The resource ID"),
            path_param("action", "The action name"),
            body_param("status", "The action status", required=True,
                       enum=["running", "succeeded", "failed"]),
            body_param("statusText", "Human readable status message"),
            body_param("outcomes", "Outcomes of the action", type="array", items={"type": "object"}),
        ],
    ),
]


def register_integration_tools(host, client) -> List[str]:
    """Register integration configuration tools."""
    return register_endpoints(host, client, ENDPOINTS)
