"""Deployment tools: create, inspect, cancel, events and files."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

DEPLOYMENT_ID = path_param("id", "The unique deployment identifier")

ENDPOINTS = [
    Endpoint(
        name="list_deployments",
        description="List deployments for a project",
        path="/v6/deployments",
        params=[
            query_param("projectId", "Filter deployments from the given project ID"),
            query_param("app", "Name of the deployment"),
            query_param("limit", "Maximum number of deployments to list", type="integer"),
            query_param("since", "Get deployments created after this timestamp", type="integer"),
            query_param("until", "Get deployments created before this timestamp", type="integer"),
            query_param(
                "state",
                "Filter by deployment state (BUILDING, ERROR, INITIALIZING, QUEUED, READY, CANCELED)",
            ),
            query_param("target", "Filter deployments based on environment"),
            query_param("users", "Filter deployments by user IDs (comma-separated)"),
            query_param("rollbackCandidate", "Filter deployments based on rollback candidacy", type="boolean"),
        ],
    ),
    Endpoint(
        name="create_deployment",
        description="Create a new deployment with all required data",
        method="POST",
        path="/v13/deployments",
        params=[
            body_param("name", "Project name used in the deployment URL", required=True),
            body_param("project", "Target project identifier (overrides name)"),
            body_param("files", "Files to be deployed ({file, data, encoding})", type="array",
                       items={"type": "object"}),
            body_param("gitMetadata", "Git metadata for the deployment", type="object"),
            body_param("gitSource", "Git repository source", type="object"),
            body_param("target", "Deployment target (production, preview, staging)"),
            body_param("deploymentId", "Existing deployment ID to redeploy"),
            body_param("meta", "Deployment metadata", type="object"),
            body_param("projectSettings", "Project settings for the deployment", type="object"),
            body_param("customEnvironmentSlugOrId", "Custom environment to deploy to"),
            body_param("withLatestCommit", "Force latest commit when redeploying", type="boolean"),
            query_param("forceNew", "Force new deployment even if similar exists", type="boolean"),
            query_param(
                "skipAutoDetectionConfirmation",
                "Skip framework detection confirmation",
                type="boolean",
            ),
        ],
    ),
    Endpoint(
        name="cancel_deployment",
        description="Cancel a deployment which is currently building",
        method="PATCH",
        path="/v12/deployments/{id}/cancel",
        params=[DEPLOYMENT_ID],
    ),
    Endpoint(
        name="get_deployment",
        description="Get a deployment by ID or URL",
        path="/v13/deployments/{idOrUrl}",
        params=[
            path_param("idOrUrl", "The unique identifier or hostname of the deployment"),
            query_param("withGitRepoInfo", "Include git repository information", type="boolean"),
        ],
    ),
    Endpoint(
        name="delete_deployment",
        description="Delete a deployment by ID",
        method="DELETE",
        path="/v13/deployments/{id}",
        params=[
            DEPLOYMENT_ID,
            query_param("url", "A Deployment or Alias URL; the id is ignored when given"),
        ],
    ),
    Endpoint(
        name="get_deployment_events",
        description="Get build logs and events for a deployment",
        path="/v3/deployments/{idOrUrl}/events",
        params=[
            path_param("idOrUrl", "The unique identifier or hostname of the deployment"),
            query_param("direction", "Order of the returned events", enum=["forward", "backward"]),
            query_param("follow", "Stream events as they happen", type="integer", enum=[0, 1]),
            query_param("limit", "Maximum number of events to return", type="integer"),
            query_param("name", "Deployment build ID"),
            query_param("since", "Timestamp to start pulling logs from", type="integer"),
            query_param("until", "Timestamp to pull logs until", type="integer"),
            query_param("statusCode", "HTTP status code range to filter events by"),
            query_param("delimiter", "Delimiter to split events by", type="integer", enum=[0, 1]),
            query_param("builds", "Include build events", type="integer", enum=[0, 1]),
        ],
    ),
    Endpoint(
        name="update_deployment_integration",
        description="Update the action status of an integration resource attached to a deployment",
        method="PATCH",
        path=(
            "/v1/deployments/{deploymentId}/integrations/{integrationConfigurationId}"
            "/resources/{resourceId}/actions/{action}"
        ),
        params=[
            path_param("deploymentId", "The deployment ID"),
            path_param("integrationConfigurationId", "The integration configuration ID"),
            path_param("resourceId", "The resource ID"),
            path_param("action", "The action to update"),
            body_param("status", "The action status", required=True,
                       enum=["running", "succeeded", "failed"]),
            body_param("statusText", "Human readable status message"),
            body_param("outcomes", "Outcomes of the action", type="array", items={"type": "object"}),
        ],
    ),
    Endpoint(
        name="list_deployment_files",
        description="List the file structure of a deployment's source",
        path="/v6/deployments/{id}/files",
        params=[DEPLOYMENT_ID],
    ),
    Endpoint(
        name="upload_deployment_files",
        description="Upload a file referenced by a future deployment",
        method="POST",
        path="/v2/files",
        params=[
            body_param("file", "File contents", required=True),
            body_param("digest", "SHA1 digest of the file"),
            body_param("size", "File size in bytes", type="integer"),
        ],
    ),
    Endpoint(
        name="get_deployment_file",
        description="Get the contents of a file from a deployment",
        path="/v7/deployments/{id}/files/{fileId}",
        params=[
            DEPLOYMENT_ID,
            path_param("fileId", "The unique file identifier"),
            query_param("path", "Path to the file (git deployments only)"),
        ],
    ),
    Endpoint(
        name="list_deployment",
        description="List deployments under the authenticated user or team",
        path="/v6/deployments",
        params=[
            query_param("app", "Name of the deployment"),
            query_param("from", "Get deployments created after this timestamp", type="integer"),
            query_param("limit", "Maximum number of deployments to list", type="integer"),
            query_param("projectId", "Filter deployments from the given project"),
            query_param("target", "Filter deployments based on environment"),
            query_param("state", "Filter by deployment state"),
            query_param("to", "Get deployments created before this timestamp", type="integer"),
        ],
    ),
]


def register_deployment_tools(host, client) -> List[str]:
    """Register deployment tools."""
    return register_endpoints(host, client, ENDPOINTS)
