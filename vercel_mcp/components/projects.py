"""Project tools: CRUD, promotion, pausing and transfers."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

PROJECT_ID = path_param("idOrName", "The unique project identifier or the project name")

ENDPOINTS = [
    Endpoint(
        name="list_projects",
        description=(
            "List all projects from Vercel. Commands: 'list projects', 'show projects', "
            "'get projects', 'list my projects', 'view projects'"
        ),
        path="/v10/projects",
        params=[
            query_param("search", "Search projects by the name field"),
            query_param("limit", "Limit the number of projects returned", type="integer"),
            query_param("from", "Query only projects updated after the given timestamp"),
            query_param("repoUrl", "Filter results by repository URL"),
        ],
    ),
    Endpoint(
        name="create_project",
        description="Create a new project with the provided configuration",
        method="POST",
        path="/v10/projects",
        params=[
            body_param("name", "The desired name for the project", required=True),
            body_param("framework", "The framework being used for this project"),
            body_param("buildCommand", "The build command for this project"),
            body_param("devCommand", "The dev command for this project"),
            body_param("installCommand", "The install command for this project"),
            body_param("outputDirectory", "The output directory of the project"),
            body_param("publicSource", "Whether source code and logs should be public", type="boolean"),
            body_param("rootDirectory", "The directory or relative path to the source code"),
            body_param("serverlessFunctionRegion", "The region to deploy Serverless Functions"),
            body_param("gitRepository", "The Git Repository to connect ({type, repo})", type="object"),
            body_param(
                "environmentVariables",
                "Collection of ENV Variables ({key, value, target, type})",
                type="array",
                items={"type": "object"},
            ),
        ],
    ),
    Endpoint(
        name="delete_project",
        description="Delete a specific project",
        method="DELETE",
        path="/v9/projects/{idOrName}",
        params=[PROJECT_ID],
    ),
    Endpoint(
        name="update_project",
        description="Update an existing project",
        method="PATCH",
        path="/v9/projects/{idOrName}",
        params=[
            PROJECT_ID,
            body_param("name", "The desired name for the project"),
            body_param("framework", "The framework being used for this project"),
            body_param("buildCommand", "The build command for this project"),
            body_param("devCommand", "The dev command for this project"),
            body_param("installCommand", "The install command for this project"),
            body_param("outputDirectory", "The output directory of the project"),
            body_param("rootDirectory", "The directory or relative path to the source code"),
            body_param("nodeVersion", "Node.js version for builds"),
            body_param("publicSource", "Whether source code and logs should be public", type="boolean"),
            body_param("autoExposeSystemEnvs", "Expose system environment variables", type="boolean"),
        ],
    ),
    Endpoint(
        name="promote_deployment",
        description="Promote a deployment to production without rebuilding it",
        method="POST",
        path="/v10/projects/{projectId}/promote/{deploymentId}",
        params=[
            path_param("projectId", "The project ID"),
            path_param("deploymentId", "The ID of the deployment to promote"),
        ],
    ),
    Endpoint(
        name="get_promotion_aliases",
        description="Get the aliases affected by a pending promotion",
        path="/v1/projects/{projectId}/promote/aliases",
        params=[
            path_param("projectId", "The project ID"),
            query_param("limit", "Maximum number of aliases to list", type="integer"),
            query_param("failedOnly", "Only return aliases that failed to map", type="boolean"),
        ],
    ),
    Endpoint(
        name="pause_project",
        description="Pause a project, disabling its production deployment",
        method="POST",
        path="/v1/projects/{projectId}/pause",
        params=[path_param("projectId", "The project ID")],
    ),
    Endpoint(
        name="request_project_transfer",
        description="Create a request to transfer a project to another team",
        method="POST",
        path="/projects/{idOrName}/transfer-request",
        params=[
            PROJECT_ID,
            body_param("callbackUrl", "URL to notify when the transfer completes"),
            body_param("callbackSecret", "Secret used to sign the callback"),
        ],
    ),
    Endpoint(
        name="accept_project_transfer",
        description="Accept a project transfer request using its code",
        method="PUT",
        path="/projects/transfer-request/{code}",
        params=[
            path_param("code", "The transfer request code"),
            body_param("newProjectName", "Name for the project in the destination team"),
        ],
    ),
]


def register_project_tools(host, client) -> List[str]:
    """Register project tools."""
    return register_endpoints(host, client, ENDPOINTS)
