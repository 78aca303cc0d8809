"""Custom environment tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, register_endpoints

PROJECT_ID = path_param("idOrName", "The unique project identifier or the project name")
ENVIRONMENT_ID = path_param("environmentSlugOrId", "The custom environment slug or ID")
BRANCH_MATCHER = body_param(
    "branchMatcher",
    "How to match git branches ({type: equals|startsWith|endsWith, pattern})",
    type="object",
)

ENDPOINTS = [
    Endpoint(
        name="create_environment",
        description="Create a custom environment for a project",
        method="POST",
        path="/v9/projects/{idOrName}/custom-environments",
        params=[
            PROJECT_ID,
            body_param("slug", "Slug of the custom environment", required=True),
            body_param("description", "Description of the custom environment"),
            BRANCH_MATCHER,
            body_param("copyEnvVarsFrom", "Environment to copy variables from"),
        ],
    ),
    Endpoint(
        name="delete_environment",
        description="Remove a custom environment from a project",
        method="DELETE",
        path="/v9/projects/{idOrName}/custom-environments/{environmentSlugOrId}",
        params=[
            PROJECT_ID,
            ENVIRONMENT_ID,
            body_param("deleteUnassignedEnvironmentVariables",
                       "Delete variables no longer assigned to any environment", type="boolean"),
        ],
    ),
    Endpoint(
        name="get_environment",
        description="Retrieve a custom environment",
        path="/v9/projects/{idOrName}/custom-environments/{environmentSlugOrId}",
        params=[PROJECT_ID, ENVIRONMENT_ID],
    ),
    Endpoint(
        name="list_environments",
        description="List the custom environments of a project",
        path="/v9/projects/{idOrName}/custom-environments",
        params=[PROJECT_ID],
    ),
    Endpoint(
        name="update_environment",
        description="Update a custom environment",
        method="PATCH",
        path="/v9/projects/{idOrName}/custom-environments/{environmentSlugOrId}",
        params=[
            PROJECT_ID,
            ENVIRONMENT_ID,
            body_param("slug", "New slug of the custom environment"),
            body_param("description", "Description of the custom environment"),
            BRANCH_MATCHER,
        ],
    ),
]


def register_environment_tools(host, client) -> List[str]:
    """Register custom environment tools."""
    return register_endpoints(host, client, ENDPOINTS)
