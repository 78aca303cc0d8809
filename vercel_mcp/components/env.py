"""Project environment variable tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

PROJECT_ID = path_param("idOrName", "The unique project identifier or the project name")
ENV_ID = path_param("id", "The unique environment variable identifier")
TARGETS = {"type": "string", "enum": ["production", "preview", "development"]}

ENDPOINTS = [
    Endpoint(
        name="add_env",
        description="Create one environment variable for a project",
        method="POST",
        path="/v10/projects/{idOrName}/env",
        params=[
            PROJECT_ID,
            body_param("key", "The name of the environment variable", required=True),
            body_param("value", "The value of the environment variable", required=True),
            body_param("type", "The type of environment variable", required=True,
                       enum=["system", "secret", "encrypted", "plain", "sensitive"]),
            body_param("target", "The target environments", type="array", items=TARGETS,
                       required=True),
            body_param("gitBranch", "Git branch the variable applies to"),
            body_param("comment", "A comment to add context"),
            query_param("upsert", "Update the variable if it already exists", enum=["true"]),
        ],
    ),
    Endpoint(
        name="update_env",
        description="Edit a project environment variable",
        method="PATCH",
        path="/v9/projects/{idOrName}/env/{id}",
        params=[
            PROJECT_ID,
            ENV_ID,
            body_param("key", "The name of the environment variable"),
            body_param("value", "The value of the environment variable"),
            body_param("type", "The type of environment variable",
                       enum=["system", "secret", "encrypted", "plain", "sensitive"]),
            body_param("target", "The target environments", type="array", items=TARGETS),
            body_param("gitBranch", "Git branch the variable applies to"),
            body_param("comment", "A comment to add context"),
        ],
    ),
    Endpoint(
        name="delete_env",
        description="Delete a project environment variable",
        method="DELETE",
        path="/v9/projects/{idOrName}/env/{id}",
        params=[PROJECT_ID, ENV_ID],
    ),
    Endpoint(
        name="get_env",
        description="Retrieve the decrypted value of a project environment variable",
        path="/v1/projects/{idOrName}/env/{id}",
        params=[PROJECT_ID, ENV_ID],
    ),
    Endpoint(
        name="list_env",
        description="List the environment variables of a project",
        path="/v9/projects/{idOrName}/env",
        params=[
            PROJECT_ID,
            query_param("gitBranch", "Only variables for this git branch"),
            query_param("decrypt", "Return decrypted values", enum=["true", "false"]),
            query_param("customEnvironmentId", "Only variables for this custom environment"),
        ],
    ),
]


def register_env_tools(host, client) -> List[str]:
    """Register environment variable tools."""
    return register_endpoints(host, client, ENDPOINTS)
