"""Project member tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

PROJECT_ID = path_param("idOrName", "The ID or name of the project")

ENDPOINTS = [
    Endpoint(
        name="add_project_member",
        description="Add a new member to a project",
        method="POST",
        path="/v1/projects/{idOrName}/members",
        params=[
            PROJECT_ID,
            body_param("uid", "The ID of the team member to add"),
            body_param("username", "The username of the team member to add"),
            body_param("email", "The email of the team member to add"),
            body_param("role", "The project role of the member", required=True,
                       enum=["ADMIN", "PROJECT_DEVELOPER", "PROJECT_VIEWER"]),
        ],
    ),
    Endpoint(
        name="list_project_members",
        description="List all members of a project",
        path="/v1/projects/{idOrName}/members",
        params=[
            PROJECT_ID,
            query_param("limit", "Maximum number of members to return", type="integer"),
            query_param("since", "Timestamp to only include members added since then", type="integer"),
            query_param("until", "Timestamp to only include members added until then", type="integer"),
            query_param("search", "Search by email, username or name"),
        ],
    ),
    Endpoint(
        name="remove_project_member",
        description="Remove a member from a project",
        method="DELETE",
        path="/v1/projects/{idOrName}/members/{uid}",
        params=[PROJECT_ID, path_param("uid", "The user ID of the member")],
    ),
]


def register_project_member_tools(host, client) -> List[str]:
    """Register project member tools."""
    return register_endpoints(host, client, ENDPOINTS)
