"""Access group tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

GROUP_ID = path_param("idOrName", "The ID or name of the access group")
PARENT_GROUP_ID = path_param("accessGroupIdOrName", "The ID or name of the access group")
PROJECT_ID = path_param("projectId", "The project ID")
PROJECT_ROLE = ["ADMIN", "PROJECT_DEVELOPER", "PROJECT_VIEWER"]
PAGING = [
    query_param("limit", "Maximum number of results to return", type="integer"),
    query_param("next", "Continuation cursor from a previous request"),
]

ENDPOINTS = [
    Endpoint(
        name="create_access_group_project",
        description="Add a project to an access group",
        method="POST",
        path="/v1/access-groups/{accessGroupIdOrName}/projects",
        params=[
            PARENT_GROUP_ID,
            body_param("projectId", "The ID of the project", required=True),
            body_param("role", "The project role granted to the group", required=True,
                       enum=PROJECT_ROLE),
        ],
    ),
    Endpoint(
        name="create_access_group",
        description="Create an access group",
        method="POST",
        path="/v1/access-groups",
        params=[
            body_param("name", "The name of the access group", required=True),
            body_param("projects", "Projects and roles for the group", type="array",
                       items={"type": "object"}),
            body_param("membersToAdd", "User IDs to add to the group", type="array",
                       items={"type": "string"}),
        ],
    ),
    Endpoint(
        name="delete_access_group_project",
        description="Remove a project from an access group",
        method="DELETE",
        path="/v1/access-groups/{accessGroupIdOrName}/projects/{projectId}",
        params=[PARENT_GROUP_ID, PROJECT_ID],
    ),
    Endpoint(
        name="delete_access_group",
        description="Delete an access group",
        method="DELETE",
        path="/v1/access-groups/{idOrName}",
        params=[GROUP_ID],
    ),
    Endpoint(
        name="list_access_groups",
        description="List access groups for a team, project or member",
        path="/v1/access-groups",
        params=[
            query_param("projectId", "Filter by project"),
            query_param("search", "Search by name"),
            query_param("membersLimit", "Number of members to include", type="integer"),
            query_param("projectsLimit", "Number of projects to include", type="integer"),
            *PAGING,
        ],
    ),
    Endpoint(
        name="list_access_group_members",
        description="List the members of an access group",
        path="/v1/access-groups/{idOrName}/members",
        params=[GROUP_ID, query_param("search", "Search by name, username or email"), *PAGING],
    ),
    Endpoint(
        name="list_access_group_projects",
        description="List the projects of an access group",
        path="/v1/access-groups/{idOrName}/projects",
        params=[GROUP_ID, *PAGING],
    ),
    Endpoint(
        name="get_access_group",
        description="Read an access group",
        path="/v1/access-groups/{idOrName}",
        params=[GROUP_ID],
    ),
    Endpoint(
        name="get_access_group_project",
        description="Read a project of an access group",
        path="/v1/access-groups/{accessGroupIdOrName}/projects/{projectId}",
        params=[PARENT_GROUP_ID, PROJECT_ID],
    ),
    Endpoint(
        name="update_access_group",
        description="Update an access group's name, projects or members",
        method="POST",
        path="/v1/access-groups/{idOrName}",
        params=[
            GROUP_ID,
            body_param("name", "The new name of the access group"),
            body_param("projects", "Projects and roles for the group", type="array",
                       items={"type": "object"}),
            body_param("membersToAdd", "User IDs to add", type="array", items={"type": "string"}),
            body_param("membersToRemove", "User IDs to remove", type="array",
                       items={"type": "string"}),
        ],
    ),
    Endpoint(
        name="update_access_group_project",
        description="Update the role of a project in an access group",
        method="PATCH",
        path="/v1/access-groups/{accessGroupIdOrName}/projects/{projectId}",
        params=[
            PARENT_GROUP_ID,
            PROJECT_ID,
            body_param("role", "The project role granted to the group", required=True,
                       enum=PROJECT_ROLE),
        ],
    ),
]


def register_access_group_tools(host, client) -> List[str]:
    """Register access group tools."""
    return register_endpoints(host, client, ENDPOINTS)
