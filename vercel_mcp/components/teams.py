"""Team tools: teams and their members."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

TEAM_ID = path_param("teamId", "The Team identifier")
ROLES = ["OWNER", "MEMBER", "DEVELOPER", "BILLING", "VIEWER", "CONTRIBUTOR"]

ENDPOINTS = [
    Endpoint(
        name="create_team",
        description="Create a new team",
        method="POST",
        path="/v1/teams",
        team_scoped=False,
        params=[
            body_param("slug", "The desired slug for the team", required=True),
            body_param("name", "The desired name for the team"),
        ],
    ),
    Endpoint(
        name="delete_team",
        description="Delete a team",
        method="DELETE",
        path="/v1/teams/{teamId}",
        params=[
            TEAM_ID,
            query_param("newDefaultTeamId", "Team to make default after deletion"),
            body_param("reasons", "Reasons for deleting the team", type="array",
                       items={"type": "object"}),
        ],
    ),
    Endpoint(
        name="get_team",
        description="Get information about a team",
        path="/v2/teams/{teamId}",
        params=[TEAM_ID],
    ),
    Endpoint(
        name="list_teams",
        description="List the teams the authenticated user is a member of",
        path="/v2/teams",
        team_scoped=False,
        params=[
            query_param("limit", "Maximum number of teams to return", type="integer"),
            query_param("since", "Include teams created since timestamp", type="integer"),
            query_param("until", "Include teams created until timestamp", type="integer"),
        ],
    ),
    Endpoint(
        name="list_team_members",
        description="List the members of a team",
        path="/v2/teams/{teamId}/members",
        params=[
            TEAM_ID,
            query_param("limit", "Maximum number of members to return", type="integer"),
            query_param("since", "Include members added since timestamp", type="integer"),
            query_param("until", "Include members added until timestamp", type="integer"),
            query_param("search", "Search by name, username or email"),
            query_param("role", "Only members with this role", enum=ROLES),
            query_param("excludeProject", "Exclude members of this project"),
            query_param("eligibleMembersForProjectId", "Members eligible for this project"),
        ],
    ),
    Endpoint(
        name="invite_team_member",
        description="Invite a user to join a team",
        method="POST",
        path="/v1/teams/{teamId}/members",
        params=[
            TEAM_ID,
            body_param("uid", "The ID of the user to invite"),
            body_param("email", "The email of the user to invite"),
            body_param("role", "The role of the invited member", enum=ROLES),
            body_param("projects", "Project roles for the member", type="array",
                       items={"type": "object"}),
        ],
    ),
    Endpoint(
        name="remove_team_member",
        description="Remove a member from a team",
        method="DELETE",
        path="/v1/teams/{teamId}/members/{uid}",
        params=[
            TEAM_ID,
            path_param("uid", "The user ID of the member"),
            query_param("newDefaultTeamId", "New default team for the removed user"),
        ],
    ),
    Endpoint(
        name="update_team_member",
        description="Update a team member's role or confirm a join request",
        method="PATCH",
        path="/v1/teams/{teamId}/members/{uid}",
        params=[
            TEAM_ID,
            path_param("uid", "The user ID of the member"),
            body_param("confirmed", "Accept a pending join request", type="boolean"),
            body_param("role", "The new role of the member", enum=ROLES),
            body_param("projects", "Project roles for the member", type="array",
                       items={"type": "object"}),
            body_param("joinedFrom", "Origin of the membership", type="object"),
        ],
    ),
    Endpoint(
        name="update_team",
        description="Update team settings",
        method="PATCH",
        path="/v2/teams/{teamId}",
        params=[
            TEAM_ID,
            body_param("avatar", "Hash of the uploaded avatar"),
            body_param("description", "Team description"),
            body_param("emailDomain", "Email domain of the team"),
            body_param("name", "Team name"),
            body_param("previewDeploymentSuffix", "Suffix for preview deployment URLs"),
            body_param("regenerateInviteCode", "Create a new invite code", type="boolean"),
            body_param("saml", "SAML settings", type="object"),
            body_param("enablePreviewFeedback", "Preview toolbar setting"),
            body_param("sensitiveEnvironmentVariablePolicy", "Sensitive variable policy"),
            body_param("remoteCaching", "Remote caching settings", type="object"),
            body_param("hideIpAddresses", "Hide IP addresses in logs", type="boolean"),
        ],
    ),
]


def register_team_tools(host, client) -> List[str]:
    """Register team tools."""
    return register_endpoints(host, client, ENDPOINTS)
