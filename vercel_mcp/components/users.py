"""User tools for the authenticated account."""

from typing import List

from .endpoint import Endpoint, body_param, query_param, register_endpoints

ENDPOINTS = [
    Endpoint(
        name="get_user",
        description="Get the authenticated user",
        path="/v2/user",
        team_scoped=False,
    ),
    Endpoint(
        name="delete_user",
        description="Request deletion of the authenticated user account",
        method="DELETE",
        path="/v1/user",
        team_scoped=False,
        params=[
            body_param("reasons", "Reasons for deleting the account", type="array",
                       items={"type": "object"}),
        ],
    ),
    Endpoint(
        name="list_user_events",
        description="List events generated by the user or team",
        path="/v3/events",
        params=[
            query_param("limit", "Maximum number of events to return", type="integer"),
            query_param("since", "Events created after this timestamp"),
            query_param("until", "Events created before this timestamp"),
            query_param("types", "Comma-separated event types to filter by"),
            query_param("userId", "Only events generated by this user"),
            query_param("withPayload", "Include the event payload", enum=["true", "false"]),
        ],
    ),
]


def register_user_tools(host, client) -> List[str]:
    """Register user tools."""
    return register_endpoints(host, client, ENDPOINTS)
