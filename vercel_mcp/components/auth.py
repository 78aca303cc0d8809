"""Authentication token tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, register_endpoints

TOKEN_ID = path_param("tokenId", "The identifier of the token ('current' for the one in use)")

ENDPOINTS = [
    Endpoint(
        name="create_auth_token",
        description="Create a new authentication token",
        method="POST",
        path="/v3/user/tokens",
        params=[
            body_param("name", "Name of the token", required=True),
            body_param("expiresAt", "Expiration timestamp in milliseconds", type="integer"),
        ],
    ),
    Endpoint(
        name="delete_auth_token",
        description="Invalidate an authentication token",
        method="DELETE",
        path="/v3/user/tokens/{tokenId}",
        team_scoped=False,
        params=[TOKEN_ID],
    ),
    Endpoint(
        name="get_auth_token",
        description="Retrieve metadata about an authentication token",
        path="/v5/user/tokens/{tokenId}",
        team_scoped=False,
        params=[TOKEN_ID],
    ),
    Endpoint(
        name="list_auth_tokens",
        description="List the authentication tokens of the user",
        path="/v5/user/tokens",
        team_scoped=False,
    ),
    Endpoint(
        name="sso_token_exchange",
        description="Exchange an integration SSO authorization code for a token",
        method="POST",
        path="/v1/integrations/sso/token",
        team_scoped=False,
        params=[
            body_param("code", "The sensitive code received from Vercel", required=True),
            body_param("state", "The state received from the initialization request"),
            body_param("client_id", "The integration client id", required=True),
            body_param("client_secret", "The integration client secret", required=True),
            body_param("redirect_uri", "The integration redirect URI"),
        ],
    ),
]


def register_auth_tools(host, client) -> List[str]:
    """Register authentication token tools."""
    return register_endpoints(host, client, ENDPOINTS)
