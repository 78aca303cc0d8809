"""Webhook tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

ENDPOINTS = [
    Endpoint(
        name="create_webhook",
        description="Create a webhook",
        method="POST",
        path="/v1/webhooks",
        params=[
            body_param("url", "The webhook URL", required=True),
            body_param("events", "Events that trigger the webhook", type="array",
                       items={"type": "string"}, required=True),
            body_param("projectIds", "Projects the webhook applies to", type="array",
                       items={"type": "string"}),
        ],
    ),
    Endpoint(
        name="delete_webhook",
        description="Delete a webhook",
        method="DELETE",
        path="/v1/webhooks/{id}",
        params=[path_param("id", "The webhook ID")],
    ),
    Endpoint(
        name="list_webhooks",
        description="List webhooks",
        path="/v1/webhooks",
        params=[query_param("projectId", "Filter by project ID")],
    ),
    Endpoint(
        name="get_webhook",
        description="Get a webhook",
        path="/v1/webhooks/{id}",
        params=[path_param("id", "The webhook ID")],
    ),
]


def register_webhook_tools(host, client) -> List[str]:
    """Register webhook tools."""
    return register_endpoints(host, client, ENDPOINTS)
