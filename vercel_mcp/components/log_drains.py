"""Log drain tools, for both configurable and integration log drains."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

SOURCES = {"type": "string", "enum": ["static", "lambda", "build", "edge", "external", "firewall"]}

ENDPOINTS = [
    Endpoint(
        name="logdrain_create",
        description="Create a configurable log drain",
        method="POST",
        path="/v1/log-drains",
        params=[
            body_param("deliveryFormat", "Delivery log format", required=True, enum=["json", "ndjson"]),
            body_param("url", "Log drain URL", required=True),
            body_param("headers", "Headers sent with log events", type="object"),
            body_param("projectIds", "Projects to drain logs from", type="array",
                       items={"type": "string"}),
            body_param("sources", "Log sources", type="array", items=SOURCES, required=True),
            body_param("environments", "Environments to drain", type="array",
                       items={"type": "string", "enum": ["preview", "production"]}),
            body_param("secret", "Secret used to sign log events"),
            body_param("samplingRate", "Fraction of logs to sample", type="number"),
            body_param("name", "Log drain name"),
        ],
    ),
    Endpoint(
        name="logdrain_create_integration",
        description="Create an integration log drain",
        method="POST",
        path="/v2/integrations/log-drains",
        params=[
            body_param("name", "Log drain name", required=True),
            body_param("url", "Log drain URL", required=True),
            body_param("deliveryFormat", "Delivery log format", enum=["json", "ndjson", "syslog"]),
            body_param("projectIds", "Projects to drain logs from", type="array",
                       items={"type": "string"}),
            body_param("secret", "Secret used to sign log events"),
            body_param("sources", "Log sources", type="array", items=SOURCES),
            body_param("headers", "Headers sent with log events", type="object"),
            body_param("environments", "Environments to drain", type="array",
                       items={"type": "string", "enum": ["preview", "production"]}),
        ],
    ),
    Endpoint(
        name="logdrain_delete",
        description="Delete a configurable log drain",
        method="DELETE",
        path="/v1/log-drains/{id}",
        params=[path_param("id", "The log drain ID")],
    ),
    Endpoint(
        name="logdrain_delete_integration",
        description="Delete an integration log drain",
        method="DELETE",
        path="/v1/integrations/log-drains/{id}",
        params=[path_param("id", "The log drain ID")],
    ),
    Endpoint(
        name="logdrain_get",
        description="Get a configurable log drain",
        path="/v1/log-drains/{id}",
        params=[path_param("id", "The log drain ID")],
    ),
    Endpoint(
        name="logdrain_list",
        description="List configurable log drains",
        path="/v1/log-drains",
        params=[
            query_param("projectId", "Filter by project ID"),
            query_param("projectIdOrName", "Filter by project ID or name"),
        ],
    ),
    Endpoint(
        name="logdrain_list_integration",
        description="List integration log drains",
        path="/v2/integrations/log-drains",
    ),
]


def register_log_drain_tools(host, client) -> List[str]:
    """Register log drain tools."""
    return register_endpoints(host, client, ENDPOINTS)
