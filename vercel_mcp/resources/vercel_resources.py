"""MCP resource provider for Vercel objects.

Resources are always available; they do not belong to any tool group.
"""

import json
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from urllib.parse import quote

from mcp.types import Resource, ResourceTemplate

from ..api.client import VercelClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VercelResource:
    """A URI scheme mapped onto one API path."""
    scheme: str
    name: str
    description: str
    path: str                       # API path with a single "{id}" slot
    variable: Optional[str] = None  # URI template variable, None for static resources


RESOURCES: List[VercelResource] = [
    VercelResource("projects", "project", "Project details", "/v9/projects/{id}", "projectId"),
    VercelResource("teams", "team", "Team details", "/v2/teams/{id}", "teamId"),
    VercelResource("deployments", "deployment", "Deployment details",
                   "/v13/deployments/{id}", "deploymentId"),
    VercelResource("env", "env-vars", "Environment variables of a project",
                   "/v9/projects/{id}/env", "projectId"),
    VercelResource("domains", "domains", "Domain details", "/v5/domains/{id}", "domain"),
    VercelResource("webhooks", "webhook", "Webhook details", "/v1/webhooks/{id}", "webhookId"),
    VercelResource("integrations", "integration", "Integration configuration",
                   "/v1/integrations/configuration/{id}", "integrationId"),
    VercelResource("access-groups", "access-group", "Access group details",
                   "/v1/access-groups/{id}", "groupId"),
    VercelResource("log-drains", "log-drain", "Log drain details", "/v1/log-drains/{id}", "drainId"),
    VercelResource("aliases", "alias", "Alias details", "/v4/aliases/{id}", "aliasId"),
    VercelResource("certs", "certificate", "Certificate details", "/v7/certs/{id}", "certId"),
    VercelResource("edge-config", "edge-config", "Edge Config details",
                   "/v1/edge-config/{id}", "configId"),
    VercelResource("user", "user", "The authenticated user", "/v2/user"),
]

USER_URI = "user://current"
CONFIG_URI = "config://server"


class ResourceNotFound(LookupError):
    """URI does not match any resource."""
    pass


class VercelResourceProvider:
    """Expose Vercel objects as MCP resources."""

    def __init__(
        self,
        client: VercelClient,
        server_info: Optional[Callable[[], Dict]] = None
    ):
        """Initialize the resource provider.

        Args:
            client: Vercel API client
            server_info: Callable returning the payload of config://server
        """
        self.client = client
        self.server_info = server_info or (lambda: {})
        self._by_scheme = {r.scheme: r for r in RESOURCES}

    async def list_resources(self) -> List[Resource]:
        """Static resources."""
        return [
            Resource(
                uri=USER_URI,
                name="user",
                description="The authenticated user",
                mimeType="application/json"
            ),
            Resource(
                uri=CONFIG_URI,
                name="config",
                description="Server configuration and active tool groups",
                mimeType="application/json"
            ),
        ]

    async def list_resource_templates(self) -> List[ResourceTemplate]:
        """Parameterized resources."""
        return [
            ResourceTemplate(
                uriTemplate=f"{r.scheme}://{{{r.variable}}}",
                name=r.name,
                description=r.description,
                mimeType="application/json"
            )
            for r in RESOURCES if r.variable
        ]

    async def read_resource(self, uri: str) -> str:
        """Read a resource as JSON text.

        Raises:
            ResourceNotFound: If the URI matches no resource
            VercelAPIError: If the API request fails
        """
        uri = str(uri)
        if uri == CONFIG_URI:
            return json.dumps(self.server_info(), indent=2)

        scheme, sep, identifier = uri.partition("://")
        resource = self._by_scheme.get(scheme)
        if not sep or resource is None:
            raise ResourceNotFound(f"Unknown resource: {uri}")

        identifier = identifier.strip("/")
        if resource.variable and not identifier:
            raise ResourceNotFound(f"Resource {uri} is missing its {resource.variable}")

        path = resource.path.format(id=quote(identifier, safe=""))
        logger.debug(f"Reading resource {uri} from {path}")
        data = await self.client.request("GET", path)
        return json.dumps(data, indent=2)
