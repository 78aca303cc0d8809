"""Declarative Vercel endpoint definitions and their MCP tool bindings.

Every Vercel tool is a thin translation of one REST endpoint: validate the
required arguments, build the URL from a path template, split the rest of
the arguments into query string and JSON body, and pass the decoded
response back. Component modules describe their endpoints with
``Endpoint`` and register them through ``register_endpoints``.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from mcp.types import Tool
from pydantic import BaseModel, Field

from ..api.client import VercelClient
from ..registry.tool_host import ToolHandler, ToolHost

logger = logging.getLogger(__name__)


class ParamLocation(str, Enum):
    """Where an argument is sent."""
    PATH = "path"
    QUERY = "query"
    BODY = "body"


class Param(BaseModel):
    """A single tool argument."""

    name: str
    location: ParamLocation = ParamLocation.QUERY
    type: str = Field("string", description="JSON schema type")
    description: str = ""
    required: bool = False
    enum: Optional[List[Any]] = None
    items: Optional[Dict[str, Any]] = Field(
        None,
        description="JSON schema for array items"
    )

    def to_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type}
        if self.description:
            schema["description"] = self.description
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.type == "array":
            schema["items"] = self.items or {}
        return schema


class Endpoint(BaseModel):
    """A Vercel REST endpoint exposed as one MCP tool."""

    name: str
    description: str
    method: str = "GET"
    path: str
    params: List[Param] = Field(default_factory=list)
    team_scoped: bool = Field(
        True,
        description="Accept teamId/slug to act on behalf of a team"
    )

    def all_params(self) -> List[Param]:
        if not self.team_scoped:
            return list(self.params)
        names = {p.name for p in self.params}
        return list(self.params) + [p for p in TEAM_PARAMS if p.name not in names]


def path_param(name: str, description: str = "", **kwargs) -> Param:
    return Param(name=name, location=ParamLocation.PATH, description=description,
                 required=True, **kwargs)


def query_param(name: str, description: str = "", **kwargs) -> Param:
    return Param(name=name, location=ParamLocation.QUERY, description=description, **kwargs)


def body_param(name: str, description: str = "", **kwargs) -> Param:
    return Param(name=name, location=ParamLocation.BODY, description=description, **kwargs)


TEAM_PARAMS = [
    query_param("teamId", "The Team identifier to perform the request on behalf of"),
    query_param("slug", "The Team slug to perform the request on behalf of"),
]


# ============================================================================
# Tool binding
# ============================================================================

def build_tool(endpoint: Endpoint) -> Tool:
    """Build the MCP tool definition for an endpoint."""
    params = endpoint.all_params()
    return Tool(
        name=endpoint.name,
        description=endpoint.description,
        inputSchema={
            "type": "object",
            "properties": {p.name: p.to_schema() for p in params},
            "required": [p.name for p in params if p.required],
        }
    )


def build_request(
    endpoint: Endpoint,
    arguments: Dict[str, Any]
) -> Tuple[str, str, Dict[str, Any], Optional[Dict[str, Any]]]:
    """
    Translate tool arguments into an HTTP request.

    Args:
        endpoint: Endpoint definition
        arguments: Tool call arguments

    Returns:
        (method, path, query params, JSON body or None)

    Raises:
        ValueError: If a required argument is missing
    """
    missing = [
        p.name for p in endpoint.all_params()
        if p.required and arguments.get(p.name) is None
    ]
    if missing:
        raise ValueError(
            f"Missing required parameter(s) for '{endpoint.name}': {', '.join(missing)}"
        )

    path_values: Dict[str, str] = {}
    query: Dict[str, Any] = {}
    body: Dict[str, Any] = {}

    for param in endpoint.all_params():
        value = arguments.get(param.name)
        if value is None:
            continue
        if param.location == ParamLocation.PATH:
            path_values[param.name] = quote(str(value), safe="")
        elif param.location == ParamLocation.QUERY:
            # httpx renders Python booleans as "true"/"false"
            query[param.name] = value
        else:
            body[param.name] = value

    path = endpoint.path.format(**path_values)
    has_body = any(p.location == ParamLocation.BODY for p in endpoint.params)
    return endpoint.method, path, query, (body if has_body else None)


def make_handler(endpoint: Endpoint, client: VercelClient) -> ToolHandler:
    """Build the coroutine that executes an endpoint's tool call."""

    async def handler(arguments: Dict[str, Any]) -> Any:
        method, path, query, body = build_request(endpoint, arguments)
        return await client.request(method, path, params=query, json=body)

    handler.__name__ = f"{endpoint.name}_handler"
    return handler


def register_endpoints(
    host: ToolHost,
    client: VercelClient,
    endpoints: List[Endpoint]
) -> List[str]:
    """
    Register endpoints as tools on the host.

    Returns:
        Names of the registered tools, in order
    """
    names = []
    for endpoint in endpoints:
        host.register_tool(build_tool(endpoint), make_handler(endpoint, client))
        names.append(endpoint.name)
    return names
