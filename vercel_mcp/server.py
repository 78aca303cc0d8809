"""Main MCP server implementation for the Vercel API."""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

import httpx
from mcp import Resource, Tool
from mcp.server import Server, NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.types import ResourceTemplate, TextContent

from . import __version__
from .api.client import VercelAPIError, VercelClient
from .config.settings import Settings, load_settings
from .managers.tool_manager import ToolManager
from .registry.tool_host import ToolHost
from .resources.vercel_resources import VercelResourceProvider
from .tool_groups import create_group_registry
from .utils.response import error_response, success_response, to_text_content

logger = logging.getLogger(__name__)

SERVER_NAME = "vercel-mcp"

META_TOOLS = [
    Tool(
        name="tool_groups_status",
        description="Show which Vercel tool groups are active and which can be loaded",
        inputSchema={"type": "object", "properties": {}}
    ),
    Tool(
        name="load_tool_group",
        description=(
            "Load a group of Vercel tools (projects, infrastructure, access, domains, "
            "integrations). The least recently used group is unloaded when the limit is reached."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "group": {"type": "string", "description": "Tool group name"}
            },
            "required": ["group"]
        }
    ),
    Tool(
        name="suggest_tool_groups",
        description="Describe what you want to do and the matching Vercel tool group is loaded",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Free-text description of the task"}
            },
            "required": ["query"]
        }
    ),
]
META_TOOL_NAMES = {tool.name for tool in META_TOOLS}


class VercelMCPServer:
    """MCP Server exposing Vercel tools in lazily loaded groups."""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[VercelClient] = None):
        """Initialize the server; no tool group is loaded until bootstrap()."""
        self.settings = settings or load_settings()
        self.client = client or VercelClient(
            base_url=self.settings.base_url,
            token=self.settings.api_token,
            timeout=self.settings.http_timeout,
            default_team_id=self.settings.team_id
        )

        # Tool groups register onto the host; the manager decides which are active
        self.host = ToolHost()
        self.registry = create_group_registry(self.host, self.client)
        self.tool_manager = ToolManager(
            self.registry,
            capacity=self.settings.max_active_groups
        )

        self.resource_provider = VercelResourceProvider(self.client, self.server_info)

        # Create MCP server instance
        self.server = Server(SERVER_NAME)

        # Register handlers
        self._register_handlers()

    def server_info(self) -> Dict[str, Any]:
        return {
            "name": SERVER_NAME,
            "version": __version__,
            "baseUrl": self.settings.base_url,
            "maxActiveGroups": self.settings.max_active_groups,
            "activeGroups": self.tool_manager.get_active_groups(),
            "availableGroups": self.registry.names(),
        }

    async def bootstrap(self, strict: bool = False) -> List[str]:
        """Load the configured initial tool groups, in order.

        Returns:
            Names of groups that failed to load
        """
        return await self.tool_manager.bootstrap(self.settings.initial_groups, strict=strict)

    def list_tools(self) -> List[Tool]:
        """Meta tools plus every tool registered on the host."""
        return META_TOOLS + self.host.list_tools()

    async def handle_tool(self, name: str, arguments: Optional[dict]) -> Dict[str, Any]:
        """Execute a tool call and wrap the outcome in a response envelope.

        A call to a tool that is not registered yet first tries to load the
        group its name classifies into.
        """
        arguments = arguments or {}

        if name in META_TOOL_NAMES:
            return await self._handle_meta_tool(name, arguments)

        if not self.host.has_tool(name):
            group = await self.tool_manager.suggest_and_load_groups(name)
            if not self.host.has_tool(name):
                return error_response(
                    f"Unknown tool: {name}",
                    code="TOOL_NOT_FOUND",
                    details={"suggested_group": group} if group else None
                )

        self.tool_manager.record_tool_use(name)

        try:
            result = await self.host.call_tool(name, arguments)
        except ValueError as e:
            return error_response(str(e), code="INVALID_ARGUMENTS")
        except VercelAPIError as e:
            logger.error(f"Vercel API error in {name}: {e}")
            return error_response(
                str(e),
                code="API_ERROR",
                details={"status": e.status_code}
            )
        except httpx.HTTPError as e:
            logger.error(f"HTTP error in {name}: {e}")
            return error_response(f"Request failed: {e}", code="HTTP_ERROR")

        return success_response(result)

    async def _handle_meta_tool(self, name: str, arguments: dict) -> Dict[str, Any]:
        if name == "tool_groups_status":
            return success_response(self._groups_status())

        if name == "load_tool_group":
            group = arguments.get("group")
            if not group:
                return error_response("Missing required parameter 'group'", code="INVALID_ARGUMENTS")
            if group not in self.registry:
                return error_response(
                    f"Unknown tool group: {group}",
                    code="UNKNOWN_GROUP",
                    details={"available": self.registry.names()}
                )
            if not await self.tool_manager.load_group(group):
                return error_response(f"Failed to load tool group: {group}", code="LOAD_FAILED")
            return success_response(self._groups_status())

        query = arguments.get("query")
        if not query:
            return error_response("Missing required parameter 'query'", code="INVALID_ARGUMENTS")
        group = await self.tool_manager.suggest_and_load_groups(query)
        status = self._groups_status()
        status["suggested"] = group
        return success_response(status)

    def _groups_status(self) -> Dict[str, Any]:
        return {
            "active": self.tool_manager.get_active_groups(),
            "available": self.registry.names(),
            "max_active": self.tool_manager.active.capacity,
        }

    def _register_handlers(self):
        """Register all MCP handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List meta tools and loaded Vercel tools."""
            return self.list_tools()

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[TextContent]:
            """Route tool calls through the tool host."""
            try:
                result = await self.handle_tool(name, arguments)
            except Exception as e:
                logger.error(f"Error executing tool {name}: {e}")
                result = error_response(str(e), details={"tool": name, "arguments": arguments})
            return to_text_content(result)

        @self.server.list_resources()
        async def handle_list_resources() -> list[Resource]:
            """List static resources."""
            return await self.resource_provider.list_resources()

        @self.server.list_resource_templates()
        async def handle_list_resource_templates() -> list[ResourceTemplate]:
            """List parameterized resources."""
            return await self.resource_provider.list_resource_templates()

        @self.server.read_resource()
        async def handle_read_resource(uri) -> str:
            """Read a specific resource."""
            return await self.resource_provider.read_resource(str(uri))

    async def run(self):
        """Load the initial tool groups, then serve over stdio."""
        from mcp.server.stdio import stdio_server

        await self.bootstrap()
        logger.info(f"Active tool groups: {', '.join(self.tool_manager.get_active_groups())}")

        try:
            async with stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    InitializationOptions(
                        server_name=SERVER_NAME,
                        server_version=__version__,
                        capabilities=self.server.get_capabilities(
                            notification_options=NotificationOptions(),
                            experimental_capabilities={}
                        )
                    )
                )
        finally:
            await self.client.close()


def main():
    """Main entry point for the MCP server."""
    settings = load_settings()

    # stdout carries the MCP protocol
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    server = VercelMCPServer(settings)
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    main()
