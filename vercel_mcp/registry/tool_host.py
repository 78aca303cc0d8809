"""
Tool Host - registration surface for MCP tools.

Design pattern: name-keyed catalog with register/get/list/execute, the
same shape as an operation registry.

Registration is additive. There is no unregister operation: tools stay
callable for the life of the process once a tool group has registered
them. Re-registering a name replaces the previous definition so a tool
group can be loaded again after it has been evicted.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp.types import Tool

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Dict[str, Any]], Awaitable[Any]]


# ============================================================================
# Data Classes
# ============================================================================

@dataclass
class RegisteredTool:
    """A tool definition and the coroutine that executes it."""
    tool: Tool
    handler: ToolHandler
    registrations: int = 1


# ============================================================================
# Exceptions
# ============================================================================

class ToolHostError(Exception):
    """Base exception for host errors."""
    pass


class ToolNotFound(ToolHostError):
    """Tool not registered on the host."""
    pass


class InvalidToolDefinition(ToolHostError):
    """Invalid tool definition."""
    pass


# ============================================================================
# Tool Host
# ============================================================================

class ToolHost:
    """Catalog of tools advertised by the MCP server."""

    def __init__(self):
        """Initialize empty host."""
        self._tools: Dict[str, RegisteredTool] = {}

    # ========================================================================
    # Registration
    # ========================================================================

    def register_tool(self, tool: Tool, handler: ToolHandler) -> None:
        """
        Register a tool.

        Args:
            tool: MCP tool definition
            handler: Coroutine function called with the tool arguments

        Raises:
            InvalidToolDefinition: If the tool has no name or handler
        """
        if not tool.name:
            raise InvalidToolDefinition("Tool name is required")
        if handler is None:
            raise InvalidToolDefinition(f"Tool '{tool.name}' has no handler")

        existing = self._tools.get(tool.name)
        if existing is not None:
            existing.tool = tool
            existing.handler = handler
            existing.registrations += 1
            logger.debug(f"Re-registered tool: {tool.name} ({existing.registrations}x)")
            return

        self._tools[tool.name] = RegisteredTool(tool=tool, handler=handler)
        logger.debug(f"Registered tool: {tool.name}")

    # ========================================================================
    # Retrieval
    # ========================================================================

    def get(self, name: str) -> RegisteredTool:
        """
        Retrieve a registered tool.

        Raises:
            ToolNotFound: If tool doesn't exist
        """
        if name not in self._tools:
            raise ToolNotFound(f"Tool '{name}' not found")
        return self._tools[name]

    def has_tool(self, name: str) -> bool:
        """Check if tool is registered."""
        return name in self._tools

    def list_tools(self) -> List[Tool]:
        """All registered tools, in registration order."""
        return [entry.tool for entry in self._tools.values()]

    def tool_names(self) -> List[str]:
        return list(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    # ========================================================================
    # Execution
    # ========================================================================

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Any:
        """
        Execute a registered tool.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Whatever the tool handler returns

        Raises:
            ToolNotFound: If tool doesn't exist
        """
        entry = self.get(name)
        return await entry.handler(arguments or {})
