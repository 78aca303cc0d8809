"""
Tool registration surface for vercel-mcp-server.
"""

from .tool_host import (
    ToolHost,
    RegisteredTool,
    ToolHandler,
    # Exceptions
    ToolHostError,
    ToolNotFound,
    InvalidToolDefinition,
)

__all__ = [
    'ToolHost',
    'RegisteredTool',
    'ToolHandler',
    # Exceptions
    'ToolHostError',
    'ToolNotFound',
    'InvalidToolDefinition',
]
