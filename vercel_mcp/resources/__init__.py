"""MCP resources for vercel-mcp-server."""

from .vercel_resources import RESOURCES, ResourceNotFound, VercelResourceProvider

__all__ = ['RESOURCES', 'ResourceNotFound', 'VercelResourceProvider']
