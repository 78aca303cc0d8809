"""MCP server exposing the Vercel REST API as lazily loaded tool groups."""

__version__ = "0.1.0"
