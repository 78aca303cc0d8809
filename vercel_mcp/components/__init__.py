"""
Vercel API components.

Each module declares the endpoints of one API area and a
``register_<area>_tools(host, client)`` function returning the names of
the tools it registered.
"""

from .endpoint import (
    Endpoint,
    Param,
    ParamLocation,
    build_request,
    build_tool,
    register_endpoints,
)

__all__ = [
    'Endpoint',
    'Param',
    'ParamLocation',
    'build_request',
    'build_tool',
    'register_endpoints',
]
