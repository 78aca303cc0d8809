"""
Tool groups for vercel-mcp-server.

Each group module exposes ``async register(host, client) -> List[str]``
which registers the group's tools on the host and returns their names.
Group modules are imported lazily, the first time their loader runs.
"""

import importlib
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Loader = Callable[[], Awaitable[List[str]]]

# Group name -> module, in definition order
GROUP_MODULES: Dict[str, str] = {
    "projects": f"{__name__}.projects",
    "infrastructure": f"{__name__}.infrastructure",
    "access": f"{__name__}.access",
    "domains": f"{__name__}.domains",
    "integrations": f"{__name__}.integrations",
}


# ============================================================================
# Exceptions
# ============================================================================

class ToolGroupError(Exception):
    """Base exception for tool group errors."""
    pass


class LoadError(ToolGroupError):
    """A group could not be loaded."""

    def __init__(self, group: str, cause: Optional[BaseException] = None):
        self.group = group
        self.cause = cause
        message = f"Tool group '{group}' failed to load"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class UnknownGroup(LoadError):
    """No loader registered for the group name."""

    def __init__(self, group: str, known: Optional[List[str]] = None):
        self.group = group
        self.cause = None
        available = ", ".join(known or [])
        ToolGroupError.__init__(
            self,
            f"Unknown tool group: '{group}'. Available groups: {available}"
        )


# ============================================================================
# Group Registry
# ============================================================================

class GroupRegistry:
    """Static table of tool group loaders."""

    def __init__(self, loaders: Dict[str, Loader]):
        """
        Initialize registry.

        Args:
            loaders: Group name -> loader coroutine function
        """
        self._loaders = dict(loaders)

    def resolve(self, name: str) -> Loader:
        """
        Resolve a group's loader.

        Raises:
            UnknownGroup: If no loader is registered for name
        """
        if name not in self._loaders:
            raise UnknownGroup(name, self.names())
        return self._loaders[name]

    def names(self) -> List[str]:
        """Known group names in definition order."""
        return list(self._loaders)

    def __contains__(self, name: str) -> bool:
        return name in self._loaders


def module_loader(module_name: str, host: Any, client: Any) -> Loader:
    """Build a loader that imports a group module and registers its tools."""

    async def load() -> List[str]:
        logger.debug(f"Importing tool group module: {module_name}")
        module = importlib.import_module(module_name)
        return await module.register(host, client)

    return load


def create_group_registry(host: Any, client: Any) -> GroupRegistry:
    """
    Registry of the Vercel tool groups bound to a host and API client.

    Args:
        host: ToolHost receiving tool registrations
        client: VercelClient used by tool handlers
    """
    return GroupRegistry({
        name: module_loader(module_name, host, client)
        for name, module_name in GROUP_MODULES.items()
    })


__all__ = [
    'GROUP_MODULES',
    'GroupRegistry',
    'Loader',
    'LoadError',
    'ToolGroupError',
    'UnknownGroup',
    'create_group_registry',
    'module_loader',
]
