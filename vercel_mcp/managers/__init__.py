"""
Manager components for vercel-mcp-server.
"""

from .classifier import (
    FALLBACK_RULES,
    KEYWORD_RULES,
    classify,
)
from .tool_manager import (
    ToolManager,
    ActiveGroupSet,
    GroupUsage,
    select_victim,
    DEFAULT_CAPACITY,
    # Exceptions
    BootstrapError,
    EvictionUnderflow,
    GroupNotActive,
)

__all__ = [
    'ToolManager',
    'ActiveGroupSet',
    'GroupUsage',
    'select_victim',
    'DEFAULT_CAPACITY',
    'classify',
    'KEYWORD_RULES',
    'FALLBACK_RULES',
    # Exceptions
    'BootstrapError',
    'EvictionUnderflow',
    'GroupNotActive',
]
