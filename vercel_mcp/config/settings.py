"""
Configuration for vercel-mcp-server.

Settings are read from environment variables so the server can be
configured by the MCP client that launches it, without code changes.

Usage:
    from vercel_mcp.config.settings import load_settings

    settings = load_settings()
    client = VercelClient(settings.base_url, settings.api_token)

Environment Variables:
    VERCEL_API_TOKEN              - Bearer token sent to the Vercel API
    VERCEL_BASE_URL               - API base URL (default https://api.vercel.com)
    VERCEL_TEAM_ID                - Team scope applied when a tool call gives none
    VERCEL_HTTP_TIMEOUT           - Request timeout in seconds (default 30)
    VERCEL_MCP_MAX_ACTIVE_GROUPS  - Tool groups kept active at once (default 2)
    VERCEL_MCP_INITIAL_GROUPS     - Comma-separated groups loaded at startup
                                    (default projects,infrastructure)
    VERCEL_MCP_LOG_LEVEL          - Logging level (default INFO)
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

DEFAULT_BASE_URL = "https://api.vercel.com"
DEFAULT_INITIAL_GROUPS = ["projects", "infrastructure"]


@dataclass
class Settings:
    """Server settings."""
    api_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    team_id: Optional[str] = None
    http_timeout: float = 30.0
    max_active_groups: int = 2
    initial_groups: List[str] = field(default_factory=lambda: list(DEFAULT_INITIAL_GROUPS))
    log_level: str = "INFO"


def _parse_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_number(env: Mapping[str, str], key: str, default, cast):
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {key}: {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        env: Mapping to read from (default: os.environ)

    Returns:
        Settings instance

    Raises:
        ValueError: If a numeric variable is malformed or
            VERCEL_MCP_MAX_ACTIVE_GROUPS is not positive

    Example:
        >>> load_settings({"VERCEL_MCP_MAX_ACTIVE_GROUPS": "3"}).max_active_groups
        3
    """
    if env is None:
        env = os.environ

    max_active_groups = _parse_number(env, "VERCEL_MCP_MAX_ACTIVE_GROUPS", 2, int)
    if max_active_groups <= 0:
        raise ValueError(
            f"VERCEL_MCP_MAX_ACTIVE_GROUPS must be positive, got {max_active_groups}"
        )

    initial = env.get("VERCEL_MCP_INITIAL_GROUPS")
    initial_groups = _parse_list(initial) if initial is not None else list(DEFAULT_INITIAL_GROUPS)

    return Settings(
        api_token=env.get("VERCEL_API_TOKEN", ""),
        base_url=env.get("VERCEL_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        team_id=env.get("VERCEL_TEAM_ID") or None,
        http_timeout=_parse_number(env, "VERCEL_HTTP_TIMEOUT", 30.0, float),
        max_active_groups=max_active_groups,
        initial_groups=initial_groups,
        log_level=env.get("VERCEL_MCP_LOG_LEVEL", "INFO").upper(),
    )
