"""Integrations tool group: integrations, marketplace and remote cache artifacts."""

from typing import List

from ..components.artifacts import register_artifact_tools
from ..components.integrations import register_integration_tools
from ..components.marketplace import register_marketplace_tools


async def register(host, client) -> List[str]:
    tools = []
    for register_tools in (
        register_integration_tools,
        register_marketplace_tools,
        register_artifact_tools,
    ):
        tools.extend(register_tools(host, client))
    return tools
