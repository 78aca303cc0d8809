"""Infrastructure tool group: configuration, secrets, hooks and observability."""

from typing import List

from ..components.edge_config import register_edge_config_tools
from ..components.env import register_env_tools
from ..components.environments import register_environment_tools
from ..components.log_drains import register_log_drain_tools
from ..components.secrets import register_secret_tools
from ..components.speed_insights import register_speed_insights_tools
from ..components.webhooks import register_webhook_tools


async def register(host, client) -> List[str]:
    tools = []
    for register_tools in (
        register_edge_config_tools,
        register_secret_tools,
        register_env_tools,
        register_environment_tools,
        register_webhook_tools,
        register_log_drain_tools,
        register_speed_insights_tools,
    ):
        tools.extend(register_tools(host, client))
    return tools
