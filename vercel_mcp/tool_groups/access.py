"""Access tool group: teams, users, tokens, access groups and firewall."""

from typing import List

from ..components.access_groups import register_access_group_tools
from ..components.auth import register_auth_tools
from ..components.security import register_security_tools
from ..components.teams import register_team_tools
from ..components.users import register_user_tools


async def register(host, client) -> List[str]:
    tools = []
    for register_tools in (
        register_team_tools,
        register_user_tools,
        register_auth_tools,
        register_access_group_tools,
        register_security_tools,
    ):
        tools.extend(register_tools(host, client))
    return tools
