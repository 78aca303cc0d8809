"""Projects tool group: projects, deployments and project members."""

from typing import List

from ..components.deployments import register_deployment_tools
from ..components.project_members import register_project_member_tools
from ..components.projects import register_project_tools


async def register(host, client) -> List[str]:
    return (
        register_project_tools(host, client)
        + register_deployment_tools(host, client)
        + register_project_member_tools(host, client)
    )
