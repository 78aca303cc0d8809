"""Domains tool group: domains, DNS, certificates and aliases."""

from typing import List

from ..components.aliases import register_alias_tools
from ..components.certs import register_cert_tools
from ..components.dns import register_dns_tools
from ..components.domains import register_domain_tools


async def register(host, client) -> List[str]:
    tools = []
    for register_tools in (
        register_domain_tools,
        register_dns_tools,
        register_cert_tools,
        register_alias_tools,
    ):
        tools.extend(register_tools(host, client))
    return tools
