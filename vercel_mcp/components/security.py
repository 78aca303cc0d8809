"""Firewall and attack challenge mode tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

PROJECT_ID = query_param("projectId", "The project ID", required=True)

ENDPOINTS = [
    Endpoint(
        name="create_firewall_bypass",
        description="Create a system bypass rule for the firewall",
        method="POST",
        path="/v1/security/firewall/bypass",
        params=[
            PROJECT_ID,
            body_param("domain", "Domain the bypass applies to"),
            body_param("projectScope", "Apply to all domains of the project", type="boolean"),
            body_param("sourceIp", "Source IP to bypass"),
            body_param("allSources", "Bypass all sources", type="boolean"),
            body_param("ttl", "Time to live in milliseconds", type="integer"),
            body_param("note", "Note describing the bypass"),
        ],
    ),
    Endpoint(
        name="delete_firewall_bypass",
        description="Remove a system bypass rule",
        method="DELETE",
        path="/v1/security/firewall/bypass",
        params=[
            PROJECT_ID,
            body_param("domain", "Domain of the bypass"),
            body_param("projectScope", "Bypass applies to all project domains", type="boolean"),
            body_param("sourceIp", "Source IP of the bypass"),
            body_param("allSources", "Bypass applies to all sources", type="boolean"),
            body_param("note", "Note of the bypass"),
        ],
    ),
    Endpoint(
        name="get_firewall_bypass",
        description="List system bypass rules",
        path="/v1/security/firewall/bypass",
        params=[
            PROJECT_ID,
            query_param("limit", "Maximum number of rules", type="integer"),
            query_param("sourceIp", "Filter by source IP"),
            query_param("domain", "Filter by domain"),
            query_param("projectScope", "Only project scoped rules", type="boolean"),
            query_param("offset", "Pagination offset"),
        ],
    ),
    Endpoint(
        name="get_attack_status",
        description="Read active attack data for a project",
        path="/v1/security/firewall/attack-status",
        params=[PROJECT_ID],
    ),
    Endpoint(
        name="update_attack_mode",
        description="Enable or disable Attack Challenge Mode for a project",
        method="POST",
        path="/v1/security/attack-mode",
        params=[
            body_param("projectId", "The project ID", required=True),
            body_param("attackModeEnabled", "Whether attack mode is enabled", type="boolean",
                       required=True),
            body_param("attackModeActiveUntil", "Timestamp when attack mode ends", type="integer"),
        ],
    ),
    Endpoint(
        name="get_firewall_config",
        description="Read a firewall configuration version ('active' for the current one)",
        path="/v1/security/firewall/config/{configVersion}",
        params=[PROJECT_ID, path_param("configVersion", "Configuration version or 'active'")],
    ),
    Endpoint(
        name="update_firewall_config",
        description="Apply a single change to the firewall configuration",
        method="PATCH",
        path="/v1/security/firewall/config",
        params=[
            PROJECT_ID,
            body_param("action", "The change action (e.g. firewallEnabled, rules.insert)",
                       required=True),
            body_param("id", "Identifier of the rule or item being changed"),
            body_param("value", "New value for the change", type="object"),
        ],
    ),
    Endpoint(
        name="put_firewall_config",
        description="Replace the whole firewall configuration",
        method="PUT",
        path="/v1/security/firewall/config",
        params=[
            PROJECT_ID,
            body_param("firewallEnabled", "Whether the firewall is enabled", type="boolean",
                       required=True),
            body_param("managedRules", "Managed rule set settings", type="object"),
            body_param("crs", "Core rule set settings", type="object"),
            body_param("rules", "Custom rules", type="array", items={"type": "object"}),
            body_param("ips", "IP blocking rules", type="array", items={"type": "object"}),
        ],
    ),
]


def register_security_tools(host, client) -> List[str]:
    """Register firewall and attack mode tools."""
    return register_endpoints(host, client, ENDPOINTS)
