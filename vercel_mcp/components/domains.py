"""Domain tools: project domains and account domains/registrar."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

PROJECT_ID = path_param("idOrName", "The unique project identifier or the project name")
DOMAIN = path_param("domain", "The domain name")

PROJECT_DOMAIN_ENDPOINTS = [
    Endpoint(
        name="add_domain",
        description="Add a domain to a project",
        method="POST",
        path="/v10/projects/{idOrName}/domains",
        params=[
            PROJECT_ID,
            body_param("name", "The project domain name", required=True),
            body_param("gitBranch", "Git branch to link the domain to"),
            body_param("redirect", "Target destination domain for redirect"),
            body_param("redirectStatusCode", "Status code for the redirect", type="integer",
                       enum=[301, 302, 307, 308]),
        ],
    ),
    Endpoint(
        name="remove_domain",
        description="Remove a domain from a project",
        method="DELETE",
        path="/v9/projects/{idOrName}/domains/{domain}",
        params=[PROJECT_ID, DOMAIN],
    ),
    Endpoint(
        name="get_domain",
        description="Get a project domain",
        path="/v9/projects/{idOrName}/domains/{domain}",
        params=[PROJECT_ID, DOMAIN],
    ),
    Endpoint(
        name="get_project_domain",
        description="Get a project domain's verification and redirect details",
        path="/v9/projects/{idOrName}/domains/{domain}",
        params=[PROJECT_ID, DOMAIN],
    ),
    Endpoint(
        name="list_domains",
        description="List the domains of a project",
        path="/v9/projects/{idOrName}/domains",
        params=[
            PROJECT_ID,
            query_param("production", "Only production domains", enum=["true", "false"]),
            query_param("target", "Filter by target", enum=["production", "preview"]),
            query_param("gitBranch", "Filter by git branch"),
            query_param("redirects", "Include redirect domains", enum=["true", "false"]),
            query_param("verified", "Filter by verification status", enum=["true", "false"]),
            query_param("limit", "Maximum number of domains", type="integer"),
        ],
    ),
]

REGISTRAR_ENDPOINTS = [
    Endpoint(
        name="domain_check",
        description="Check if a domain name is available for purchase",
        path="/v4/domains/status",
        params=[query_param("name", "The domain name to check", required=True)],
    ),
    Endpoint(
        name="domain_price",
        description="Check the price to purchase a domain",
        path="/v4/domains/price",
        params=[
            query_param("name", "The domain name to check", required=True),
            query_param("type", "Price type", enum=["new", "renewal", "transfer", "redemption"]),
        ],
    ),
    Endpoint(
        name="domain_config",
        description="Get the configuration of a domain",
        path="/v6/domains/{domain}/config",
        params=[DOMAIN, query_param("strict", "Only consider nameservers from Vercel", enum=["true", "false"])],
    ),
    Endpoint(
        name="domain_registry",
        description="Get domain transfer information from the registry",
        path="/v1/domains/{domain}/registry",
        params=[DOMAIN],
    ),
    Endpoint(
        name="domain_get",
        description="Get information for a single domain in the account",
        path="/v5/domains/{domain}",
        params=[DOMAIN],
    ),
    Endpoint(
        name="domain_list",
        description="List all domains registered in the account",
        path="/v5/domains",
        params=[
            query_param("limit", "Maximum number of domains", type="integer"),
            query_param("since", "Domains created after this timestamp", type="integer"),
            query_param("until", "Domains created before this timestamp", type="integer"),
        ],
    ),
    Endpoint(
        name="domain_buy",
        description="Purchase a domain",
        method="POST",
        path="/v5/domains/buy",
        params=[
            body_param("name", "The domain name to purchase", required=True),
            body_param("expectedPrice", "The price you expect to pay", type="number"),
            body_param("renew", "Renew the domain automatically", type="boolean"),
            body_param("country", "Registrant country code", required=True),
            body_param("orgName", "Registrant organization"),
            body_param("firstName", "Registrant first name", required=True),
            body_param("lastName", "Registrant last name", required=True),
            body_param("address1", "Registrant street address", required=True),
            body_param("city", "Registrant city", required=True),
            body_param("state", "Registrant state", required=True),
            body_param("postalCode", "Registrant postal code", required=True),
            body_param("phone", "Registrant phone number", required=True),
            body_param("email", "Registrant email", required=True),
        ],
    ),
    Endpoint(
        name="domain_register",
        description="Add an existing domain to the account or transfer one in",
        method="POST",
        path="/v5/domains",
        params=[
            body_param("method", "The domain operation to perform", required=True,
                       enum=["add", "transfer-in"]),
            body_param("name", "The domain name", required=True),
            body_param("cdnEnabled", "Enable the Vercel CDN", type="boolean"),
            body_param("zone", "Whether Vercel manages the DNS zone", type="boolean"),
            body_param("authCode", "Authorization code for transfers"),
            body_param("expectedPrice", "Expected transfer price", type="number"),
        ],
    ),
    Endpoint(
        name="domain_remove",
        description="Remove a domain from the account",
        method="DELETE",
        path="/v6/domains/{domain}",
        params=[DOMAIN],
    ),
    Endpoint(
        name="domain_update",
        description="Update or move a domain",
        method="PATCH",
        path="/v3/domains/{domain}",
        params=[
            DOMAIN,
            body_param("op", "Operation", enum=["update", "move-out"]),
            body_param("renew", "Toggle automatic renewal", type="boolean"),
            body_param("customNameservers", "Custom nameservers", type="array",
                       items={"type": "string"}),
            body_param("zone", "Whether Vercel manages the DNS zone", type="boolean"),
            body_param("destination", "Destination user or team for move-out"),
        ],
    ),
]

ENDPOINTS = PROJECT_DOMAIN_ENDPOINTS + REGISTRAR_ENDPOINTS


def register_domain_tools(host, client) -> List[str]:
    """Register project domain and registrar tools."""
    return register_endpoints(host, client, ENDPOINTS)
