"""DNS record tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, query_param, register_endpoints

RECORD_TYPES = ["A", "AAAA", "ALIAS", "CAA", "CNAME", "HTTPS", "MX", "SRV", "TXT", "NS"]

ENDPOINTS = [
    Endpoint(
        name="create_dns_record",
        description="Create a DNS record for a domain",
        method="POST",
        path="/v2/domains/{domain}/records",
        params=[
            path_param("domain", "The domain used to create the record"),
            body_param("name", "Subdomain name, or empty for the apex", required=True),
            body_param("type", "The record type", required=True, enum=RECORD_TYPES),
            body_param("value", "The record value", required=True),
            body_param("ttl", "Time to live in seconds", type="integer"),
            body_param("mxPriority", "MX record priority", type="integer"),
            body_param("comment", "A comment to add context"),
        ],
    ),
    Endpoint(
        name="delete_dns_record",
        description="Delete a DNS record",
        method="DELETE",
        path="/v2/domains/{domain}/records/{recordId}",
        params=[
            path_param("domain", "The domain name"),
            path_param("recordId", "The record ID"),
        ],
    ),
    Endpoint(
        name="list_dns_records",
        description="List the DNS records of a domain",
        path="/v4/domains/{domain}/records",
        params=[
            path_param("domain", "The domain name"),
            query_param("limit", "Maximum number of records", type="integer"),
            query_param("since", "Records created after this timestamp", type="integer"),
            query_param("until", "Records created before this timestamp", type="integer"),
        ],
    ),
    Endpoint(
        name="update_dns_record",
        description="Update an existing DNS record",
        method="PATCH",
        path="/v1/domains/records/{recordId}",
        params=[
            path_param("recordId", "The record ID"),
            body_param("name", "The record name"),
            body_param("value", "The record value"),
            body_param("type", "The record type", enum=RECORD_TYPES),
            body_param("ttl", "Time to live in seconds", type="integer"),
            body_param("mxPriority", "MX record priority", type="integer"),
            body_param("comment", "A comment to add context"),
        ],
    ),
]


def register_dns_tools(host, client) -> List[str]:
    """Register DNS record tools."""
    return register_endpoints(host, client, ENDPOINTS)
