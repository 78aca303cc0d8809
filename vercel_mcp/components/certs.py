"""SSL/TLS certificate tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, register_endpoints

CERT_ID = path_param("id", "The certificate ID")

ENDPOINTS = [
    Endpoint(
        name="get_cert",
        description="Get a certificate by ID",
        path="/v7/certs/{id}",
        params=[CERT_ID],
    ),
    Endpoint(
        name="issue_cert",
        description="Issue a new certificate for one or more common names",
        method="POST",
        path="/v7/certs",
        params=[
            body_param("cns", "Common names the certificate covers", type="array",
                       items={"type": "string"}, required=True),
        ],
    ),
    Endpoint(
        name="remove_cert",
        description="Remove a certificate",
        method="DELETE",
        path="/v7/certs/{id}",
        params=[CERT_ID],
    ),
    Endpoint(
        name="upload_cert",
        description="Upload a custom certificate",
        method="PUT",
        path="/v7/certs",
        params=[
            body_param("ca", "The certificate authority chain", required=True),
            body_param("key", "The certificate private key", required=True),
            body_param("cert", "The certificate", required=True),
            body_param("skipValidation", "Skip certificate validation", type="boolean"),
        ],
    ),
]


def register_cert_tools(host, client) -> List[str]:
    """Register certificate tools."""
    return register_endpoints(host, client, ENDPOINTS)
