"""Marketplace integration tools: installations, billing and resources."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, register_endpoints

INSTALLATION_ID = path_param("integrationConfigurationId", "The integration configuration ID")
INVOICE_ID = path_param("invoiceId", "The invoice ID")
RESOURCE_ID = path_param("resourceId", "The resource ID")


def _installation(name: str, description: str, method: str, suffix: str, params=None) -> Endpoint:
    return Endpoint(
        name=name,
        description=description,
        method=method,
        path="/v1/installations/{integrationConfigurationId}" + suffix,
        team_scoped=False,
        params=[INSTALLATION_ID] + list(params or []),
    )


ENDPOINTS = [
    _installation(
        "create_marketplace_event",
        "Create an event for a marketplace installation",
        "POST", "/events",
        [body_param("event", "The event ({type, ...})", type="object", required=True)],
    ),
    _installation(
        "get_marketplace_account",
        "Get the account information of a marketplace installation",
        "GET", "/account",
    ),
    _installation(
        "get_marketplace_invoice",
        "Get a marketplace invoice",
        "GET", "/billing/invoices/{invoiceId}",
        [INVOICE_ID],
    ),
    _installation(
        "get_marketplace_member",
        "Get a member of a marketplace installation",
        "GET", "/member/{memberId}",
        [path_param("memberId", "The member ID")],
    ),
    _installation(
        "import_marketplace_resource",
        "Import or update a marketplace resource",
        "PUT", "/resources/{resourceId}",
        [
            RESOURCE_ID,
            body_param("productId", "The product ID", required=True),
            body_param("name", "The resource name", required=True),
            body_param("status", "The resource status", required=True,
                       enum=["ready", "pending", "suspended", "resumed", "uninstalled", "error"]),
            body_param("metadata", "Resource metadata", type="object"),
            body_param("billingPlan", "Billing plan", type="object"),
            body_param("notification", "Notification to show", type="object"),
            body_param("secrets", "Resource secrets", type="array", items={"type": "object"}),
        ],
    ),
    _installation(
        "submit_marketplace_billing",
        "Submit billing and usage data",
        "POST", "/billing",
        [
            body_param("timestamp", "Submission timestamp", required=True),
            body_param("eod", "End of day timestamp", required=True),
            body_param("period", "Billing period ({start, end})", type="object", required=True),
            body_param("billing", "Billing items", type="array", items={"type": "object"},
                       required=True),
            body_param("usage", "Usage items", type="array", items={"type": "object"},
                       required=True),
        ],
    ),
    _installation(
        "submit_marketplace_invoice",
        "Submit an invoice",
        "POST", "/billing/invoices",
        [
            body_param("externalId", "External invoice identifier"),
            body_param("invoiceDate", "Invoice date", required=True),
            body_param("memo", "Invoice memo"),
            body_param("period", "Billing period ({start, end})", type="object", required=True),
            body_param("items", "Invoice items", type="array", items={"type": "object"},
                       required=True),
            body_param("discounts", "Invoice discounts", type="array", items={"type": "object"}),
            body_param("test", "Test mode options", type="object"),
        ],
    ),
    _installation(
        "update_marketplace_secrets",
        "Update the secrets of a marketplace resource",
        "PUT", "/resources/{resourceId}/secrets",
        [
            RESOURCE_ID,
            body_param("secrets", "Secrets ({name, value, prefix})", type="array",
                       items={"type": "object"}, required=True),
        ],
    ),
    Endpoint(
        name="marketplace_sso_token_exchange",
        description="Exchange a marketplace SSO authorization code for an OIDC token",
        method="POST",
        path="/v1/integrations/sso/token",
        team_scoped=False,
        params=[
            body_param("code", "The sensitive code received from Vercel", required=True),
            body_param("state", "The state received from the initialization request"),
            body_param("client_id", "The integration client id", required=True),
            body_param("client_secret", "The integration client secret", required=True),
            body_param("redirect_uri", "The integration redirect URI"),
        ],
    ),
    _installation(
        "submit_marketplace_balance",
        "Submit prepayment balances",
        "POST", "/billing/balance",
        [
            body_param("timestamp", "Submission timestamp", required=True),
            body_param("balances", "Balance items", type="array", items={"type": "object"},
                       required=True),
        ],
    ),
    _installation(
        "marketplace_invoice_action",
        "Perform an action on an invoice, such as requesting a refund",
        "POST", "/billing/invoices/{invoiceId}/actions",
        [
            INVOICE_ID,
            body_param("action", "The invoice action", required=True, enum=["refund"]),
            body_param("reason", "Reason for the action", required=True),
            body_param("total", "Refund amount", required=True),
        ],
    ),
]


def register_marketplace_tools(host, client) -> List[str]:
    """Register marketplace tools."""
    return register_endpoints(host, client, ENDPOINTS)
