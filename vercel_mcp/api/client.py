"""Async client for the Vercel REST API."""

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class VercelAPIError(Exception):
    """Non-2xx response from the Vercel API."""

    def __init__(self, status_code: int, reason: str, body: str):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"HTTP {status_code}: {reason} - {body}")


class VercelClient:
    """Thin httpx wrapper: base URL, bearer token, JSON in and out."""

    def __init__(
        self,
        base_url: str = "https://api.vercel.com",
        token: str = "",
        timeout: float = 30.0,
        default_team_id: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Vercel client.

        Args:
            base_url: API base URL
            token: Bearer token (omitted from headers when empty)
            timeout: Request timeout in seconds
            default_team_id: teamId applied when a request gives none
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.default_team_id = default_team_id

        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None
    ) -> Any:
        """
        Send a request and return the decoded response.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. "/v10/projects"
            params: Query parameters; None values are dropped
            json: Optional JSON body

        Returns:
            Decoded JSON, {} for an empty body, the raw text for non-JSON
            bodies, or {"status": code} for HEAD requests

        Raises:
            VercelAPIError: If the response status is not 2xx
            httpx.HTTPError: On transport failures
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        if self.default_team_id and "teamId" not in query and "slug" not in query:
            query["teamId"] = self.default_team_id

        method = method.upper()
        logger.debug(f"{method} {path} {query}")

        response = await self.client.request(method, path, params=query, json=json)
        return self.handle_response(response)

    @staticmethod
    def handle_response(response: httpx.Response) -> Any:
        """Decode a response or raise VercelAPIError."""
        if not response.is_success:
            raise VercelAPIError(response.status_code, response.reason_phrase, response.text)

        if response.request.method == "HEAD":
            return {"status": response.status_code}

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError:
            return response.text
