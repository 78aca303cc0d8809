"""Response envelopes returned by every Vercel MCP tool."""

import json
from typing import Any, Dict, List, Optional

from mcp.types import TextContent


def is_success(result: Dict[str, Any]) -> bool:
    """Check if a tool result envelope reports success."""
    return bool(result.get("ok"))


def success_response(
    data: Any,
    warnings: Optional[List[str]] = None
) -> Dict[str, Any]:
    """Wrap decoded API data in a success envelope.

    Args:
        data: Decoded Vercel API response or meta tool payload
        warnings: Optional non-fatal messages for the caller

    Returns:
        {"ok": True, "data": ...}
    """
    response = {"ok": True, "data": data}
    if warnings:
        response["warnings"] = warnings
    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Wrap a failed tool call in an error envelope.

    Args:
        message: Human-readable error message
        code: Machine-readable code, e.g. "API_ERROR" or "TOOL_NOT_FOUND"
        details: Extra context such as the HTTP status

    Returns:
        {"ok": False, "error": {"message": ..., "code": ..., "details": ...}}
    """
    error = {"message": message}
    if code:
        error["code"] = code
    if details:
        error["details"] = details
    return {"ok": False, "error": error}


def to_text_content(result: Any) -> List[TextContent]:
    """Serialize a tool result as a single JSON text block."""
    return [TextContent(type="text", text=json.dumps(result, indent=2, default=str))]
