"""
Scope Tools for Zoom MCP Server

Reports the OAuth scopes and token claims the server authenticated with.
"""

from datetime import datetime, timezone
from typing import Dict, Any
from fastmcp import Context
from pydantic import Field

from ...core.logging_utils import get_tool_logger


async def manage_scopes(
    ctx: Context,
    action: str = Field(description="Operation to perform: get_scopes, token_info")
) -> Dict[str, Any]:
    """Scope and token information.

    Actions:
    - get_scopes: List the OAuth scopes granted to the access token
    - token_info: Show non-secret claims of the access token
    """
    from ...core.dependency_injection import get_service
    service = get_service()

    tool_logger = get_tool_logger("scopes")
    tool_logger.info(f"Starting scope operation: {action}")

    try:
        if action == "get_scopes":
            result = service.get_scopes().to_dict()
        elif action == "token_info":
            result = _token_info(service.token)
        else:
            raise ValueError(f"Unknown action: {action}")

        await ctx.report_progress(100, 100, f"Completed scope operation: {action}")
        tool_logger.info(f"Completed scope operation: {action}")
        return result

    except Exception as e:
        tool_logger.error(f"Error in scope operation {action}: {e}")
        raise


def _token_info(token) -> Dict[str, Any]:
    """Summarize the unverified JWT claims of the access token."""
    claims = token.claims()
    if not claims:
        return {
            "success": False,
            "error": "Access token is not a decodable JWT"
        }

    exp = claims.get("exp")
    expires_at = None
    if isinstance(exp, (int, float)):
        expires_at = datetime.fromtimestamp(exp, tz=timezone.utc).isoformat()

    return {
        "success": True,
        "token_data": {
            "exp": exp,
            "expires_at": expires_at,
            "iss": claims.get("iss"),
            "aud": claims.get("aud"),
            "account_id": claims.get("aid"),
            "scope": token.scope
        }
    }
