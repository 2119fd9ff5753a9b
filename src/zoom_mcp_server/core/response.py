#!/usr/bin/env python3
"""
Zoom MCP Server - Response Envelope

Uniform result structure returned by every facade operation.
"""

import re
from typing import Any, List, Optional, Dict
from pydantic import BaseModel, ConfigDict

MISSING_SCOPES_ERROR_CODE = 4711

_SCOPES_PATTERN = re.compile(r"scopes:\[(.*?)\]")


class ResponseEnvelope(BaseModel):
    """Result of a single facade call.

    ``missing_scopes`` is only set for a 400 response whose body carries
    Zoom's 4711 "missing scopes" error code.
    """

    model_config = ConfigDict(frozen=True)

    status: int
    message: Optional[str] = None
    response: Any = None
    missing_scopes: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable envelope, omitting absent missing_scopes."""
        data = self.model_dump()
        if self.missing_scopes is None:
            data.pop("missing_scopes")
        return data


def extract_missing_scopes(message: Any) -> List[str]:
    """Pull the ``scopes:[a, b]`` list out of an error message.

    Returns an empty list when the message has no such pattern.
    """
    if not isinstance(message, str):
        return []

    match = _SCOPES_PATTERN.search(message)
    if not match:
        return []

    return [scope.strip() for scope in match.group(1).split(",")]


def build_response(status: int, message: Optional[str], data: Any = None) -> ResponseEnvelope:
    """Build a response envelope from raw outcome data."""
    missing_scopes = None
    if (
        status == 400
        and isinstance(data, dict)
        and data.get("code") == MISSING_SCOPES_ERROR_CODE
    ):
        missing_scopes = extract_missing_scopes(data.get("message"))

    return ResponseEnvelope(
        status=status,
        message=message,
        response=data,
        missing_scopes=missing_scopes,
    )
