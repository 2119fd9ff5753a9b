#!/usr/bin/env python3
"""
Zoom MCP Server - Endpoint Templates

Method and path template for every user and meeting operation.
"""

from typing import Any, Dict, NamedTuple
from urllib.parse import quote


class Endpoint(NamedTuple):
    """HTTP method and path template of one Zoom API operation."""

    method: str
    path: str

    def format(self, **path_params: Any) -> str:
        """Interpolate path parameters into the template."""
        encoded = {name: quote(str(value), safe="@") for name, value in path_params.items()}
        return self.path.format(**encoded)


ENDPOINTS: Dict[str, Endpoint] = {
    # Users
    "create_user": Endpoint("POST", "/v2/users"),
    "get_user": Endpoint("GET", "/v2/users/{user_id}"),
    "update_user": Endpoint("PATCH", "/v2/users/{user_id}"),
    "delete_user": Endpoint("DELETE", "/v2/users/{user_id}"),
    "list_users": Endpoint("GET", "/v2/users"),
    "change_user_status": Endpoint("PUT", "/v2/users/{user_id}/status"),
    "update_user_password": Endpoint("PUT", "/v2/users/{user_id}/password"),
    "check_user_email_exists": Endpoint("GET", "/v2/users/{email}"),

    # Meetings
    "create_meeting": Endpoint("POST", "/v2/users/me/meetings"),
    "get_meeting": Endpoint("GET", "/v2/meetings/{meeting_id}"),
    "update_meeting": Endpoint("PATCH", "/v2/meetings/{meeting_id}"),
    "delete_meeting": Endpoint("DELETE", "/v2/meetings/{meeting_id}"),
    "list_meetings": Endpoint("GET", "/v2/users/{user_id}/meetings"),
    "add_meeting_registrant": Endpoint("POST", "/v2/meetings/{meeting_id}/registrants"),
    "update_meeting_status": Endpoint("PATCH", "/v2/meetings/{meeting_id}"),
    "get_meeting_recordings": Endpoint("GET", "/v2/meetings/{meeting_id}/recordings"),
}

DEFAULT_PAGE_SIZE = 30
DEFAULT_PAGE_NUMBER = 1
