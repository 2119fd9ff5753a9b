#!/usr/bin/env python3
"""
Zoom MCP Server - User Management Service
"""

from typing import Any, Dict

from ..core.endpoints import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from ..core.response import ResponseEnvelope, build_response
from .base import ZoomServiceBase


class ZoomUserManagementService(ZoomServiceBase):
    """User operations against the Zoom REST API."""

    def create_user(self, user_data: Dict[str, Any]) -> ResponseEnvelope:
        return self._call("create_user", json_data=user_data)

    def update_user(self, user_id: str, updated_data: Dict[str, Any]) -> ResponseEnvelope:
        return self._call("update_user", {"user_id": user_id}, json_data=updated_data)

    def get_user(self, user_id: str = "me") -> ResponseEnvelope:
        return self._call("get_user", {"user_id": user_id})

    def delete_user(self, user_id: str) -> ResponseEnvelope:
        return self._call("delete_user", {"user_id": user_id})

    def list_users(
        self,
        status: str = "active",
        page_size: int = DEFAULT_PAGE_SIZE,
        page_number: int = DEFAULT_PAGE_NUMBER,
    ) -> ResponseEnvelope:
        """List account users with pagination."""
        return self._call(
            "list_users",
            params={
                "status": status,
                "page_size": page_size,
                "page_number": page_number,
            },
        )

    def change_user_status(self, user_id: str, status: str) -> ResponseEnvelope:
        """Activate or deactivate a user."""
        return self._call("change_user_status", {"user_id": user_id}, json_data={"status": status})

    def update_user_password(self, user_id: str, new_password: str) -> ResponseEnvelope:
        return self._call("update_user_password", {"user_id": user_id}, json_data={"password": new_password})

    def check_user_email_exists(self, email: str) -> ResponseEnvelope:
        """Look a user up by email address.

        A 404 envelope means no user on the account has this email.
        """
        return self._call("check_user_email_exists", {"email": email})

    def get_scopes(self) -> ResponseEnvelope:
        """Return the scopes granted to the access token."""
        return build_response(200, None, {"scopes": self.token.scopes})
