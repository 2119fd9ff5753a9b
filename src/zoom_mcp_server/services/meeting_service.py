#!/usr/bin/env python3
"""
Zoom MCP Server - Meeting Management Service
"""

from typing import Any, Dict

from ..core.endpoints import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from ..core.response import ResponseEnvelope
from .base import ZoomServiceBase


class ZoomMeetingManagementService(ZoomServiceBase):
    """Meeting operations against the Zoom REST API."""

    def create_meeting(self, meeting_data: Dict[str, Any]) -> ResponseEnvelope:
        """Schedule a meeting for the token owner."""
        return self._call("create_meeting", json_data=meeting_data)

    def update_meeting(self, meeting_id: int, updated_data: Dict[str, Any]) -> ResponseEnvelope:
        return self._call("update_meeting", {"meeting_id": meeting_id}, json_data=updated_data)

    def get_meeting(self, meeting_id: int) -> ResponseEnvelope:
        return self._call("get_meeting", {"meeting_id": meeting_id})

    def delete_meeting(self, meeting_id: int) -> ResponseEnvelope:
        return self._call("delete_meeting", {"meeting_id": meeting_id})

    def list_meetings(
        self,
        user_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_number: int = DEFAULT_PAGE_NUMBER,
    ) -> ResponseEnvelope:
        """List a user's meetings with pagination."""
        return self._call(
            "list_meetings",
            {"user_id": user_id},
            params={
                "page_size": page_size,
                "page_number": page_number,
            },
        )

    def add_meeting_registrant(self, meeting_id: int, registrant_data: Dict[str, Any]) -> ResponseEnvelope:
        return self._call("add_meeting_registrant", {"meeting_id": meeting_id}, json_data=registrant_data)

    def update_meeting_status(self, meeting_id: int, status: str) -> ResponseEnvelope:
        return self._call("update_meeting_status", {"meeting_id": meeting_id}, json_data={"status": status})

    def get_meeting_recordings(self, meeting_id: int) -> ResponseEnvelope:
        return self._call("get_meeting_recordings", {"meeting_id": meeting_id})
