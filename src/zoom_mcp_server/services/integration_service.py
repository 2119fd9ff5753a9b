#!/usr/bin/env python3
"""
Zoom MCP Server - Integration Service

Combined user and meeting facade backed by a single access token.
"""

from .meeting_service import ZoomMeetingManagementService
from .user_service import ZoomUserManagementService


class ZoomIntegrationService(ZoomUserManagementService, ZoomMeetingManagementService):
    """User and meeting operations behind one authentication."""
    pass
