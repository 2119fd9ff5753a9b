"""
Zoom MCP Server

FastMCP server and synchronous client wrapper for Zoom user and meeting management.
"""

__version__ = "1.0.0"
__author__ = "Zoom MCP Server contributors"
__description__ = "FastMCP server for Zoom user and meeting management"

from .services import (
    ZoomIntegrationService,
    ZoomMeetingManagementService,
    ZoomUserManagementService,
)

__all__ = [
    "ZoomIntegrationService",
    "ZoomMeetingManagementService",
    "ZoomUserManagementService",
]
