"""
Zoom Resource Services

Facades exposing user and meeting operations.
"""

from .base import ZoomServiceBase
from .user_service import ZoomUserManagementService
from .meeting_service import ZoomMeetingManagementService
from .integration_service import ZoomIntegrationService

__all__ = [
    "ZoomServiceBase",
    "ZoomUserManagementService",
    "ZoomMeetingManagementService",
    "ZoomIntegrationService",
]
