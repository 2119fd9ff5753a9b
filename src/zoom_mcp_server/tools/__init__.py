"""
Zoom Management Tools Module

This module provides tools for Zoom user and meeting management operations.
"""

from .users.user_tools import manage_users
from .meetings.meeting_tools import manage_meetings
from .scopes.scope_tools import manage_scopes

# Sort tools alphabetically for consistent export order
def get_sorted_tools():
    """Return tools sorted alphabetically by name."""
    tools = {
        "manage_meetings": manage_meetings,
        "manage_scopes": manage_scopes,
        "manage_users": manage_users
    }
    return dict(sorted(tools.items()))

__all__ = sorted([
    "manage_meetings",
    "manage_scopes",
    "manage_users",
    "get_sorted_tools"
])
