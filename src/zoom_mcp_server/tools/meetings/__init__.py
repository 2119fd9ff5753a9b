"""
Meeting Management Tools Module
"""

from .meeting_tools import manage_meetings

__all__ = ["manage_meetings"]
