"""
User Management Tools Module
"""

from .user_tools import manage_users

__all__ = ["manage_users"]
