"""
Zoom MCP Server Prompts Module

Provides actionable prompt templates for AI assistants to use Zoom tools.
"""

from .meeting_prompts import (
    schedule_meeting,
    onboard_user
)

__all__ = [
    "schedule_meeting",
    "onboard_user"
]
