"""Meeting Management Tools for Zoom MCP Server"""

import asyncio
from typing import Dict, Any, Optional
from fastmcp import Context
from pydantic import Field

from ...core.endpoints import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from ...core.logging_utils import get_tool_logger

WRITE_ACTIONS = {"create", "update", "delete", "add_registrant", "update_status"}
MEETING_ID_ACTIONS = {"get", "update", "delete", "add_registrant", "update_status", "get_recordings"}


async def manage_meetings(
    ctx: Context,
    action: str = Field(description="Operation to perform: create, get, update, delete, list, add_registrant, update_status, get_recordings"),
    meeting_id: Optional[int] = Field(default=None, description="Meeting ID (required for all actions except create and list)"),
    meeting_data: Optional[Dict[str, Any]] = Field(default=None, description="Meeting payload for create, or partial payload for update (e.g. topic, type, start_time, duration)"),
    user_id: str = Field(default="me", description="Owner of the meetings for list"),
    registrant_data: Optional[Dict[str, Any]] = Field(default=None, description="Registrant payload for add_registrant (email, first_name, last_name)"),
    status: Optional[str] = Field(default=None, description="New meeting status for update_status (e.g. end)"),
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, description="Page size for list operations"),
    page_number: int = Field(default=DEFAULT_PAGE_NUMBER, description="Page number for list operations (1-based)")
) -> Dict[str, Any]:
    """Meeting management operations.

    Actions:
    - create: Schedule a meeting for the token owner
    - get: Get details of a meeting
    - update: Update a meeting
    - delete: Delete a meeting
    - list: List a user's meetings with pagination
    - add_registrant: Register a participant for a meeting
    - update_status: Change a meeting's status
    - get_recordings: Get cloud recordings of a meeting
    """
    from ...core.dependency_injection import get_config, get_service
    config = get_config()
    service = get_service()

    tool_logger = get_tool_logger("meetings")
    tool_logger.info(f"Starting meeting operation: {action}")
    await ctx.info(f"Starting meeting operation: {action}")

    try:
        await ctx.report_progress(0, 100, f"Starting meeting operation: {action}")

        if action in WRITE_ACTIONS and config.read_only_mode:
            error_msg = f"Server is in read-only mode. Action '{action}' is not allowed."
            tool_logger.warning(error_msg)
            await ctx.warning(error_msg)
            return {
                "success": False,
                "error": error_msg,
                "action": action,
                "read_only_mode": True
            }

        if action in MEETING_ID_ACTIONS and meeting_id is None:
            raise ValueError(f"meeting_id is required for {action} action")

        if action == "create":
            if not meeting_data:
                raise ValueError("meeting_data is required for create action")
            envelope = await asyncio.to_thread(service.create_meeting, meeting_data)

        elif action == "get":
            envelope = await asyncio.to_thread(service.get_meeting, meeting_id)

        elif action == "update":
            if not meeting_data:
                raise ValueError("meeting_data is required for update action")
            envelope = await asyncio.to_thread(service.update_meeting, meeting_id, meeting_data)

        elif action == "delete":
            envelope = await asyncio.to_thread(service.delete_meeting, meeting_id)

        elif action == "list":
            await ctx.info(f"Retrieving meetings for {user_id} (page {page_number}, size {page_size})")
            envelope = await asyncio.to_thread(service.list_meetings, user_id, page_size, page_number)

        elif action == "add_registrant":
            if not registrant_data:
                raise ValueError("registrant_data is required for add_registrant action")
            envelope = await asyncio.to_thread(service.add_meeting_registrant, meeting_id, registrant_data)

        elif action == "update_status":
            if not status:
                raise ValueError("status is required for update_status action")
            envelope = await asyncio.to_thread(service.update_meeting_status, meeting_id, status)

        elif action == "get_recordings":
            envelope = await asyncio.to_thread(service.get_meeting_recordings, meeting_id)

        else:
            raise ValueError(f"Unknown action: {action}")

        await ctx.report_progress(100, 100, f"Completed meeting operation: {action}")
        tool_logger.info(f"Completed meeting operation: {action} (status {envelope.status})")
        return envelope.to_dict()

    except Exception as e:
        tool_logger.error(f"Error in meeting operation {action}: {e}")
        await ctx.error(f"Error in meeting operation {action}: {str(e)}")
        raise
