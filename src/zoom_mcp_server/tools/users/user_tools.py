"""User Management Tools for Zoom MCP Server"""

import asyncio
from typing import Dict, Any, Optional
from fastmcp import Context
from pydantic import Field

from ...core.endpoints import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from ...core.logging_utils import get_tool_logger

WRITE_ACTIONS = {"create", "update", "delete", "change_status", "update_password"}


async def manage_users(
    ctx: Context,
    action: str = Field(description="Operation to perform: create, get, update, delete, list, change_status, update_password, check_email, get_scopes"),
    user_id: Optional[str] = Field(default=None, description="User ID or email (required for update, delete, change_status, update_password; defaults to 'me' for get)"),
    user_data: Optional[Dict[str, Any]] = Field(default=None, description="User payload for create, or partial payload for update"),
    status: Optional[str] = Field(default=None, description="Status filter for list (active, inactive, pending) or new status for change_status (activate, deactivate)"),
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, description="Page size for list operations"),
    page_number: int = Field(default=DEFAULT_PAGE_NUMBER, description="Page number for list operations (1-based)"),
    password: Optional[str] = Field(default=None, description="New password for update_password"),
    email: Optional[str] = Field(default=None, description="Email address for check_email")
) -> Dict[str, Any]:
    """User management operations.

    Actions:
    - create: Create a new user
    - get: Get details of a user
    - update: Update an existing user
    - delete: Delete a user
    - list: List account users with pagination
    - change_status: Activate or deactivate a user
    - update_password: Set a user's password
    - check_email: Look a user up by email address
    - get_scopes: List the OAuth scopes granted to the server
    """
    from ...core.dependency_injection import get_config, get_service
    config = get_config()
    service = get_service()

    tool_logger = get_tool_logger("users")
    tool_logger.info(f"Starting user operation: {action}")
    await ctx.info(f"Starting user operation: {action}")

    try:
        await ctx.report_progress(0, 100, f"Starting user operation: {action}")

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

        if action == "create":
            if not user_data:
                raise ValueError("user_data is required for create action")
            envelope = await asyncio.to_thread(service.create_user, user_data)

        elif action == "get":
            envelope = await asyncio.to_thread(service.get_user, user_id or "me")

        elif action == "update":
            if not user_id or not user_data:
                raise ValueError("user_id and user_data are required for update action")
            envelope = await asyncio.to_thread(service.update_user, user_id, user_data)

        elif action == "delete":
            if not user_id:
                raise ValueError("user_id is required for delete action")
            envelope = await asyncio.to_thread(service.delete_user, user_id)

        elif action == "list":
            await ctx.info(f"Retrieving users (page {page_number}, size {page_size})")
            envelope = await asyncio.to_thread(
                service.list_users, status or "active", page_size, page_number
            )

        elif action == "change_status":
            if not user_id or not status:
                raise ValueError("user_id and status are required for change_status action")
            envelope = await asyncio.to_thread(service.change_user_status, user_id, status)

        elif action == "update_password":
            if not user_id or not password:
                raise ValueError("user_id and password are required for update_password action")
            envelope = await asyncio.to_thread(service.update_user_password, user_id, password)

        elif action == "check_email":
            if not email:
                raise ValueError("email is required for check_email action")
            envelope = await asyncio.to_thread(service.check_user_email_exists, email)

        elif action == "get_scopes":
            envelope = service.get_scopes()

        else:
            raise ValueError(f"Unknown action: {action}")

        await ctx.report_progress(100, 100, f"Completed user operation: {action}")
        tool_logger.info(f"Completed user operation: {action} (status {envelope.status})")
        return envelope.to_dict()

    except Exception as e:
        tool_logger.error(f"Error in user operation {action}: {e}")
        await ctx.error(f"Error in user operation {action}: {str(e)}")
        raise
