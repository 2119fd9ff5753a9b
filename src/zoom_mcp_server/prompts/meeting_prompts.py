#!/usr/bin/env python3
"""Zoom Meeting and User Prompts"""

from typing import Optional
from pydantic import Field


async def schedule_meeting(
    topic: str = Field(description="Meeting topic (REQUIRED)"),
    start_time: str = Field(description="Start time in ISO 8601 UTC, e.g. 2024-11-07T15:00:00Z (REQUIRED)"),
    duration: int = Field(default=30, description="Duration in minutes"),
    registrant_emails: Optional[str] = Field(default=None, description="Comma-separated emails to register after creation")
) -> str:
    """Schedule a Zoom meeting and optionally register participants."""
    registrant_step = ""
    report_step = 3
    if registrant_emails:
        emails = [e.strip() for e in registrant_emails.split(",") if e.strip()]
        registrant_step = (
            "\n3. For each of these emails call manage_meetings with action='add_registrant', "
            "the new meeting_id and registrant_data={'email': <email>, 'first_name': <name part of the email>}: "
            f"{', '.join(emails)}"
        )
        report_step = 4

    return f"""Use the manage_meetings tool to schedule a meeting.

Execute this workflow:
1. Call manage_meetings with action='create' and
   meeting_data={{'topic': '{topic}', 'type': 2, 'start_time': '{start_time}', 'duration': {duration}}}
2. Check the returned envelope: status 200 means success and response.id is the new meeting ID.
   If status is 400 and missing_scopes is present, report those scopes to the user and stop.{registrant_step}
{report_step}. Report the meeting ID and response.join_url to the user.
"""


async def onboard_user(
    email: str = Field(description="Email of the new user (REQUIRED)"),
    first_name: str = Field(description="First name (REQUIRED)"),
    last_name: str = Field(description="Last name (REQUIRED)"),
    user_type: int = Field(default=1, description="Zoom user type: 1 basic, 2 licensed")
) -> str:
    """Create a Zoom user unless the email is already taken."""
    return f"""Use the manage_users tool to onboard {first_name} {last_name}.

Execute this workflow:
1. Call manage_users with action='check_email' and email='{email}'.
   A status of 200 means the user already exists: report it and stop.
2. Otherwise call manage_users with action='create' and
   user_data={{'action': 'create', 'user_info': {{'email': '{email}', 'type': {user_type}, 'first_name': '{first_name}', 'last_name': '{last_name}'}}}}
3. Report the returned status and message. If missing_scopes is present, list the scopes the app still needs.
"""
