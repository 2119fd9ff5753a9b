#!/usr/bin/env python3
"""
Zoom MCP Server - Exceptions

Errors raised by the authenticator and the HTTP gateway. Client errors (4xx)
are never raised; they are returned as response envelopes.
"""

from typing import Any, Optional


class ZoomError(Exception):
    """Base error for the Zoom client wrapper."""
    pass


class ZoomAuthError(ZoomError):
    """The OAuth token endpoint was unreachable or rejected the credentials."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ZoomTransportError(ZoomError):
    """A resource call failed with a server error or never got a response."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
