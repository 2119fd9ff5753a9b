#!/usr/bin/env python3
"""
Zoom MCP Server - Core Module

Core functionality including authentication, configuration, the HTTP gateway
and the response envelope.
"""

from .auth import AccessToken, Credentials, ZoomAuthenticator
from .client import ZoomClient
from .config import ZoomConfig
from .endpoints import ENDPOINTS, Endpoint
from .exceptions import ZoomAuthError, ZoomError, ZoomTransportError
from .response import ResponseEnvelope, build_response, extract_missing_scopes

__all__ = [
    "AccessToken",
    "Credentials",
    "ZoomAuthenticator",
    "ZoomClient",
    "ZoomConfig",
    "ENDPOINTS",
    "Endpoint",
    "ZoomAuthError",
    "ZoomError",
    "ZoomTransportError",
    "ResponseEnvelope",
    "build_response",
    "extract_missing_scopes",
]
