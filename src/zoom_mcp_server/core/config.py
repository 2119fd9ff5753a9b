#!/usr/bin/env python3
"""
Zoom MCP Server - Core Configuration

Handles environment variables, configuration validation, and server settings.
"""

import os
from typing import Any, Dict
from dotenv import load_dotenv

from .auth import DEFAULT_OAUTH_URL, Credentials
from .client import DEFAULT_API_BASE_URL

# Load environment variables
load_dotenv()


class ZoomConfig:
    """Configuration management for the Zoom MCP Server."""

    def __init__(self):
        # Server Configuration
        self.server_name = os.getenv("MCP_SERVER_NAME", "Zoom MCP Server")
        self.server_version = os.getenv("MCP_SERVER_VERSION", "1.0.0")

        # Transport Configuration
        self.transport = os.getenv("TRANSPORT", "stdio").lower()
        self.http_host = os.getenv("HTTP_HOST", "localhost")
        self.http_port = int(os.getenv("HTTP_PORT", "8000"))

        # Logging Configuration
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        # Read-Only Mode
        self.read_only_mode = os.getenv("READ_ONLY_MODE", "false").lower() == "true"

        # Zoom API Configuration
        self.api_base_url = os.getenv("ZOOM_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
        self.oauth_url = os.getenv("ZOOM_OAUTH_URL", DEFAULT_OAUTH_URL)

        # Server-to-Server OAuth credentials
        self.account_id = os.getenv("ZOOM_ACCOUNT_ID")
        self.client_id = os.getenv("ZOOM_CLIENT_ID")
        self.client_secret = os.getenv("ZOOM_CLIENT_SECRET")

        self._validate_config()

    def _validate_config(self):
        """Validate configuration settings."""
        if self.transport not in ["stdio", "streamable-http"]:
            raise ValueError(f"Invalid transport mode: {self.transport}. Must be 'stdio' or 'streamable-http'")

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level not in valid_log_levels:
            raise ValueError(f"Invalid log level: {self.log_level}. Must be one of {valid_log_levels}")

        if not (1 <= self.http_port <= 65535):
            raise ValueError(f"Invalid HTTP port: {self.http_port}. Must be between 1 and 65535")

        if not self.api_base_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid Zoom API base URL: {self.api_base_url}")
        if not self.oauth_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid Zoom OAuth URL: {self.oauth_url}")

        # stdio reports missing credentials from main() with a clean message instead
        if self.transport == "streamable-http" and not self.is_oauth_configured():
            raise ValueError(
                "ZOOM_ACCOUNT_ID, ZOOM_CLIENT_ID and ZOOM_CLIENT_SECRET are required for HTTP transport"
            )

    def is_oauth_configured(self) -> bool:
        """Check if OAuth credentials are configured."""
        return bool(self.account_id and self.client_id and self.client_secret)

    def get_credentials(self) -> Credentials:
        """Get the account credentials as an immutable value."""
        return Credentials(
            account_id=self.account_id or "",
            client_id=self.client_id or "",
            client_secret=self.client_secret or "",
        )

    def get_server_info(self) -> Dict[str, Any]:
        """Get server information for logging and status."""
        return {
            "name": self.server_name,
            "version": self.server_version,
            "transport": self.transport,
            "http_host": self.http_host,
            "http_port": self.http_port,
            "log_level": self.log_level,
            "read_only_mode": self.read_only_mode,
            "oauth_configured": self.is_oauth_configured(),
            "api_base_url": self.api_base_url,
            "oauth_url": self.oauth_url,
        }
