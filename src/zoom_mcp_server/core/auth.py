#!/usr/bin/env python3
"""
Zoom MCP Server - Authentication Module

Handles the Server-to-Server OAuth account credentials flow. A token is
requested once per facade and never refreshed.
"""

import base64
import logging
from typing import Any, Dict, List, Optional
import httpx
import jwt
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ZoomAuthError

DEFAULT_OAUTH_URL = "https://zoom.us/oauth/token"


class Credentials(BaseModel):
    """Account credentials of a Zoom Server-to-Server OAuth app."""

    model_config = ConfigDict(frozen=True)

    account_id: str
    client_id: str
    client_secret: str = Field(repr=False)

    def basic_auth_header(self) -> str:
        """Build the HTTP Basic value from client id and secret."""
        raw = f"{self.client_id}:{self.client_secret}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")


class AccessToken(BaseModel):
    """Bearer token and granted scope string from the token endpoint."""

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(default="", repr=False)
    scope: str = ""

    @property
    def scopes(self) -> List[str]:
        # Single-space split: an empty scope string yields [""]
        return self.scope.split(" ")

    def claims(self) -> Dict[str, Any]:
        """Decode the token payload without verifying its signature.

        Returns an empty dict when the token is not a JWT.
        """
        if not self.access_token:
            return {}
        try:
            return jwt.decode(self.access_token, options={"verify_signature": False})
        except jwt.PyJWTError:
            return {}


class ZoomAuthenticator:
    """OAuth account credentials exchange against Zoom's token endpoint."""

    def __init__(self, oauth_url: str = DEFAULT_OAUTH_URL, http_client: Optional[httpx.Client] = None):
        self.oauth_url = oauth_url
        self.http_client = http_client or httpx.Client()
        self.logger = logging.getLogger(__name__)

    def authenticate(self, credentials: Credentials) -> AccessToken:
        """Request an access token for the given credentials.

        Missing ``access_token`` or ``scope`` fields decode to empty strings.

        Raises:
            ZoomAuthError: if the endpoint is unreachable or answers with a non-2xx status.
        """
        try:
            response = self.http_client.post(
                self.oauth_url,
                data={
                    "grant_type": "account_credentials",
                    "account_id": credentials.account_id,
                },
                headers={"Authorization": credentials.basic_auth_header()},
            )
        except httpx.HTTPError as e:
            self.logger.error(f"Token request failed: {e}")
            raise ZoomAuthError(f"Token request failed: {e}") from e

        if not response.is_success:
            error_text = response.text if response.text else "No error details provided"
            self.logger.error(f"Token request rejected: HTTP {response.status_code}")
            raise ZoomAuthError(
                f"Token request failed: HTTP {response.status_code} - {error_text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            token_data = response.json()
        except ValueError:
            token_data = {}
        if not isinstance(token_data, dict):
            token_data = {}

        token = AccessToken(
            access_token=str(token_data.get("access_token") or ""),
            scope=str(token_data.get("scope") or ""),
        )
        self.logger.info("OAuth access token obtained successfully")
        return token

    def close(self) -> None:
        """Close the HTTP client."""
        self.http_client.close()
