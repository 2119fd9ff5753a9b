#!/usr/bin/env python3
"""
Zoom MCP Server - Service Base

Authenticates once on construction and dispatches operations from the
endpoint table through the HTTP gateway.
"""

import logging
from typing import Any, Dict, Optional
import httpx

from ..core.auth import DEFAULT_OAUTH_URL, AccessToken, Credentials, ZoomAuthenticator
from ..core.client import DEFAULT_API_BASE_URL, ZoomClient
from ..core.config import ZoomConfig
from ..core.endpoints import ENDPOINTS
from ..core.response import ResponseEnvelope


class ZoomServiceBase:
    """Authenticated entry point shared by the user and meeting services.

    The access token is obtained eagerly here and never refreshed; build a
    new service to get a new token.
    """

    def __init__(
        self,
        account_id: str,
        client_id: str,
        client_secret: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
        oauth_url: str = DEFAULT_OAUTH_URL,
        http_client: Optional[httpx.Client] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.credentials = Credentials(
            account_id=account_id,
            client_id=client_id,
            client_secret=client_secret,
        )
        self.http_client = http_client or httpx.Client(follow_redirects=True)

        authenticator = ZoomAuthenticator(oauth_url, http_client=self.http_client)
        self._token = authenticator.authenticate(self.credentials)
        self.client = ZoomClient(self._token, base_url=api_base_url, http_client=self.http_client)

    @classmethod
    def from_config(cls, config: ZoomConfig, http_client: Optional[httpx.Client] = None):
        """Build an authenticated service from a ZoomConfig."""
        credentials = config.get_credentials()
        return cls(
            credentials.account_id,
            credentials.client_id,
            credentials.client_secret,
            api_base_url=config.api_base_url,
            oauth_url=config.oauth_url,
            http_client=http_client,
        )

    @property
    def token(self) -> AccessToken:
        return self._token

    def _call(
        self,
        operation: str,
        path_params: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Any = None,
    ) -> ResponseEnvelope:
        endpoint = ENDPOINTS[operation]
        path = endpoint.format(**(path_params or {}))
        self.logger.debug(f"{operation}: {endpoint.method} {path}")
        return self.client.request(endpoint.method, path, params=params, json_data=json_data)

    def close(self) -> None:
        """Close the HTTP client."""
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
