#!/usr/bin/env python3
"""
Zoom MCP Server - HTTP Gateway

Sends bearer-authenticated requests to the Zoom REST API and normalizes
every answer into a ResponseEnvelope.
"""

import logging
from typing import Any, Dict, Optional
import httpx

from .auth import AccessToken
from .exceptions import ZoomTransportError
from .response import ResponseEnvelope, build_response

DEFAULT_API_BASE_URL = "https://api.zoom.us"


class ZoomClient:
    """Authenticated gateway to the Zoom REST API."""

    def __init__(
        self,
        token: AccessToken,
        base_url: str = DEFAULT_API_BASE_URL,
        http_client: Optional[httpx.Client] = None,
    ):
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client or httpx.Client(follow_redirects=True)
        self.logger = logging.getLogger(__name__)

    def _resolve_url(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url}{endpoint}"

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> ResponseEnvelope:
        """Send a request and wrap the outcome in a ResponseEnvelope.

        Success answers always report status 200 and "Request successful".
        4xx answers report the real status and the provider's message.

        Raises:
            ZoomTransportError: on 5xx answers and network failures.
        """
        request_headers = httpx.Headers(headers or {})
        request_headers["Authorization"] = f"Bearer {self._token.access_token}"
        request_headers["Content-Type"] = "application/json"

        url = self._resolve_url(endpoint)
        try:
            response = self.http_client.request(
                method,
                url,
                params=params,
                json=json_data,
                headers=request_headers,
            )
        except httpx.HTTPError as e:
            self.logger.error(f"Request failed: {method} {url}: {e}")
            raise ZoomTransportError(f"Request failed: {method} {url}: {e}") from e

        data = self._decode_body(response)

        if response.is_client_error:
            message = data.get("message") if isinstance(data, dict) else None
            if not isinstance(message, str):
                message = "Request failed"
            self.logger.warning(f"Client error {response.status_code} for {method} {url}: {message}")
            return build_response(response.status_code, message, data)

        if response.is_server_error:
            self.logger.error(f"Server error {response.status_code} for {method} {url}")
            raise ZoomTransportError(
                f"Server error: HTTP {response.status_code} for {method} {url}",
                status_code=response.status_code,
                body=data,
            )

        return build_response(200, "Request successful", data)

    # Alias matching the gateway contract
    send = request

    def close(self) -> None:
        """Close the HTTP client."""
        self.http_client.close()
