import json
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qs

import httpx
import pytest

from zoom_mcp_server.services import ZoomIntegrationService

TOKEN_PATH = "/oauth/token"
GRANTED_SCOPE = "user:read:admin user:write:admin meeting:read:admin meeting:write:admin"


class FakeZoomApi:
    """Routes httpx requests to canned responses and records them."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], httpx.Response] = {}

    def add(self, method: str, path: str, status: int = 200, json_body: Any = None, content: Optional[bytes] = None):
        if content is not None:
            response = httpx.Response(status, content=content)
        elif json_body is not None:
            response = httpx.Response(status, json=json_body)
        else:
            response = httpx.Response(status)
        self.routes[(method, path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"code": 404, "message": "No route"})
        return httpx.Response(route.status_code, content=route.content, headers=route.headers)

    def calls_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def form_of(request: httpx.Request) -> Dict[str, str]:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def json_of(request: httpx.Request) -> Any:
    return json.loads(request.content) if request.content else None


@pytest.fixture()
def zoom_api() -> FakeZoomApi:
    api = FakeZoomApi()
    api.add("POST", TOKEN_PATH, json_body={
        "access_token": "tok-123",
        "token_type": "bearer",
        "expires_in": 3599,
        "scope": GRANTED_SCOPE,
    })
    return api


@pytest.fixture()
def http_client(zoom_api):
    client = httpx.Client(transport=httpx.MockTransport(zoom_api.handler), follow_redirects=True)
    try:
        yield client
    finally:
        client.close()


@pytest.fixture()
def service(http_client) -> ZoomIntegrationService:
    return ZoomIntegrationService("acct-1", "client-1", "secret-1", http_client=http_client)
