from __future__ import annotations

import httpx
import pytest

from zoom_mcp_server.core.auth import AccessToken
from zoom_mcp_server.core.client import ZoomClient
from zoom_mcp_server.core.exceptions import ZoomTransportError

from conftest import json_of

TOKEN = AccessToken(access_token="tok-123", scope="meeting:read:admin")


@pytest.fixture()
def client(http_client) -> ZoomClient:
    return ZoomClient(TOKEN, http_client=http_client)


def test_success_status_is_always_200(zoom_api, client) -> None:
    zoom_api.add("POST", "/v2/users/me/meetings", status=201, json_body={"id": 85746065432})
    envelope = client.request("POST", "/v2/users/me/meetings", json_data={"topic": "x"})
    assert envelope.status == 200
    assert envelope.message == "Request successful"
    assert envelope.response == {"id": 85746065432}


def test_empty_success_body_is_null(zoom_api, client) -> None:
    zoom_api.add("DELETE", "/v2/meetings/1", status=204)
    envelope = client.request("DELETE", "/v2/meetings/1")
    assert envelope.to_dict() == {"status": 200, "message": "Request successful", "response": None}


def test_non_json_success_body_is_null(zoom_api, client) -> None:
    zoom_api.add("GET", "/v2/users/me", content=b"plain text")
    assert client.request("GET", "/v2/users/me").response is None


def test_auth_and_content_type_headers_override_caller(zoom_api, client) -> None:
    zoom_api.add("GET", "/v2/users/me", json_body={"id": "u1"})
    client.request(
        "GET",
        "/v2/users/me",
        headers={"authorization": "Bearer stale", "Content-Type": "text/plain", "X-Trace": "abc"},
    )
    request = zoom_api.last
    assert request.headers.get_list("Authorization") == ["Bearer tok-123"]
    assert request.headers.get_list("Content-Type") == ["application/json"]
    assert request.headers["X-Trace"] == "abc"


def test_client_error_keeps_real_status_and_body(zoom_api, client) -> None:
    body = {"code": 3001, "message": "Meeting does not exist: 999999999."}
    zoom_api.add("GET", "/v2/meetings/999999999", status=404, json_body=body)
    envelope = client.request("GET", "/v2/meetings/999999999")
    assert envelope.status == 404
    assert envelope.message == "Meeting does not exist: 999999999."
    assert envelope.response == body
    assert envelope.missing_scopes is None


def test_client_error_without_message_falls_back(zoom_api, client) -> None:
    zoom_api.add("GET", "/v2/users/x", status=403, content=b"")
    envelope = client.request("GET", "/v2/users/x")
    assert envelope.status == 403
    assert envelope.message == "Request failed"
    assert envelope.response is None


def test_missing_scopes_error(zoom_api, client) -> None:
    zoom_api.add("POST", "/v2/users", status=400, json_body={
        "code": 4711,
        "message": "Invalid access token, does not contain scopes:[user:write:admin, user:write].",
    })
    envelope = client.request("POST", "/v2/users", json_data={})
    assert envelope.status == 400
    assert envelope.missing_scopes == ["user:write:admin", "user:write"]


def test_other_400_has_no_missing_scopes(zoom_api, client) -> None:
    zoom_api.add("POST", "/v2/users", status=400, json_body={"code": 1005, "message": "User already in the account"})
    envelope = client.request("POST", "/v2/users", json_data={})
    assert "missing_scopes" not in envelope.to_dict()


def test_server_error_raises(zoom_api, client) -> None:
    zoom_api.add("GET", "/v2/users", status=503, json_body={"message": "down"})
    with pytest.raises(ZoomTransportError) as exc_info:
        client.request("GET", "/v2/users")
    assert exc_info.value.status_code == 503
    assert exc_info.value.body == {"message": "down"}


def test_network_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = ZoomClient(TOKEN, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(ZoomTransportError) as exc_info:
        client.request("GET", "/v2/users/me")
    assert exc_info.value.status_code is None


def test_absolute_and_relative_urls(zoom_api, http_client) -> None:
    zoom_api.add("GET", "/v2/users/me", json_body={})
    client = ZoomClient(TOKEN, base_url="https://eu.zoom.test/", http_client=http_client)
    client.request("GET", "/v2/users/me")
    assert str(zoom_api.last.url) == "https://eu.zoom.test/v2/users/me"
    client.send("GET", "https://api.zoom.us/v2/users/me")
    assert str(zoom_api.last.url) == "https://api.zoom.us/v2/users/me"


def test_query_and_body_passed_through(zoom_api, client) -> None:
    zoom_api.add("PATCH", "/v2/meetings/5", status=204)
    client.request("PATCH", "/v2/meetings/5", params={"occurrence_id": "1"}, json_data={"topic": "New"})
    assert zoom_api.last.url.params["occurrence_id"] == "1"
    assert json_of(zoom_api.last) == {"topic": "New"}
