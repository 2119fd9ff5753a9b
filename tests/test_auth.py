from __future__ import annotations

import base64

import httpx
import jwt
import pytest

from zoom_mcp_server.core.auth import AccessToken, Credentials, ZoomAuthenticator
from zoom_mcp_server.core.exceptions import ZoomAuthError

from conftest import TOKEN_PATH, form_of

CREDS = Credentials(account_id="acct-1", client_id="client-1", client_secret="secret-1")


def test_token_request_wire_format(zoom_api, http_client) -> None:
    token = ZoomAuthenticator(http_client=http_client).authenticate(CREDS)

    request = zoom_api.last
    assert request.method == "POST"
    assert str(request.url) == "https://zoom.us/oauth/token"
    assert form_of(request) == {"grant_type": "account_credentials", "account_id": "acct-1"}
    expected = base64.b64encode(b"client-1:secret-1").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert token.access_token == "tok-123"
    assert token.scopes[0] == "user:read:admin"


def test_missing_fields_decode_to_empty_strings(zoom_api, http_client) -> None:
    zoom_api.add("POST", TOKEN_PATH, json_body={"token_type": "bearer"})
    token = ZoomAuthenticator(http_client=http_client).authenticate(CREDS)
    assert token.access_token == ""
    assert token.scope == ""


def test_non_json_token_body_is_tolerated(zoom_api, http_client) -> None:
    zoom_api.add("POST", TOKEN_PATH, content=b"<html>ok</html>")
    token = ZoomAuthenticator(http_client=http_client).authenticate(CREDS)
    assert token == AccessToken()


def test_rejected_credentials_raise(zoom_api, http_client) -> None:
    zoom_api.add("POST", TOKEN_PATH, status=401, json_body={"reason": "Invalid client_id or client_secret"})
    with pytest.raises(ZoomAuthError) as exc_info:
        ZoomAuthenticator(http_client=http_client).authenticate(CREDS)
    assert exc_info.value.status_code == 401
    assert "Invalid client_id" in exc_info.value.body


def test_unreachable_endpoint_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    with pytest.raises(ZoomAuthError) as exc_info:
        ZoomAuthenticator(http_client=client).authenticate(CREDS)
    assert exc_info.value.status_code is None


def test_custom_oauth_url(zoom_api, http_client) -> None:
    zoom_api.add("POST", "/custom/token", json_body={"access_token": "t", "scope": "s"})
    token = ZoomAuthenticator("https://auth.example.test/custom/token", http_client=http_client).authenticate(CREDS)
    assert token.access_token == "t"
    assert zoom_api.last.url.host == "auth.example.test"


def test_scope_split_keeps_single_space_semantics() -> None:
    assert AccessToken(access_token="t", scope="a b").scopes == ["a", "b"]
    assert AccessToken(access_token="t", scope="").scopes == [""]


def test_claims_decoded_without_verification() -> None:
    raw = jwt.encode({"aid": "acct-1", "exp": 1700000000, "iss": "zoom"}, "test-signing-key-0123456789abcdef", algorithm="HS256")
    token = AccessToken(access_token=raw, scope="")
    claims = token.claims()
    assert claims["aid"] == "acct-1"
    assert claims["exp"] == 1700000000


def test_claims_empty_for_opaque_token() -> None:
    assert AccessToken(access_token="opaque", scope="").claims() == {}
    assert AccessToken().claims() == {}


def test_secrets_not_in_repr() -> None:
    assert "secret-1" not in repr(CREDS)
    assert "tok-123" not in repr(AccessToken(access_token="tok-123", scope="a"))
