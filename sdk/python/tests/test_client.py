"""
Tests for Dropbox client.
"""

import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from dbxsharing import DropboxClient, Sharing
from dbxsharing.exceptions import (
    AccessError,
    ApiError,
    AuthenticationError,
    BadInputError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)

REVOKE_URL = "https://api.dropboxapi.com/2/sharing/revoke_shared_link"


class TestClientInitialization:
    """Test client initialization."""

    def test_init_with_token(self):
        """Test client initialization with access token."""
        client = DropboxClient(access_token="sl.test_token")
        assert client.base_url == "https://api.dropboxapi.com/2"
        assert client.access_token == "sl.test_token"
        assert isinstance(client.sharing, Sharing)
        client.close()

    def test_init_strips_trailing_slash(self):
        """Test that trailing slash is stripped from base URL."""
        client = DropboxClient(access_token="sl.test_token", base_url="https://example.com/2/")
        assert client.base_url == "https://example.com/2"
        client.close()

    def test_init_requires_token(self):
        """Test that an empty access token is rejected."""
        with pytest.raises(ValidationError, match="Access token"):
            DropboxClient(access_token="")

    def test_repr_redacts_token(self):
        """Test that the token never appears in repr."""
        with DropboxClient(access_token="sl.secret_value") as client:
            assert "sl.secret_value" not in repr(client)
            assert "***" in repr(client)

    def test_disabled_ssl_verification_warns(self):
        """Test warning when SSL verification is disabled."""
        with pytest.warns(UserWarning, match="SSL verification is disabled"):
            client = DropboxClient(access_token="sl.test_token", verify_ssl=False)
        client.close()

    def test_context_manager(self):
        """Test client as context manager."""
        with DropboxClient(access_token="sl.test_token") as client:
            assert client is not None


class TestCall:
    """Test the shared call primitive."""

    def test_call_posts_json_with_auth(self, httpx_mock: HTTPXMock):
        """Test that call sends an authenticated JSON POST."""
        httpx_mock.add_response(
            url=REVOKE_URL,
            method="POST",
            json={},
            headers={"X-Dropbox-Request-Id": "req-1"},
        )

        with DropboxClient(access_token="sl.test_token") as client:
            response, headers = client.call(
                "/sharing/revoke_shared_link", {"url": "https://db.tt/abc"}
            )
            response.close()

        assert headers["x-dropbox-request-id"] == "req-1"

        request = httpx_mock.get_request()
        assert request.headers["authorization"] == "Bearer sl.test_token"
        assert request.headers["content-type"] == "application/json"
        assert request.headers["user-agent"].startswith("dbxsharing-python-sdk/")
        assert json.loads(request.content) == {"url": "https://db.tt/abc"}

    def test_call_respects_custom_base_url(self, httpx_mock: HTTPXMock):
        """Test that endpoint paths are joined onto the base URL."""
        httpx_mock.add_response(
            url="https://example.com/2/sharing/revoke_shared_link",
            method="POST",
            json={},
        )

        with DropboxClient(access_token="sl.test_token", base_url="https://example.com/2") as client:
            response, _ = client.call("/sharing/revoke_shared_link", {"url": "u"})
            response.close()


class TestErrorHandling:
    """Test error handling."""

    def test_bad_input_error(self, httpx_mock: HTTPXMock):
        """Test 400 responses with a plain text body."""
        httpx_mock.add_response(
            url=REVOKE_URL,
            method="POST",
            status_code=400,
            text='Error in call to API function "sharing/revoke_shared_link": missing url',
        )

        with DropboxClient(access_token="sl.test_token") as client:
            with pytest.raises(BadInputError, match="missing url"):
                client.call("/sharing/revoke_shared_link", {})

    def test_authentication_error(self, httpx_mock: HTTPXMock):
        """Test authentication error handling."""
        httpx_mock.add_response(
            url=REVOKE_URL,
            method="POST",
            status_code=401,
            json={
                "error_summary": "invalid_access_token/...",
                "error": {".tag": "invalid_access_token"},
            },
        )

        with DropboxClient(access_token="sl.invalid") as client:
            with pytest.raises(AuthenticationError) as exc_info:
                client.call("/sharing/revoke_shared_link", {"url": "u"})

        assert exc_info.value.status_code == 401
        assert exc_info.value.error_code == "invalid_access_token"

    def test_access_error(self, httpx_mock: HTTPXMock):
        """Test 403 responses."""
        httpx_mock.add_response(
            url=REVOKE_URL,
            method="POST",
            status_code=403,
            json={"error_summary": "paper_access_denied/..", "error": {".tag": "paper_access_denied"}},
        )

        with DropboxClient(access_token="sl.test_token") as client:
            with pytest.raises(AccessError):
                client.call("/sharing/revoke_shared_link", {"url": "u"})

    def test_endpoint_error(self, httpx_mock: HTTPXMock):
        """Test 409 endpoint errors carry the summary and tag."""
        httpx_mock.add_response(
            url=REVOKE_URL,
            method="POST",
            status_code=409,
            json={
                "error_summary": "shared_link_access_denied/..",
                "error": {".tag": "shared_link_access_denied"},
            },
        )

        with DropboxClient(access_token="sl.test_token") as client:
            with pytest.raises(ApiError) as exc_info:
                client.call("/sharing/revoke_shared_link", {"url": "u"})

        assert not isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.message == "shared_link_access_denied/.."
        assert exc_info.value.error_code == "shared_link_access_denied"
        assert str(exc_info.value) == (
            "shared_link_access_denied/.. (HTTP 409) [shared_link_access_denied]"
        )

    def test_not_found_error(self, httpx_mock: HTTPXMock):
        """Test 409 errors naming a not_found variant."""
        httpx_mock.add_response(
            url=REVOKE_URL,
            method="POST",
            status_code=409,
            json={
                "error_summary": "shared_link_not_found/..",
                "error": {".tag": "shared_link_not_found"},
            },
        )

        with DropboxClient(access_token="sl.test_token") as client:
            with pytest.raises(NotFoundError):
                client.call("/sharing/revoke_shared_link", {"url": "u"})

    def test_rate_limit_error(self, httpx_mock: HTTPXMock):
        """Test rate limit error handling."""
        httpx_mock.add_response(
            url=REVOKE_URL,
            method="POST",
            status_code=429,
            headers={"Retry-After": "30"},
            json={
                "error_summary": "too_many_requests/..",
                "error": {".tag": "too_many_requests"},
            },
        )

        with DropboxClient(access_token="sl.test_token") as client:
            with pytest.raises(RateLimitError) as exc_info:
                client.call("/sharing/revoke_shared_link", {"url": "u"})

        assert exc_info.value.retry_after == 30

    def test_server_error(self, httpx_mock: HTTPXMock):
        """Test 5xx responses."""
        httpx_mock.add_response(
            url=REVOKE_URL,
            method="POST",
            status_code=503,
            text="Service Unavailable",
        )

        with DropboxClient(access_token="sl.test_token") as client:
            with pytest.raises(ServerError, match="Service Unavailable"):
                client.call("/sharing/revoke_shared_link", {"url": "u"})

    def test_network_error_propagates(self, httpx_mock: HTTPXMock):
        """Test that connection failures surface as the httpx exception."""
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        with DropboxClient(access_token="sl.test_token") as client:
            with pytest.raises(httpx.ConnectError, match="Connection refused"):
                client.sharing.revoke_shared_link("https://db.tt/c0mF0sH")

    def test_error_response_is_closed(self, httpx_mock: HTTPXMock, monkeypatch):
        """Test that the error response is closed before the exception is raised."""
        httpx_mock.add_response(
            url=REVOKE_URL,
            method="POST",
            status_code=409,
            json={
                "error_summary": "shared_link_access_denied/..",
                "error": {".tag": "shared_link_access_denied"},
            },
        )

        with DropboxClient(access_token="sl.test_token") as client:
            sent = []
            send = client._client.send

            def recording_send(request, **kwargs):
                response = send(request, **kwargs)
                sent.append(response)
                return response

            monkeypatch.setattr(client._client, "send", recording_send)

            with pytest.raises(ApiError):
                client.call("/sharing/revoke_shared_link", {"url": "u"})

        assert len(sent) == 1
        assert sent[0].is_closed
