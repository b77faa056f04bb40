"""
Dropbox Client

Main client class holding the HTTP connection and the shared call primitive.
"""

import logging
import warnings
from typing import Any, Tuple

import httpx

from dbxsharing.exceptions import ValidationError, raise_for_status
from dbxsharing.sharing import Sharing

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.dropboxapi.com/2"
USER_AGENT = "dbxsharing-python-sdk/0.1.0"


class DropboxClient:
    """
    Dropbox API client.

    Owns the authenticated HTTP connection. API namespaces are exposed as
    attributes and route their requests through :meth:`call`.

    Example:
        >>> client = DropboxClient(access_token="sl.your_token_here")
        >>> link = client.sharing.create_shared_link("/hello.txt")
        >>> print(link.url)
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        verify_ssl: bool = True,
    ) -> None:
        """
        Initialize Dropbox client.

        Args:
            access_token: OAuth2 access token sent as a bearer token
            base_url: Base URL of the Dropbox RPC API
            timeout: Request timeout in seconds (default: 30s)
            verify_ssl: Whether to verify SSL certificates (default: True).
                        WARNING: Setting this to False is a security risk and should
                        only be used against local test servers.
        """
        if not access_token:
            raise ValidationError("Access token cannot be empty")

        self.base_url = base_url.rstrip("/")
        self._access_token = access_token  # Use private attribute for security
        self.timeout = timeout
        self.verify_ssl = verify_ssl

        if not verify_ssl:
            warnings.warn(
                "SSL verification is disabled. This is insecure and should only "
                "be used against local test servers.",
                UserWarning,
                stacklevel=2,
            )

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            verify=verify_ssl,
            headers=self._build_headers(),
        )

        self.sharing = Sharing(self)

    @property
    def access_token(self) -> str:
        """Access token (use with care - do not log this value)."""
        return self._access_token

    def __repr__(self) -> str:
        """String representation with redacted token."""
        return (
            f"DropboxClient(base_url={self.base_url!r}, "
            f"access_token=***, timeout={self.timeout})"
        )

    def _build_headers(self) -> dict:
        """Build request headers with authentication."""
        return {
            "User-Agent": USER_AGENT,
            "Authorization": f"Bearer {self._access_token}",
        }

    def _raise_for_error(self, response: httpx.Response) -> None:
        """
        Read an error response and raise the matching exception.

        Dropbox sends plain text for 400 and 5xx responses and a JSON body
        with ``error_summary`` and ``error`` for endpoint errors.
        """
        response.read()
        error_code = None
        try:
            error_data = response.json()
            message = error_data.get("error_summary") or "Unknown error"
            error = error_data.get("error")
            if isinstance(error, dict):
                error_code = error.get(".tag")
        except Exception:
            message = response.text or f"HTTP {response.status_code}"

        retry_after = None
        header = response.headers.get("retry-after")
        if header and header.isdigit():
            retry_after = int(header)

        logger.warning(
            "Dropbox API error %s on %s: %s",
            response.status_code,
            response.request.url.path,
            message,
        )
        raise_for_status(response.status_code, message, error_code, retry_after)

    def call(self, path: str, body: Any) -> Tuple[httpx.Response, httpx.Headers]:
        """
        POST a JSON body to an RPC endpoint.

        Args:
            path: Endpoint path relative to the base URL (e.g. "/sharing/revoke_shared_link")
            body: JSON-serializable request body

        Returns:
            The open, unread response and its headers. The caller owns the
            response and must close it.

        Raises:
            DropboxError: On API errors (the response is already closed)
            httpx.HTTPError: On network failures
        """
        logger.debug("POST %s", path)
        request = self._client.build_request("POST", path, json=body)
        response = self._client.send(request, stream=True)
        logger.debug("POST %s -> %s", path, response.status_code)

        if response.status_code >= 400:
            try:
                self._raise_for_error(response)
            finally:
                response.close()

        return response, response.headers

    def close(self) -> None:
        """Close the HTTP client connection."""
        self._client.close()

    def __enter__(self) -> "DropboxClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
