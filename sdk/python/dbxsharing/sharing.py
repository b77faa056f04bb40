"""
Dropbox Sharing API

Create, list and revoke shared links.
"""

from contextlib import closing
from typing import Any, Dict, Optional, Protocol, Tuple, Type, TypeVar

import httpx

from dbxsharing.exceptions import ValidationError
from dbxsharing.models import (
    CreateSharedLinkOutput,
    CreateSharedLinkWithSettingsOutput,
    ListSharedLinksOutput,
    Output,
    SharedLinkSettings,
)

OutputT = TypeVar("OutputT", bound=Output)


class Transport(Protocol):
    """Anything that can POST a JSON body and hand back the open response."""

    def call(self, path: str, body: Any) -> Tuple[httpx.Response, httpx.Headers]: ...


class Sharing:
    """
    Sharing namespace of the Dropbox API.

    Each method is a single round trip through ``client.call``, which takes an
    endpoint path and a JSON body and returns the open response together with
    its headers. Normally reached as ``DropboxClient.sharing``.
    """

    def __init__(self, client: Transport) -> None:
        self._client = client

    def _request(self, path: str, body: Dict[str, Any], model: Type[OutputT]) -> OutputT:
        """Send a request and decode the response body into ``model``."""
        response, headers = self._client.call(path, body)
        with closing(response):
            out = model.model_validate_json(response.read())
        out.headers = headers
        return out

    def _validate_path(self, path: str) -> None:
        if not path:
            raise ValidationError("Path cannot be empty")

    def create_shared_link(self, path: str, short_url: bool = False) -> CreateSharedLinkOutput:
        """
        Create a shared link with default settings.

        Args:
            path: Dropbox path of the file or folder to share
            short_url: Whether to return a shortened URL

        Returns:
            CreateSharedLinkOutput with the link URL and visibility
        """
        self._validate_path(path)
        return self._request(
            "/sharing/create_shared_link",
            {"path": path, "short_url": short_url},
            CreateSharedLinkOutput,
        )

    def create_shared_link_with_settings(
        self,
        path: str,
        settings: Optional[SharedLinkSettings] = None,
    ) -> CreateSharedLinkWithSettingsOutput:
        """
        Create a shared link with the requested settings.

        Args:
            path: Dropbox path of the file or folder to share
            settings: Requested visibility, password and expiration

        Returns:
            CreateSharedLinkWithSettingsOutput with link metadata and permissions
        """
        self._validate_path(path)
        body: Dict[str, Any] = {"path": path}
        if settings is not None:
            body["settings"] = settings.to_wire()
        return self._request(
            "/sharing/create_shared_link_with_settings",
            body,
            CreateSharedLinkWithSettingsOutput,
        )

    def revoke_shared_link(self, url: str) -> None:
        """
        Revoke a shared link.

        Args:
            url: URL of the shared link to revoke
        """
        if not url:
            raise ValidationError("Shared link URL cannot be empty")

        response, _ = self._client.call("/sharing/revoke_shared_link", {"url": url})
        response.close()

    def list_shared_links(
        self,
        path: Optional[str] = None,
        cursor: Optional[str] = None,
        direct_only: Optional[bool] = None,
    ) -> ListSharedLinksOutput:
        """
        List one page of shared links.

        When ``has_more`` is set on the result, call again with its
        ``cursor`` to fetch the next page.

        Args:
            path: Only return links for this path (all links if not provided)
            cursor: Cursor returned by a previous call
            direct_only: Only return links directly on ``path``, not on its parents

        Returns:
            ListSharedLinksOutput with links, has_more and cursor
        """
        body: Dict[str, Any] = {}
        if path:
            body["path"] = path
        if cursor:
            body["cursor"] = cursor
        if direct_only is not None:
            body["direct_only"] = direct_only

        return self._request("/sharing/list_shared_links", body, ListSharedLinksOutput)
