"""
Dropbox Sharing Python SDK

A Python client library for the Dropbox shared link API.

Example usage:
    from datetime import datetime, timedelta, timezone

    from dbxsharing import DropboxClient, SharedLinkSettings, VisibilityType

    client = DropboxClient(access_token="sl.your_token_here")

    # Create a password protected link expiring in a week
    link = client.sharing.create_shared_link_with_settings(
        "/reports/q3.pdf",
        SharedLinkSettings(
            requested_visibility=VisibilityType.PASSWORD,
            link_password="hunter2",
            expires=datetime.now(timezone.utc) + timedelta(days=7),
        ),
    )
    print(f"Shared at: {link.url}")

    # Revoke it again
    client.sharing.revoke_shared_link(link.url)
"""

from dbxsharing.client import DropboxClient
from dbxsharing.exceptions import (
    DropboxError,
    AccessError,
    ApiError,
    AuthenticationError,
    BadInputError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from dbxsharing.models import (
    CreateSharedLinkOutput,
    CreateSharedLinkWithSettingsOutput,
    LinkPermissions,
    ListSharedLinksOutput,
    RevokeFailureReason,
    RevokeFailureReasonType,
    SharedLinkMetadata,
    SharedLinkSettings,
    TeamMemberInfo,
    Visibility,
    VisibilityType,
)
from dbxsharing.sharing import Sharing

__version__ = "0.1.0"
__all__ = [
    "DropboxClient",
    "Sharing",
    "DropboxError",
    "AccessError",
    "ApiError",
    "AuthenticationError",
    "BadInputError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ValidationError",
    "CreateSharedLinkOutput",
    "CreateSharedLinkWithSettingsOutput",
    "LinkPermissions",
    "ListSharedLinksOutput",
    "RevokeFailureReason",
    "RevokeFailureReasonType",
    "SharedLinkMetadata",
    "SharedLinkSettings",
    "TeamMemberInfo",
    "Visibility",
    "VisibilityType",
]
