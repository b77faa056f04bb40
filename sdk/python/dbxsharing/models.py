"""
Dropbox Sharing SDK Data Models

Pydantic models for Dropbox sharing API requests and responses.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field

# Wire format for shared link expiration after the zero-padded year
# (second precision, literal Z)
EXPIRES_FORMAT = "%m-%dT%H:%M:%SZ"


class VisibilityType(str, Enum):
    """Who can access a shared link."""

    PUBLIC = "public"
    TEAM_ONLY = "team_only"
    PASSWORD = "password"
    TEAM_AND_PASSWORD = "team_and_password"
    SHARED_FOLDER_ONLY = "shared_folder_only"


class RevokeFailureReasonType(str, Enum):
    """Why a shared link cannot be revoked by the current user."""

    LOGIN_REQUIRED = "login_required"
    EMAIL_VERIFY_REQUIRED = "email_verify_required"
    PASSWORD_REQUIRED = "password_required"
    TEAM_ONLY = "team_only"
    OWNER_ONLY = "owner_only"


class TaggedUnion(BaseModel):
    """
    A ``{".tag": "<variant>"}`` object.

    Subclasses narrow ``tag`` to ``Union[SomeEnum, str]`` validated left to
    right, so known variants become enum members and unknown ones are kept
    as the raw string.
    """

    model_config = ConfigDict(populate_by_name=True)

    tag: str = Field(alias=".tag")

    @property
    def is_known(self) -> bool:
        """True if the tag is one of the documented variants."""
        return isinstance(self.tag, Enum)

    @property
    def value(self) -> str:
        """Raw tag string as sent on the wire."""
        return self.tag.value if isinstance(self.tag, Enum) else self.tag


class Visibility(TaggedUnion):
    """Visibility of a shared link."""

    tag: Union[VisibilityType, str] = Field(alias=".tag", union_mode="left_to_right")


class RevokeFailureReason(TaggedUnion):
    """Reason a shared link cannot be revoked."""

    tag: Union[RevokeFailureReasonType, str] = Field(
        alias=".tag", union_mode="left_to_right"
    )


class Output(BaseModel):
    """Base for response models; carries the raw response headers."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    headers: Optional[httpx.Headers] = Field(default=None, exclude=True, repr=False)


class CreateSharedLinkOutput(Output):
    """Result of creating a simple shared link."""

    url: str
    path: str
    visibility: Visibility
    expires: Optional[datetime] = None


class Team(BaseModel):
    """Team a shared link owner belongs to."""

    id: str
    name: str


class TeamMemberInfo(BaseModel):
    """Information about the team member owning a shared link."""

    team_info: Team
    display_name: str
    member_id: Optional[str] = None


class LinkPermissions(BaseModel):
    """Permissions the current user has on a shared link."""

    can_revoke: bool
    resolved_visibility: Optional[Visibility] = None
    requested_visibility: Optional[Visibility] = None
    revoke_failure_reason: Optional[RevokeFailureReason] = None


class Metadata(BaseModel):
    """File or folder metadata embedded in shared link metadata."""

    model_config = ConfigDict(populate_by_name=True)

    tag: Optional[str] = Field(default=None, alias=".tag")  # file, folder
    id: Optional[str] = None
    name: str
    path_lower: Optional[str] = None
    expires: Optional[datetime] = None
    client_modified: Optional[datetime] = None
    server_modified: Optional[datetime] = None
    rev: Optional[str] = None
    size: Optional[int] = None


class SharedLinkMetadata(Metadata):
    """Metadata of a shared link and the entry it points to."""

    url: str
    link_permissions: LinkPermissions
    team_member_info: Optional[TeamMemberInfo] = None


class CreateSharedLinkWithSettingsOutput(SharedLinkMetadata, Output):
    """Result of creating a shared link with settings."""

    pass


class ListSharedLinksOutput(Output):
    """One page of shared links."""

    links: List[SharedLinkMetadata] = Field(default_factory=list)
    has_more: bool = False
    cursor: Optional[str] = None


def format_expires(value: datetime) -> str:
    """Render an expiration instant in the wire format, always UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    # %Y is not zero-padded below year 1000 on every platform
    return f"{value.year:04d}-{value.strftime(EXPIRES_FORMAT)}"


class SharedLinkSettings(BaseModel):
    """Requested settings for a new shared link."""

    requested_visibility: Optional[VisibilityType] = None
    link_password: Optional[str] = None
    expires: Optional[datetime] = None

    def to_wire(self) -> Dict[str, Any]:
        """Build the request object, omitting every unset or empty field."""
        data: Dict[str, Any] = {}
        if self.requested_visibility:
            data["requested_visibility"] = self.requested_visibility.value
        if self.link_password:
            data["link_password"] = self.link_password
        if self.expires is not None:
            data["expires"] = format_expires(self.expires)
        return data
