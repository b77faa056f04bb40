"""
Dropbox Sharing SDK Exceptions

Custom exception classes for handling Dropbox API errors.
"""

from typing import Optional


class DropboxError(Exception):
    """Base exception for Dropbox SDK errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        if self.error_code:
            parts.append(f"[{self.error_code}]")
        return " ".join(parts)


class BadInputError(DropboxError):
    """Raised when the request body or arguments are rejected."""

    pass


class AuthenticationError(DropboxError):
    """Raised when the access token is missing, invalid or expired."""

    pass


class AccessError(DropboxError):
    """Raised when the token lacks access to the requested resource."""

    pass


class ApiError(DropboxError):
    """
    Raised for endpoint-specific errors (HTTP 409).

    ``error_code`` holds the top-level ``.tag`` of the error union and
    ``message`` the ``error_summary`` string.
    """

    pass


class NotFoundError(ApiError):
    """Raised when the path or shared link does not exist."""

    pass


class RateLimitError(DropboxError):
    """Raised when rate limit is exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        status_code: int = 429,
        retry_after: Optional[int] = None,
    ) -> None:
        super().__init__(message, status_code)
        self.retry_after = retry_after


class ServerError(DropboxError):
    """Raised when the Dropbox API fails with a 5xx status."""

    pass


class ValidationError(DropboxError):
    """Raised when request validation fails."""

    pass


def raise_for_status(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    retry_after: Optional[int] = None,
) -> None:
    """
    Raise appropriate exception based on HTTP status code.

    Args:
        status_code: HTTP status code
        message: Error message (``error_summary`` or plain body text)
        error_code: Optional top-level error tag from response
        retry_after: Optional Retry-After value in seconds

    Raises:
        Appropriate DropboxError subclass
    """
    if status_code == 400:
        raise BadInputError(message, status_code, error_code)
    elif status_code == 401:
        raise AuthenticationError(message, status_code, error_code)
    elif status_code == 403:
        raise AccessError(message, status_code, error_code)
    elif status_code == 409:
        if any(part.endswith("not_found") for part in message.split("/")):
            raise NotFoundError(message, status_code, error_code)
        raise ApiError(message, status_code, error_code)
    elif status_code == 429:
        raise RateLimitError(message, status_code, retry_after)
    elif status_code >= 500:
        raise ServerError(message, status_code, error_code)
    elif status_code >= 400:
        raise DropboxError(message, status_code, error_code)
