"""
Custom exception hierarchy for the Graph access token library.

All exceptions inherit from GraphTokenError, allowing users to
catch all library-specific errors with a single except clause.

Business errors returned by the Graph API (a non-200 response) are
never raised by the endpoint or workflow layer; they are returned as
data. GraphApiError exists only for callers who explicitly unwrap an
outcome.

Example:
    >>> try:
    ...     token = gen_app_access_token(client, app_id, app_secret).unwrap()
    ... except GraphTokenError as e:
    ...     print(f"Token generation failed: {e}")
"""

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from .errors import ErrorResponse


class GraphTokenError(Exception):
    """Base exception for all graph_access_token errors."""

    pass


class ValidationError(GraphTokenError):
    """Raised when input validation fails.

    Attributes:
        field: Name of the field that failed validation
        value: The invalid value that was provided
        message: Human-readable explanation of the validation error

    Example:
        >>> AppAccessToken("")
        ValidationError: Invalid 'AppAccessToken': must be a non-empty string (got '')
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        self.field = field
        self.value = value
        self.message = message
        super().__init__(f"Invalid {field!r}: {message} (got {value!r})")

    def __repr__(self) -> str:
        return (
            f"ValidationError(field={self.field!r}, value={self.value!r}, message={self.message!r})"
        )


class ConfigurationError(GraphTokenError):
    """Raised when configuration is invalid or incomplete."""

    pass


class RequestBuildError(GraphTokenError):
    """Raised when an endpoint cannot render its request.

    This is a caller input error (malformed URL, invalid app id) and is
    never retried.
    """

    pass


class TransportError(GraphTokenError):
    """Raised when the HTTP transport fails to produce a response.

    Network errors and timeouts end up here. A response with a non-2xx
    status is NOT a transport error.

    Attributes:
        reason: Human-readable reason
        url: Request URL
    """

    def __init__(self, reason: str, url: str) -> None:
        self.reason = reason
        self.url = url
        super().__init__(f"Transport failed for {url}: {reason}")


class ResponseParseError(GraphTokenError):
    """Raised when a 200 response body does not match the success shape.

    This indicates a contract break with the Graph API.

    Attributes:
        status_code: HTTP status code of the response
        body: Raw response body
        reason: What went wrong while decoding
    """

    def __init__(self, status_code: int, body: bytes, reason: str) -> None:
        self.status_code = status_code
        self.body = body
        self.reason = reason

        body_preview = body[:200].decode("utf-8", errors="replace") if body else "(empty)"
        if len(body) > 200:
            body_preview += "..."

        super().__init__(
            f"Failed to parse HTTP {status_code} response: {reason}\nResponse: {body_preview}"
        )


class GraphApiError(GraphTokenError):
    """Raised when a failed outcome is unwrapped.

    Attributes:
        status_code: HTTP status code returned by the Graph API
        error: Structured error body (possibly fabricated from a raw body)
    """

    def __init__(self, status_code: int, error: ErrorResponse) -> None:
        self.status_code = status_code
        self.error = error
        super().__init__(f"HTTP {status_code} - {error.error.message}")


__all__ = [
    "GraphTokenError",
    "ValidationError",
    "ConfigurationError",
    "RequestBuildError",
    "TransportError",
    "ResponseParseError",
    "GraphApiError",
]
