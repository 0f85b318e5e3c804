"""Graph API error objects and their classification.

The Graph API reports failures as ``{"error": {...}}`` bodies whose
shape is loosely typed: the same condition may surface as a numeric
code, a subcode, a message pattern, or a combination. This module
decodes that payload into GraphError and maps it onto the small closed
set of KnownErrorCase values a caller can act on.

See:
- https://developers.facebook.com/docs/graph-api/guides/error-handling
- https://developers.facebook.com/docs/instagram-api/reference/error-codes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .constants import ErrorCodes
from .validation import (
    expect_int,
    expect_mapping,
    expect_optional_int,
    expect_optional_string,
    require_key,
    validate_string,
)


class ErrorType(str, Enum):
    """Known values of the error ``type`` field.

    Any other value is kept as a plain string on GraphError.type.
    """

    OAUTH_EXCEPTION = "OAuthException"
    GRAPH_METHOD_EXCEPTION = "GraphMethodException"


class KnownErrorCase(str, Enum):
    """Recoverable error conditions a caller can act on."""

    API_TOO_MANY_CALLS = "api_too_many_calls"
    API_USER_TOO_MANY_CALLS = "api_user_too_many_calls"
    ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID = "access_token_expired_or_revoked_or_invalid"
    PERMISSION_NOT_GRANTED_OR_REMOVED = "permission_not_granted_or_removed"
    RETRY_LATER = "retry_later"

    def is_api_too_many_calls(self) -> bool:
        return self is KnownErrorCase.API_TOO_MANY_CALLS

    def is_api_user_too_many_calls(self) -> bool:
        return self is KnownErrorCase.API_USER_TOO_MANY_CALLS

    def is_access_token_expired_or_revoked_or_invalid(self) -> bool:
        return self is KnownErrorCase.ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID

    def is_permission_not_granted_or_removed(self) -> bool:
        return self is KnownErrorCase.PERMISSION_NOT_GRANTED_OR_REMOVED

    def is_retry_later(self) -> bool:
        return self is KnownErrorCase.RETRY_LATER


_KNOWN_FIELDS = (
    "message",
    "type",
    "code",
    "error_subcode",
    "error_user_title",
    "error_user_msg",
    "fbtrace_id",
)


@dataclass(frozen=True)
class GraphError:
    """Structured Graph API error.

    Attributes:
        message: Human-readable message
        code: Numeric error code
        type: ErrorType, or the raw string for unknown types
        error_subcode: Optional subcode refining ``code``
        error_user_title: Optional title meant for end users
        error_user_msg: Optional message meant for end users
        fbtrace_id: Trace id for Facebook support
        extra: Any other fields (``is_transient``, ``error_data``, ...)
    """

    message: str
    code: int
    type: ErrorType | str | None = None
    error_subcode: int | None = None
    error_user_title: str | None = None
    error_user_msg: str | None = None
    fbtrace_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: object) -> GraphError:
        """Decode the object found under ``"error"``.

        Raises:
            ValidationError: If a required field is missing or mistyped
        """
        data = expect_mapping(data, "error")
        raw_type = expect_optional_string(data.get("type"), "error.type")

        return cls(
            message=validate_string(
                require_key(data, "message", "error"), "error.message", allow_empty=True
            ),
            code=expect_int(require_key(data, "code", "error"), "error.code"),
            type=_parse_error_type(raw_type),
            error_subcode=expect_optional_int(data.get("error_subcode"), "error.error_subcode"),
            error_user_title=expect_optional_string(
                data.get("error_user_title"), "error.error_user_title"
            ),
            error_user_msg=expect_optional_string(
                data.get("error_user_msg"), "error.error_user_msg"
            ),
            fbtrace_id=expect_optional_string(data.get("fbtrace_id"), "error.fbtrace_id"),
            extra={k: v for k, v in data.items() if k not in _KNOWN_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        error_type = self.type.value if isinstance(self.type, ErrorType) else self.type
        result: dict[str, Any] = {
            "message": self.message,
            "type": error_type,
            "code": self.code,
            "error_subcode": self.error_subcode,
            "error_user_title": self.error_user_title,
            "error_user_msg": self.error_user_msg,
            "fbtrace_id": self.fbtrace_id,
        }
        result.update(self.extra)
        return result

    # -------------------------------------------------------------------------
    # Fabricated errors
    # -------------------------------------------------------------------------

    @classmethod
    def with_status_code_and_body(cls, status_code: int, body: str) -> GraphError:
        """Represent an unstructured failure response as a GraphError.

        The sentinel code is never returned by the Graph API, so
        as_status_code_and_body() can tell the two cases apart.
        """
        return cls(
            message=f"status_code:{status_code} body:{body}",
            code=ErrorCodes.STATUS_CODE_AND_BODY,
            extra={"status_code": status_code, "body": body},
        )

    def as_status_code_and_body(self) -> tuple[int, str] | None:
        if self.code != ErrorCodes.STATUS_CODE_AND_BODY:
            return None

        status_code = self.extra.get("status_code")
        body = self.extra.get("body")
        if isinstance(status_code, int) and not isinstance(status_code, bool):
            if isinstance(body, str):
                return status_code, body
        return None

    # -------------------------------------------------------------------------
    # Message heuristics
    # -------------------------------------------------------------------------
    # The Graph API does not document these messages.

    def is_error_validating_access_token(self) -> bool:
        return "error validating access token" in self.message.lower()

    def is_access_token_session_has_been_invalidated(self) -> bool:
        return "session has been invalidated" in self.message.lower()

    def is_access_token_session_has_expired(self) -> bool:
        return "session has expired" in self.message.lower()

    def is_access_token_session_key_is_malformed(self) -> bool:
        message = self.message.lower()
        return "session key is malformed" in message or (
            "session key " in message and " is malformed" in message
        )

    def to_known_error_case(self) -> KnownErrorCase | None:
        return classify(self)

    def __str__(self) -> str:
        return f"({self.code}) {self.message}"


@dataclass(frozen=True)
class ErrorResponse:
    """Error response body, ``{"error": {...}}``."""

    error: GraphError

    @classmethod
    def from_dict(cls, data: object) -> ErrorResponse:
        data = expect_mapping(data, "body")
        return cls(error=GraphError.from_dict(require_key(data, "error", "body")))

    @classmethod
    def with_status_code_and_body(cls, status_code: int, body: str) -> ErrorResponse:
        return cls(error=GraphError.with_status_code_and_body(status_code, body))

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error.to_dict()}


def _parse_error_type(raw: str | None) -> ErrorType | str | None:
    if raw is None:
        return None
    try:
        return ErrorType(raw)
    except ValueError:
        return raw


def classify(error: GraphError) -> KnownErrorCase | None:
    """Map a GraphError onto a KnownErrorCase.

    Subcodes 463 and 467 win over any code. Code 102 only counts when no
    subcode is present. Returns None for anything unrecognized; callers
    should treat that as an unknown, non-retryable failure.
    """
    if error.error_subcode in (
        ErrorCodes.SUBCODE_SESSION_HAS_EXPIRED,
        ErrorCodes.SUBCODE_INVALID_ACCESS_TOKEN,
    ):
        return KnownErrorCase.ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID

    code = error.code
    if code == ErrorCodes.API_SESSION:
        if error.error_subcode is None:
            return KnownErrorCase.ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID
        return None
    if code == ErrorCodes.API_SERVICE:
        return KnownErrorCase.RETRY_LATER
    if code == ErrorCodes.API_TOO_MANY_CALLS:
        return KnownErrorCase.API_TOO_MANY_CALLS
    if code == ErrorCodes.API_USER_TOO_MANY_CALLS:
        return KnownErrorCase.API_USER_TOO_MANY_CALLS
    if code == ErrorCodes.API_PERMISSION_DENIED:
        return KnownErrorCase.PERMISSION_NOT_GRANTED_OR_REMOVED
    if code == ErrorCodes.ACCESS_TOKEN_HAS_EXPIRED:
        return KnownErrorCase.ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID
    if ErrorCodes.API_PERMISSION_MIN <= code <= ErrorCodes.API_PERMISSION_MAX:
        return KnownErrorCase.PERMISSION_NOT_GRANTED_OR_REMOVED

    return None


__all__ = [
    "ErrorType",
    "KnownErrorCase",
    "GraphError",
    "ErrorResponse",
    "classify",
]
