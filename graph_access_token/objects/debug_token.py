"""Result of the debug_token endpoint.

See https://developers.facebook.com/docs/graph-api/reference/v15.0/debug_token
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from ..errors import GraphError
from ..exceptions import ValidationError
from ..validation import (
    expect_bool,
    expect_int,
    expect_mapping,
    number_from_string,
    require_key,
    validate_string,
    validate_type,
)

_logger = logging.getLogger(__name__)

_EPOCH = datetime.datetime.fromtimestamp(0, tz=datetime.timezone.utc)


def _timestamp(value: object, field_name: str) -> datetime.datetime:
    seconds = expect_int(value, field_name)
    try:
        return datetime.datetime.fromtimestamp(seconds, tz=datetime.timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ValidationError(field_name, value, "timestamp out of range") from e


def _to_timestamp(value: datetime.datetime) -> int:
    return int(value.timestamp())


# =============================================================================
# Expiry
# =============================================================================


@dataclass(frozen=True)
class ExpiresNever:
    """The token does not expire (``expires_at`` is 0)."""


@dataclass(frozen=True)
class ExpiresAt:
    """The token expires at ``date`` (UTC)."""

    date: datetime.datetime


DebugTokenExpires = Union[ExpiresNever, ExpiresAt]


# =============================================================================
# Granular scopes
# =============================================================================


@dataclass(frozen=True)
class GranularScope:
    """A permission, optionally restricted to specific target ids."""

    scope: str
    target_ids: list[int] | None = None

    @classmethod
    def from_dict(cls, data: object) -> GranularScope:
        data = expect_mapping(data, "granular_scope")
        raw_ids = data.get("target_ids")
        target_ids = None
        if raw_ids is not None:
            validate_type(raw_ids, list, "granular_scope.target_ids")
            target_ids = [
                number_from_string(x, "granular_scope.target_ids", allow_negative=True)
                for x in raw_ids
            ]
        return cls(
            scope=validate_string(require_key(data, "scope", "granular_scope"), "scope"),
            target_ids=target_ids,
        )

    def to_dict(self) -> dict[str, Any]:
        # The Graph API sends ids as strings
        target_ids = None if self.target_ids is None else [str(x) for x in self.target_ids]
        return {"scope": self.scope, "target_ids": target_ids}


# =============================================================================
# Type-specific data
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class DebugTokenAppTypeExtra:
    """Fields present when ``type`` is ``APP``."""

    TYPE: ClassVar[str] = "APP"

    app_id: int
    application: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DebugTokenAppTypeExtra:
        return cls(
            app_id=number_from_string(require_key(data, "app_id", "data"), "data.app_id"),
            application=validate_string(
                require_key(data, "application", "data"), "data.application", allow_empty=True
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.TYPE, "app_id": str(self.app_id), "application": self.application}


@dataclass(frozen=True, kw_only=True)
class _DebugTokenIssuedTypeExtra:
    """Fields shared by user and page tokens."""

    app_id: int
    application: str
    user_id: int
    issued_at: datetime.datetime | None = None
    expires_at: datetime.datetime = _EPOCH
    data_access_expires_at: datetime.datetime = _EPOCH
    metadata: Any = None
    granular_scopes: list[GranularScope] | None = None

    @staticmethod
    def _common_fields(data: Mapping[str, Any]) -> dict[str, Any]:
        issued_at = data.get("issued_at")
        granular_scopes = data.get("granular_scopes")
        if granular_scopes is not None:
            validate_type(granular_scopes, list, "data.granular_scopes")
            granular_scopes = [GranularScope.from_dict(x) for x in granular_scopes]

        return {
            "app_id": number_from_string(require_key(data, "app_id", "data"), "data.app_id"),
            "application": validate_string(
                require_key(data, "application", "data"), "data.application", allow_empty=True
            ),
            "user_id": number_from_string(require_key(data, "user_id", "data"), "data.user_id"),
            "issued_at": None if issued_at is None else _timestamp(issued_at, "data.issued_at"),
            "expires_at": _timestamp(data.get("expires_at", 0), "data.expires_at"),
            "data_access_expires_at": _timestamp(
                data.get("data_access_expires_at", 0), "data.data_access_expires_at"
            ),
            "metadata": data.get("metadata"),
            "granular_scopes": granular_scopes,
        }

    def _common_dict(self) -> dict[str, Any]:
        return {
            "app_id": str(self.app_id),
            "application": self.application,
            "user_id": str(self.user_id),
            "issued_at": None if self.issued_at is None else _to_timestamp(self.issued_at),
            "expires_at": _to_timestamp(self.expires_at),
            "data_access_expires_at": _to_timestamp(self.data_access_expires_at),
            "metadata": self.metadata,
            "granular_scopes": (
                None
                if self.granular_scopes is None
                else [scope.to_dict() for scope in self.granular_scopes]
            ),
        }

    def expires(self) -> DebugTokenExpires:
        """Expiry of the token; an ``expires_at`` of 0 means never."""
        if _to_timestamp(self.expires_at) == 0:
            return ExpiresNever()
        return ExpiresAt(self.expires_at)


@dataclass(frozen=True, kw_only=True)
class DebugTokenUserTypeExtra(_DebugTokenIssuedTypeExtra):
    """Fields present when ``type`` is ``USER``."""

    TYPE: ClassVar[str] = "USER"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DebugTokenUserTypeExtra:
        return cls(**cls._common_fields(data))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.TYPE, **self._common_dict()}


@dataclass(frozen=True, kw_only=True)
class DebugTokenPageTypeExtra(_DebugTokenIssuedTypeExtra):
    """Fields present when ``type`` is ``PAGE``."""

    TYPE: ClassVar[str] = "PAGE"

    profile_id: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DebugTokenPageTypeExtra:
        return cls(
            **cls._common_fields(data),
            profile_id=number_from_string(
                require_key(data, "profile_id", "data"), "data.profile_id"
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.TYPE, **self._common_dict(), "profile_id": str(self.profile_id)}


DebugTokenTypeExtra = Union[
    DebugTokenAppTypeExtra, DebugTokenUserTypeExtra, DebugTokenPageTypeExtra
]

_TYPE_EXTRA_BY_TAG: dict[str, Any] = {
    DebugTokenAppTypeExtra.TYPE: DebugTokenAppTypeExtra,
    DebugTokenUserTypeExtra.TYPE: DebugTokenUserTypeExtra,
    DebugTokenPageTypeExtra.TYPE: DebugTokenPageTypeExtra,
}


# =============================================================================
# Result
# =============================================================================


@dataclass(frozen=True)
class DebugTokenResult:
    """The ``data`` object returned by debug_token.

    Attributes:
        is_valid: Whether the token is currently valid
        scopes: Granted permission names, in order
        error: Why the token is invalid, when it is
        type_extra: App, user or page specific fields; None when the
            result has no ``type`` or an unknown one
    """

    is_valid: bool
    scopes: list[str] = field(default_factory=list)
    error: GraphError | None = None
    type_extra: DebugTokenTypeExtra | None = None

    @classmethod
    def from_dict(cls, data: object) -> DebugTokenResult:
        data = expect_mapping(data, "data")

        scopes = require_key(data, "scopes", "data")
        validate_type(scopes, list, "data.scopes")
        error = data.get("error")

        return cls(
            is_valid=expect_bool(require_key(data, "is_valid", "data"), "data.is_valid"),
            scopes=[validate_string(s, "data.scopes", allow_empty=True) for s in scopes],
            error=None if error is None else GraphError.from_dict(error),
            type_extra=_parse_type_extra(data),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "is_valid": self.is_valid,
            "scopes": list(self.scopes),
            "error": None if self.error is None else self.error.to_dict(),
        }
        if self.type_extra is not None:
            result.update(self.type_extra.to_dict())
        return result


def _parse_type_extra(data: Mapping[str, Any]) -> DebugTokenTypeExtra | None:
    tag = data.get("type")
    if tag is None:
        return None

    extra_cls = _TYPE_EXTRA_BY_TAG.get(tag) if isinstance(tag, str) else None
    if extra_cls is None:
        _logger.debug("Ignoring debug_token result of unknown type %r", tag)
        return None

    return extra_cls.from_dict(data)


__all__ = [
    "ExpiresNever",
    "ExpiresAt",
    "DebugTokenExpires",
    "GranularScope",
    "DebugTokenAppTypeExtra",
    "DebugTokenUserTypeExtra",
    "DebugTokenPageTypeExtra",
    "DebugTokenTypeExtra",
    "DebugTokenResult",
]
