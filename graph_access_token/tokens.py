"""
Access token kinds and the conversions between them.

Each credential kind is its own immutable type so that, for example, a
page access token cannot be passed where a user access token is
expected. Conversions exist only where the Graph API exchange graph
allows one token to stand in for another without a network call:

    ShortLivedUserAccessToken --\
                                 +--> UserAccessToken
    LongLivedUserAccessToken  --/

Everything else (short-lived -> long-lived, long-lived -> session info,
page -> page session info) goes through a workflow in
``graph_access_token.workflows``.

Example:
    >>> token = AppAccessToken.with_app_secret(123, "secret")
    >>> str(token)
    '123|secret'
    >>> token.app_id_and_app_secret()
    (123, 'secret')
"""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from typing import TypeVar, Union

from .constants import TokenLifetime, ValidationLimits
from .exceptions import ValidationError
from .validation import validate_range, validate_string

LONG_LIVED_USER_ACCESS_TOKEN_LIFETIME = TokenLifetime.LONG_LIVED_USER_ACCESS_TOKEN
SHORT_LIVED_USER_ACCESS_TOKEN_LIFETIME_MIN = TokenLifetime.SHORT_LIVED_USER_ACCESS_TOKEN_MIN
SHORT_LIVED_USER_ACCESS_TOKEN_LIFETIME_MAX = TokenLifetime.SHORT_LIVED_USER_ACCESS_TOKEN_MAX

_U64_MAX = 2**64 - 1
_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")

_TokenT = TypeVar("_TokenT", bound="_AccessToken")


def redact_token(value: str) -> str:
    """Return a short, log-safe preview of a token value."""
    preview = value[: ValidationLimits.TOKEN_PREVIEW_LENGTH]
    return f"{preview}…" if len(value) > len(preview) else "…"


@dataclass(frozen=True, repr=False)
class _AccessToken:
    """Opaque string-backed token value."""

    value: str

    def __post_init__(self) -> None:
        validate_string(self.value, type(self).__name__, allow_empty=False)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({redact_token(self.value)!r})"

    @classmethod
    def coerce(cls: type[_TokenT], token: str | _AccessToken) -> _TokenT:
        """Build this kind from a raw string or an instance of this kind.

        Raises:
            ValidationError: If token is another kind with no conversion
        """
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            return cls(token)
        raise ValidationError(
            cls.__name__,
            token,
            f"cannot convert {type(token).__name__} to {cls.__name__}",
        )


@dataclass(frozen=True, repr=False)
class ShortLivedUserAccessToken(_AccessToken):
    """User access token as returned by the login dialog (1-2 hours)."""

    def to_user_access_token(self) -> UserAccessToken:
        return UserAccessToken(self.value)


@dataclass(frozen=True, repr=False)
class LongLivedUserAccessToken(_AccessToken):
    """User access token exchanged for a ~60 day lifetime."""

    def to_user_access_token(self) -> UserAccessToken:
        return UserAccessToken(self.value)


@dataclass(frozen=True, repr=False)
class UserAccessToken(_AccessToken):
    """Some user access token, lifetime unspecified."""

    @classmethod
    def coerce(cls, token: str | _AccessToken) -> UserAccessToken:
        if isinstance(token, (ShortLivedUserAccessToken, LongLivedUserAccessToken)):
            return token.to_user_access_token()
        return super().coerce(token)


@dataclass(frozen=True, repr=False)
class AppAccessToken(_AccessToken):
    """App access token.

    Either returned by the client_credentials grant, or built locally as
    ``"{app_id}|{app_secret}"`` which the Graph API accepts as-is.
    """

    @classmethod
    def with_app_secret(cls, app_id: int, app_secret: str) -> AppAccessToken:
        return cls(f"{app_id}|{app_secret}")

    def app_id_and_app_secret(self) -> tuple[int, str] | None:
        """Split a locally built token back into (app_id, app_secret).

        Returns None unless the value is exactly one unsigned integer and
        one non-empty secret separated by a single ``|``. A leading ``+``
        on the app id is accepted, so ``"+1|x"`` splits to ``(1, "x")``.
        """
        parts = self.value.split("|")
        if len(parts) != 2:
            return None

        raw_app_id, app_secret = parts
        if not _UNSIGNED_INT_RE.fullmatch(raw_app_id):
            return None
        app_id = int(raw_app_id)
        if app_id > _U64_MAX or not app_secret:
            return None

        return app_id, app_secret


@dataclass(frozen=True, repr=False)
class PageAccessToken(_AccessToken):
    """Page access token; expires together with the user token it came from."""


@dataclass(frozen=True, repr=False)
class ClientAccessToken(_AccessToken):
    """Client access token, ``"{app_id}|{client_token}"``."""

    @classmethod
    def new(cls, app_id: int, client_token: str) -> ClientAccessToken:
        return cls(f"{app_id}|{client_token}")


@dataclass(frozen=True, repr=False)
class UserSessionInfoAccessToken(_AccessToken):
    """Session info token derived from a long-lived user token.

    Grants no access to user data; it can only be validated through the
    debug_token endpoint, authorized by some other token.
    """


@dataclass(frozen=True, repr=False)
class PageSessionInfoAccessToken(_AccessToken):
    """Session info token derived from a page token."""


@dataclass(frozen=True)
class AccessTokenExpiresIn:
    """Expiry duration returned alongside an exchanged token."""

    seconds: int

    def __post_init__(self) -> None:
        validate_range(self.seconds, "expires_in", min_value=0)

    def __str__(self) -> str:
        return str(self.seconds)

    def __int__(self) -> int:
        return self.seconds

    def as_timedelta(self) -> datetime.timedelta:
        return datetime.timedelta(seconds=self.seconds)


AnyUserAccessToken = Union[
    str, UserAccessToken, ShortLivedUserAccessToken, LongLivedUserAccessToken
]


__all__ = [
    "LONG_LIVED_USER_ACCESS_TOKEN_LIFETIME",
    "SHORT_LIVED_USER_ACCESS_TOKEN_LIFETIME_MIN",
    "SHORT_LIVED_USER_ACCESS_TOKEN_LIFETIME_MAX",
    "redact_token",
    "ShortLivedUserAccessToken",
    "LongLivedUserAccessToken",
    "UserAccessToken",
    "AppAccessToken",
    "PageAccessToken",
    "ClientAccessToken",
    "UserSessionInfoAccessToken",
    "PageSessionInfoAccessToken",
    "AccessTokenExpiresIn",
    "AnyUserAccessToken",
]
