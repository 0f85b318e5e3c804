"""oauth/access_token endpoint.

See https://developers.facebook.com/docs/facebook-login/guides/access-tokens/get-long-lived
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..constants import GraphApi, GrantType
from ..exceptions import ValidationError
from ..tokens import AccessTokenExpiresIn
from ..validation import (
    expect_mapping,
    expect_optional_int,
    require_key,
    validate_app_id,
    validate_string,
)
from .base import Endpoint


@dataclass(frozen=True)
class AccessTokenResponse:
    access_token: str
    token_type: str
    expires_in: int | None = None

    @classmethod
    def from_dict(cls, data: object) -> AccessTokenResponse:
        data = expect_mapping(data, "body")
        expires_in = expect_optional_int(data.get("expires_in"), "expires_in")
        if expires_in is not None and expires_in < 0:
            raise ValidationError("expires_in", expires_in, "must be at least 0")
        return cls(
            access_token=validate_string(
                require_key(data, "access_token", "body"), "access_token"
            ),
            token_type=validate_string(
                require_key(data, "token_type", "body"), "token_type", allow_empty=True
            ),
            expires_in=expires_in,
        )

    def expires(self) -> AccessTokenExpiresIn | None:
        return None if self.expires_in is None else AccessTokenExpiresIn(self.expires_in)


@dataclass(frozen=True)
class AccessTokenEndpoint(Endpoint[AccessTokenResponse]):
    """Exchange credentials for an access token.

    Attributes:
        grant_type: One of GrantType.ALL
        app_id: Sent as ``client_id``
        app_secret: Sent as ``client_secret`` when given
        fb_exchange_token: Token to exchange or attenuate
        version: Graph API version, defaults to GraphApi.VERSION
    """

    path = GraphApi.ACCESS_TOKEN_PATH

    grant_type: str
    app_id: int
    app_secret: str | None = None
    fb_exchange_token: str | None = None
    version: str | None = None

    def query_params(self) -> list[tuple[str, str]]:
        if self.grant_type not in GrantType.ALL:
            raise ValidationError(
                "grant_type", self.grant_type, f"must be one of {', '.join(GrantType.ALL)}"
            )
        params = [
            ("grant_type", self.grant_type),
            ("client_id", str(validate_app_id(self.app_id))),
        ]
        if self.app_secret is not None:
            params.append(("client_secret", self.app_secret))
        if self.fb_exchange_token is not None:
            params.append(("fb_exchange_token", self.fb_exchange_token))
        return params

    def parse_ok_json(self, payload: Any) -> AccessTokenResponse:
        return AccessTokenResponse.from_dict(payload)


__all__ = ["AccessTokenEndpoint", "AccessTokenResponse"]
