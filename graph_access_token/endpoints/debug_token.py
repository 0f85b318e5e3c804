"""debug_token endpoint.

See https://developers.facebook.com/docs/facebook-login/guides/access-tokens/debugging
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..constants import GraphApi
from ..objects.debug_token import DebugTokenResult
from ..validation import expect_mapping, require_key, validate_string
from .base import Endpoint


@dataclass(frozen=True)
class DebugTokenResponse:
    data: DebugTokenResult

    @classmethod
    def from_dict(cls, data: object) -> DebugTokenResponse:
        data = expect_mapping(data, "body")
        return cls(data=DebugTokenResult.from_dict(require_key(data, "data", "body")))

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data.to_dict()}


@dataclass(frozen=True)
class DebugTokenEndpoint(Endpoint[DebugTokenResponse]):
    """Inspect ``input_token`` using ``access_token`` as the authorizer.

    The two may be the same token (self-debug), except for session info
    tokens which cannot authorize their own debug call.
    """

    path = GraphApi.DEBUG_TOKEN_PATH

    input_token: str
    access_token: str
    version: str | None = None

    def query_params(self) -> list[tuple[str, str]]:
        return [
            ("input_token", validate_string(self.input_token, "input_token")),
            ("access_token", validate_string(self.access_token, "access_token")),
        ]

    def parse_ok_json(self, payload: Any) -> DebugTokenResponse:
        return DebugTokenResponse.from_dict(payload)


__all__ = ["DebugTokenEndpoint", "DebugTokenResponse"]
