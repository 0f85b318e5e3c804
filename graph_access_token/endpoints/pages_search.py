"""pages/search endpoint.

See https://developers.facebook.com/docs/pages/searching
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from ..constants import GraphApi
from ..objects.page import PageForSearch
from ..objects.paging import Paging
from ..validation import expect_mapping, require_key, validate_range, validate_string, validate_type
from .base import Endpoint


@dataclass(frozen=True)
class PagesSearchResponse:
    data: list[PageForSearch]
    paging: Paging | None = None

    @classmethod
    def from_dict(cls, data: object) -> PagesSearchResponse:
        data = expect_mapping(data, "body")
        pages = require_key(data, "data", "body")
        validate_type(pages, list, "data")
        paging = data.get("paging")
        return cls(
            data=[PageForSearch.from_dict(page) for page in pages],
            paging=None if paging is None else Paging.from_dict(paging),
        )


@dataclass(frozen=True)
class PagesSearchEndpoint(Endpoint[PagesSearchResponse]):
    """Search pages by name, one page of results per call."""

    path = GraphApi.PAGES_SEARCH_PATH

    q: str
    access_token: str
    version: str | None = None
    limit: int | None = None
    after: str | None = None

    def with_limit(self, value: int) -> PagesSearchEndpoint:
        return dataclasses.replace(self, limit=value)

    def with_after(self, value: str) -> PagesSearchEndpoint:
        return dataclasses.replace(self, after=value)

    def raw_query_prefix(self) -> str:
        return f"fields={PageForSearch.FIELDS}"

    def query_params(self) -> list[tuple[str, str]]:
        params = [
            ("q", validate_string(self.q, "q")),
            ("access_token", validate_string(self.access_token, "access_token")),
        ]
        if self.limit is not None:
            validate_range(self.limit, "limit", min_value=1)
            params.append(("limit", str(self.limit)))
        if self.after is not None:
            params.append(("after", self.after))
        return params

    def parse_ok_json(self, payload: Any) -> PagesSearchResponse:
        return PagesSearchResponse.from_dict(payload)


__all__ = ["PagesSearchEndpoint", "PagesSearchResponse"]
