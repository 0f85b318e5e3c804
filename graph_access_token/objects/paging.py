"""Cursor-based pagination object.

See https://developers.facebook.com/docs/graph-api/results#cursors
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..validation import expect_mapping, expect_optional_string, require_key


@dataclass(frozen=True)
class PagingCursors:
    before: str | None = None
    after: str | None = None

    @classmethod
    def from_dict(cls, data: object) -> PagingCursors:
        data = expect_mapping(data, "paging.cursors")
        return cls(
            before=expect_optional_string(data.get("before"), "paging.cursors.before"),
            after=expect_optional_string(data.get("after"), "paging.cursors.after"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"before": self.before, "after": self.after}


@dataclass(frozen=True)
class Paging:
    cursors: PagingCursors = field(default_factory=PagingCursors)
    previous: str | None = None
    next: str | None = None

    @classmethod
    def from_dict(cls, data: object) -> Paging:
        data = expect_mapping(data, "paging")
        return cls(
            cursors=PagingCursors.from_dict(require_key(data, "cursors", "paging")),
            previous=expect_optional_string(data.get("previous"), "paging.previous"),
            next=expect_optional_string(data.get("next"), "paging.next"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"cursors": self.cursors.to_dict(), "previous": self.previous, "next": self.next}

    def next_cursor(self) -> str | None:
        """Cursor for the next page, or None on the last page."""
        if self.next is None:
            return None
        return self.cursors.after


__all__ = ["Paging", "PagingCursors"]
