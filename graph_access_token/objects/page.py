"""Page object as returned by the pages/search endpoint.

See https://developers.facebook.com/docs/pages/searching#fields
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ..validation import (
    expect_bool,
    expect_mapping,
    expect_optional_float,
    expect_optional_string,
    number_from_string,
    require_key,
    validate_string,
)


@dataclass(frozen=True)
class PageLocation:
    city: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    state: str | None = None
    street: str | None = None
    # e.g. 150-0022
    zip: str | None = None

    @classmethod
    def from_dict(cls, data: object) -> PageLocation:
        data = expect_mapping(data, "location")
        return cls(
            city=expect_optional_string(data.get("city"), "location.city"),
            country=expect_optional_string(data.get("country"), "location.country"),
            latitude=expect_optional_float(data.get("latitude"), "location.latitude"),
            longitude=expect_optional_float(data.get("longitude"), "location.longitude"),
            state=expect_optional_string(data.get("state"), "location.state"),
            street=expect_optional_string(data.get("street"), "location.street"),
            zip=expect_optional_string(data.get("zip"), "location.zip"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "city": self.city,
            "country": self.country,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "state": self.state,
            "street": self.street,
            "zip": self.zip,
        }


def _optional_bool(value: object, field_name: str) -> bool | None:
    return None if value is None else expect_bool(value, field_name)


@dataclass(frozen=True)
class PageForSearch:
    """A page matched by a pages/search query."""

    FIELDS: ClassVar[str] = (
        "id,name,location{city,country,latitude,longitude,state,street,zip},link,"
        "is_eligible_for_branded_content,is_unclaimed,verification_status"
    )

    id: int
    name: str
    link: str
    location: PageLocation | None = None
    is_eligible_for_branded_content: bool | None = None
    is_unclaimed: bool | None = None
    verification_status: str | None = None

    @classmethod
    def from_dict(cls, data: object) -> PageForSearch:
        data = expect_mapping(data, "page")
        location = data.get("location")
        return cls(
            id=number_from_string(require_key(data, "id", "page"), "page.id"),
            name=validate_string(require_key(data, "name", "page"), "page.name", allow_empty=True),
            link=validate_string(require_key(data, "link", "page"), "page.link", allow_empty=True),
            location=None if location is None else PageLocation.from_dict(location),
            is_eligible_for_branded_content=_optional_bool(
                data.get("is_eligible_for_branded_content"), "page.is_eligible_for_branded_content"
            ),
            is_unclaimed=_optional_bool(data.get("is_unclaimed"), "page.is_unclaimed"),
            verification_status=expect_optional_string(
                data.get("verification_status"), "page.verification_status"
            ),
        )


__all__ = ["PageLocation", "PageForSearch"]
