"""Request/response contract shared by every Graph API endpoint.

An endpoint knows how to render its request and how to interpret the
response; it never performs I/O itself. Every response is classified
into exactly one of three shapes:

- EndpointOk: HTTP 200 with a body matching the success shape
- EndpointErr: any other status with a ``{"error": {...}}`` body
- EndpointRaw: any other status with some other body, bytes preserved

A 200 whose body does not match the success shape raises
ResponseParseError rather than being downgraded to one of the above.
"""

from __future__ import annotations

import abc
import json
import logging
import urllib.parse
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, Union

from ..constants import GraphApi, HttpProtocol
from ..errors import ErrorResponse
from ..exceptions import RequestBuildError, ResponseParseError, ValidationError
from ..http_client import HttpClient, HttpRequest, HttpResponse
from ..validation import validate_path_segment, validate_url

_logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Parse results
# =============================================================================


@dataclass(frozen=True)
class EndpointOk(Generic[T]):
    value: T


@dataclass(frozen=True)
class EndpointErr:
    status_code: int
    error: ErrorResponse


@dataclass(frozen=True)
class EndpointRaw:
    status_code: int
    body: bytes


EndpointRet = Union[EndpointOk[T], EndpointErr, EndpointRaw]


# =============================================================================
# Endpoint
# =============================================================================


class Endpoint(abc.ABC, Generic[T]):
    """Base class for a single Graph API call.

    Subclasses set ``path``, provide their query parameters and decode
    the success body; URL building and response classification live
    here so that every endpoint behaves the same way.
    """

    path: ClassVar[str]
    user_agent: ClassVar[str] = HttpProtocol.USER_AGENT

    # Subclasses are dataclasses with a ``version`` field
    version: str | None

    @abc.abstractmethod
    def query_params(self) -> list[tuple[str, str]]:
        """Query parameters, in wire order. Validation errors propagate."""

    @abc.abstractmethod
    def parse_ok_json(self, payload: Any) -> T:
        """Decode a 200 body. Raises ValidationError on shape mismatch."""

    def raw_query_prefix(self) -> str:
        """Query text placed before the encoded parameters, unescaped."""
        return ""

    # -------------------------------------------------------------------------
    # Request
    # -------------------------------------------------------------------------

    def render_request(self) -> HttpRequest:
        """Render the GET request for this endpoint.

        Raises:
            RequestBuildError: If the URL or a parameter is invalid
        """
        try:
            version = validate_path_segment(self.version or GraphApi.VERSION, "version")
            base = validate_url(
                f"{GraphApi.URL_BASE}/{version}/{self.path}", "url", require_https=True
            )
            query = "&".join(
                part
                for part in (self.raw_query_prefix(), urllib.parse.urlencode(self.query_params()))
                if part
            )
        except ValidationError as e:
            raise RequestBuildError(f"Cannot build {type(self).__name__} request: {e}") from e

        return HttpRequest(
            method=HttpProtocol.METHOD_GET,
            url=f"{base}?{query}" if query else base,
            headers={
                "User-Agent": self.user_agent,
                "Accept": HttpProtocol.MIME_APPLICATION_JSON,
            },
        )

    # -------------------------------------------------------------------------
    # Response
    # -------------------------------------------------------------------------

    def parse_response(self, response: HttpResponse) -> EndpointRet[T]:
        """Classify a response into EndpointOk, EndpointErr or EndpointRaw.

        Raises:
            ResponseParseError: If a 200 body does not match the success shape
        """
        status_code = response.status_code
        body = response.body

        if status_code == HttpProtocol.HTTP_OK:
            try:
                return EndpointOk(self.parse_ok_json(json.loads(body)))
            except (ValueError, ValidationError) as e:
                raise ResponseParseError(status_code, body, str(e)) from e

        try:
            return EndpointErr(status_code, ErrorResponse.from_dict(json.loads(body)))
        except (ValueError, ValidationError) as e:
            _logger.debug(
                "HTTP %s body from %s is not a Graph error: %s",
                status_code,
                type(self).__name__,
                e,
            )
            return EndpointRaw(status_code, body)


def respond_endpoint(
    http_client: HttpClient, endpoint: Endpoint[T], timeout: float | None = None
) -> EndpointRet[T]:
    """Render, execute and parse a single endpoint call.

    Raises:
        RequestBuildError: If the request cannot be rendered
        TransportError: If the transport fails
        ResponseParseError: If a 200 body does not match the success shape
    """
    request = endpoint.render_request()
    response = http_client.send(request, timeout=timeout)
    return endpoint.parse_response(response)


__all__ = [
    "Endpoint",
    "EndpointOk",
    "EndpointErr",
    "EndpointRaw",
    "EndpointRet",
    "respond_endpoint",
]
