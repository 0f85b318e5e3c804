"""
HTTP transport abstraction for the Graph access token library.

Endpoints render an HttpRequest and parse an HttpResponse; moving bytes
between the two is the job of an HttpClient. httpx is the default
implementation. No client retries: a non-2xx response is returned to
the endpoint as data, and only network failures raise TransportError.
"""

from __future__ import annotations

import abc
import json
import logging
import typing
from collections import deque
from dataclasses import dataclass, field

import httpx

from .constants import HttpProtocol
from .exceptions import TransportError
from .validation import validate_timeout

_logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class HttpClientConfig:
    """Configuration for HTTP client behavior.

    Attributes:
        timeout: Request timeout in seconds
        enable_logging: Enable debug logging of requests/responses
    """

    timeout: float = HttpProtocol.DEFAULT_TIMEOUT
    enable_logging: bool = True

    def __post_init__(self) -> None:
        self.timeout = validate_timeout(self.timeout)


# =============================================================================
# Request / Response
# =============================================================================


@dataclass(frozen=True)
class HttpRequest:
    """Transport-agnostic request rendered by an endpoint."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass
class HttpResponse:
    """HTTP response wrapper adapting httpx.Response to our interface."""

    _raw: httpx.Response
    _text: str | None = field(init=False, default=None)

    @property
    def status_code(self) -> int:
        return self._raw.status_code

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._raw.headers)

    @property
    def body(self) -> bytes:
        return self._raw.content

    @property
    def text(self) -> str:
        if self._text is None:
            self._text = self._raw.text
        return self._text

    def json(self) -> typing.Any:
        return json.loads(self.body)


# =============================================================================
# Abstract Client
# =============================================================================


class HttpClient(abc.ABC):
    """Abstract HTTP transport.

    Implementations execute a single request and return whatever the
    server answered, whatever its status.
    """

    @abc.abstractmethod
    def execute(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes = b"",
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute an HTTP request.

        Args:
            method: HTTP method
            url: Request URL including the query string
            headers: Request headers
            body: Request body (empty for GET)
            timeout: Optional timeout override in seconds

        Returns:
            HttpResponse, for any status code

        Raises:
            TransportError: If no response could be obtained
        """
        pass

    def send(self, request: HttpRequest, timeout: float | None = None) -> HttpResponse:
        """Execute a rendered HttpRequest."""
        return self.execute(
            request.method,
            request.url,
            headers=request.headers,
            body=request.body,
            timeout=timeout,
        )


# =============================================================================
# httpx Implementation
# =============================================================================


class HttpxHttpClient(HttpClient):
    """Default HTTP client using httpx.

    Features:
    - Connection pooling via httpx.Client
    - Debug logging of requests/responses (query strings are not logged)
    - Network failures and timeouts surface as TransportError

    Example:
        >>> with HttpxHttpClient() as client:
        ...     response = client.execute("GET", url, {"Accept": "application/json"})
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize HTTP client.

        Args:
            config: Client configuration (uses defaults if None)
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.config = config or HttpClientConfig()
        self._client = httpx.Client(
            transport=transport,
            timeout=httpx.Timeout(self.config.timeout),
        )

    def execute(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes = b"",
        timeout: float | None = None,
    ) -> HttpResponse:
        effective_timeout = timeout or self.config.timeout
        # Query strings carry secrets and tokens
        safe_url = url.split("?", 1)[0]

        if self.config.enable_logging:
            _logger.debug("HTTP %s %s (timeout=%ss)", method, safe_url, effective_timeout)

        try:
            response = self._client.request(
                method,
                url,
                content=body or None,
                headers=headers,
                timeout=httpx.Timeout(effective_timeout),
            )
        except httpx.HTTPError as e:
            raise TransportError(reason=str(e) or type(e).__name__, url=safe_url) from e

        if self.config.enable_logging:
            _logger.debug(
                "HTTP %s from %s (body=%d bytes)",
                response.status_code,
                safe_url,
                len(response.content),
            )

        return HttpResponse(response)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


# =============================================================================
# Mock Client for Testing
# =============================================================================


class MockHttpClient(HttpClient):
    """Mock HTTP client for testing.

    Returns predefined responses without making network requests.
    Responses added with queue() are served first, in order; after that
    every request gets the default response. All requests are recorded.

    Example:
        >>> mock = MockHttpClient(status_code=200, json_response={"access_token": "x"})
        >>> response = mock.execute("GET", "https://example.com", {})
        >>> assert response.json()["access_token"] == "x"
        >>> assert len(mock.requests) == 1
    """

    def __init__(
        self,
        status_code: int = 200,
        json_response: typing.Any = None,
        text_response: str = "",
        raise_error: Exception | type[Exception] | None = None,
    ) -> None:
        """Initialize mock client.

        Args:
            status_code: HTTP status code to return
            json_response: JSON response body (converted to bytes)
            text_response: Text response body (used if json_response is None)
            raise_error: Exception to raise on every request (for testing errors)
        """
        self.status_code = status_code
        self.json_response = json_response
        self.text_response = text_response
        self.raise_error = raise_error

        self._queued: deque[tuple[int, bytes]] = deque()
        self.requests: list[dict[str, typing.Any]] = []

    def queue(
        self,
        status_code: int,
        json_response: typing.Any = None,
        body: bytes | str | None = None,
    ) -> MockHttpClient:
        """Queue a one-shot response; returns self for chaining."""
        if json_response is not None:
            content = json.dumps(json_response).encode()
        elif isinstance(body, str):
            content = body.encode()
        else:
            content = body or b""
        self._queued.append((status_code, content))
        return self

    def execute(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes = b"",
        timeout: float | None = None,
    ) -> HttpResponse:
        """Record request and return mock response."""
        self.requests.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "body": body,
                "timeout": timeout,
            }
        )

        if self.raise_error:
            raise self.raise_error

        if self._queued:
            status_code, content = self._queued.popleft()
        else:
            status_code = self.status_code
            if self.json_response is not None:
                content = json.dumps(self.json_response).encode()
            else:
                content = self.text_response.encode()

        mock_response = httpx.Response(
            status_code=status_code,
            content=content,
            request=httpx.Request(method, url),
        )

        return HttpResponse(mock_response)


__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpRequest",
    "HttpResponse",
    "HttpxHttpClient",
    "MockHttpClient",
]
