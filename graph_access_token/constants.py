"""
Centralized constants for the Graph access token library.

Constants are grouped by:
- Graph API: Base URL, default version, grant types
- Protocol constants: HTTP details shared by every endpoint
- Error codes: Numeric codes and subcodes used for classification
- Validation limits: Valid ranges for user-configurable parameters
"""

from __future__ import annotations

import datetime

# =============================================================================
# GRAPH API
# =============================================================================


class GraphApi:
    """Location and default version of the Graph API."""

    URL_BASE = "https://graph.facebook.com"
    VERSION = "v15.0"

    # Paths below /{version}/
    ACCESS_TOKEN_PATH = "oauth/access_token"
    DEBUG_TOKEN_PATH = "debug_token"
    PAGES_SEARCH_PATH = "pages/search"


class GrantType:
    """Grant types accepted by the oauth/access_token endpoint."""

    CLIENT_CREDENTIALS = "client_credentials"
    FB_EXCHANGE_TOKEN = "fb_exchange_token"
    FB_ATTENUATE_TOKEN = "fb_attenuate_token"

    ALL = (CLIENT_CREDENTIALS, FB_EXCHANGE_TOKEN, FB_ATTENUATE_TOKEN)


class TokenLifetime:
    """Documented lifetimes of user access tokens."""

    LONG_LIVED_USER_ACCESS_TOKEN = datetime.timedelta(days=60)
    SHORT_LIVED_USER_ACCESS_TOKEN_MIN = datetime.timedelta(hours=1)
    SHORT_LIVED_USER_ACCESS_TOKEN_MAX = datetime.timedelta(hours=2)


# =============================================================================
# PROTOCOL CONSTANTS
# =============================================================================


class HttpProtocol:
    """HTTP details shared by every endpoint."""

    HTTP_OK = 200
    HTTP_BAD_REQUEST = 400

    METHOD_GET = "GET"

    USER_AGENT = "graph-access-token"
    MIME_APPLICATION_JSON = "application/json"

    # Seconds
    DEFAULT_TIMEOUT = 30


class DebugOnlyToken:
    """Rejection returned when a session info token debugs itself."""

    STATUS_CODE = HttpProtocol.HTTP_BAD_REQUEST
    MESSAGE = "Invalid OAuth access token - Debug only access token"


# =============================================================================
# ERROR CODES
# =============================================================================


class ErrorCodes:
    """Graph API error codes.

    See https://developers.facebook.com/docs/graph-api/guides/error-handling
    """

    # Never returned by the Graph API; marks a locally fabricated error
    STATUS_CODE_AND_BODY = -2_147_483_001

    API_SERVICE = 2
    API_TOO_MANY_CALLS = 4
    API_PERMISSION_DENIED = 10
    API_USER_TOO_MANY_CALLS = 17
    API_SESSION = 102
    ACCESS_TOKEN_HAS_EXPIRED = 190

    # 200-299
    API_PERMISSION_MIN = 200
    API_PERMISSION_MAX = 299

    SUBCODE_SESSION_HAS_EXPIRED = 463
    SUBCODE_INVALID_ACCESS_TOKEN = 467


# =============================================================================
# VALIDATION RANGES
# =============================================================================


class ValidationLimits:
    """Valid ranges for user-configurable parameters."""

    MIN_TIMEOUT_SECONDS = 1
    MAX_TIMEOUT_SECONDS = 3600  # 1 hour

    # Characters of a token shown in logs and reprs
    TOKEN_PREVIEW_LENGTH = 6


__all__ = [
    "GraphApi",
    "GrantType",
    "TokenLifetime",
    "HttpProtocol",
    "DebugOnlyToken",
    "ErrorCodes",
    "ValidationLimits",
]
