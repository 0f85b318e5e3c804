"""
Graph Access Token Library

Typed Facebook Graph API access tokens, the oauth/access_token and
debug_token endpoints, and the workflows that exchange and validate
tokens along the Graph API's exchange graph.

This library provides:
- One immutable type per token kind, with conversions only where the
  exchange graph allows them
- An Endpoint contract that classifies every response as success,
  structured Graph error, or raw body
- Classification of Graph errors into actionable cases
- Exchange and debug workflows over a pluggable HTTP client

Basic Usage:
    >>> from graph_access_token import HttpxHttpClient, gen_app_access_token
    >>>
    >>> with HttpxHttpClient() as client:
    ...     outcome = gen_app_access_token(client, app_id, app_secret)
    ...     if outcome.is_success:
    ...         app_access_token = outcome.value
    ...     else:
    ...         print(outcome.status_code, outcome.known_error_case())

For Testing:
    >>> from graph_access_token import MockHttpClient
    >>> client = MockHttpClient(json_response={"access_token": "1|x", "token_type": "bearer"})
"""

from .endpoints import (
    AccessTokenEndpoint,
    AccessTokenResponse,
    DebugTokenEndpoint,
    DebugTokenResponse,
    Endpoint,
    EndpointErr,
    EndpointOk,
    EndpointRaw,
    EndpointRet,
    PagesSearchEndpoint,
    PagesSearchResponse,
    respond_endpoint,
)
from .errors import ErrorResponse, ErrorType, GraphError, KnownErrorCase, classify
from .exceptions import (
    ConfigurationError,
    GraphApiError,
    GraphTokenError,
    RequestBuildError,
    ResponseParseError,
    TransportError,
    ValidationError,
)
from .http_client import (
    HttpClient,
    HttpClientConfig,
    HttpRequest,
    HttpResponse,
    HttpxHttpClient,
    MockHttpClient,
)
from .objects import (
    DebugTokenAppTypeExtra,
    DebugTokenPageTypeExtra,
    DebugTokenResult,
    DebugTokenUserTypeExtra,
    ExpiresAt,
    ExpiresNever,
    GranularScope,
    PageForSearch,
    Paging,
)
from .tokens import (
    AccessTokenExpiresIn,
    AppAccessToken,
    ClientAccessToken,
    LongLivedUserAccessToken,
    PageAccessToken,
    PageSessionInfoAccessToken,
    ShortLivedUserAccessToken,
    UserAccessToken,
    UserSessionInfoAccessToken,
)
from .workflows import (
    Failure,
    Outcome,
    Success,
    debug_app_access_token,
    debug_page_access_token,
    debug_page_session_info_access_token_via_app_access_token,
    debug_page_session_info_access_token_via_page_access_token,
    debug_session_info_access_token_self,
    debug_user_access_token,
    debug_user_access_token_via_app_access_token,
    debug_user_session_info_access_token_via_app_access_token,
    debug_user_session_info_access_token_via_long_lived_user_access_token,
    gen_app_access_token,
    gen_page_session_info_access_token,
    gen_user_session_info_access_token,
    get_long_lived_user_access_token,
    is_debug_only_access_token_rejection,
    search_pages,
)

__all__ = [
    # Tokens
    "AccessTokenExpiresIn",
    "AppAccessToken",
    "ClientAccessToken",
    "LongLivedUserAccessToken",
    "PageAccessToken",
    "PageSessionInfoAccessToken",
    "ShortLivedUserAccessToken",
    "UserAccessToken",
    "UserSessionInfoAccessToken",
    # Errors
    "ErrorResponse",
    "ErrorType",
    "GraphError",
    "KnownErrorCase",
    "classify",
    # Endpoints
    "AccessTokenEndpoint",
    "AccessTokenResponse",
    "DebugTokenEndpoint",
    "DebugTokenResponse",
    "Endpoint",
    "EndpointErr",
    "EndpointOk",
    "EndpointRaw",
    "EndpointRet",
    "PagesSearchEndpoint",
    "PagesSearchResponse",
    "respond_endpoint",
    # Objects
    "DebugTokenAppTypeExtra",
    "DebugTokenPageTypeExtra",
    "DebugTokenResult",
    "DebugTokenUserTypeExtra",
    "ExpiresAt",
    "ExpiresNever",
    "GranularScope",
    "PageForSearch",
    "Paging",
    # Workflows
    "Failure",
    "Outcome",
    "Success",
    "debug_app_access_token",
    "debug_page_access_token",
    "debug_page_session_info_access_token_via_app_access_token",
    "debug_page_session_info_access_token_via_page_access_token",
    "debug_session_info_access_token_self",
    "debug_user_access_token",
    "debug_user_access_token_via_app_access_token",
    "debug_user_session_info_access_token_via_app_access_token",
    "debug_user_session_info_access_token_via_long_lived_user_access_token",
    "gen_app_access_token",
    "gen_page_session_info_access_token",
    "gen_user_session_info_access_token",
    "get_long_lived_user_access_token",
    "is_debug_only_access_token_rejection",
    "search_pages",
    # HTTP client
    "HttpClient",
    "HttpClientConfig",
    "HttpRequest",
    "HttpResponse",
    "HttpxHttpClient",
    "MockHttpClient",
    # Exceptions
    "ConfigurationError",
    "GraphApiError",
    "GraphTokenError",
    "RequestBuildError",
    "ResponseParseError",
    "TransportError",
    "ValidationError",
]

__version__ = "0.1.0"
