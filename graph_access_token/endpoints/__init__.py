"""Graph API endpoints built on the shared Endpoint contract."""

from .access_token import AccessTokenEndpoint, AccessTokenResponse
from .base import (
    Endpoint,
    EndpointErr,
    EndpointOk,
    EndpointRaw,
    EndpointRet,
    respond_endpoint,
)
from .debug_token import DebugTokenEndpoint, DebugTokenResponse
from .pages_search import PagesSearchEndpoint, PagesSearchResponse

__all__ = [
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
]
