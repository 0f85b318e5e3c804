"""Decoded Graph API response objects."""

from .debug_token import (
    DebugTokenAppTypeExtra,
    DebugTokenExpires,
    DebugTokenPageTypeExtra,
    DebugTokenResult,
    DebugTokenTypeExtra,
    DebugTokenUserTypeExtra,
    ExpiresAt,
    ExpiresNever,
    GranularScope,
)
from .page import PageForSearch, PageLocation
from .paging import Paging, PagingCursors

__all__ = [
    "DebugTokenAppTypeExtra",
    "DebugTokenExpires",
    "DebugTokenPageTypeExtra",
    "DebugTokenResult",
    "DebugTokenTypeExtra",
    "DebugTokenUserTypeExtra",
    "ExpiresAt",
    "ExpiresNever",
    "GranularScope",
    "PageForSearch",
    "PageLocation",
    "Paging",
    "PagingCursors",
]
