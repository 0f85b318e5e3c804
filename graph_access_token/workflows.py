"""Token exchange and debug workflows.

Each workflow composes one endpoint call with the token model and
returns an Outcome:

- Success(value) when the Graph API answered 200
- Failure(status_code, ErrorResponse) for any other status; a body that
  is not a Graph error is folded into a fabricated GraphError (see
  GraphError.with_status_code_and_body)

Request build failures, transport failures and malformed 200 bodies
raise. Nothing is retried.

See https://developers.facebook.com/docs/facebook-login/guides/access-tokens
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .constants import DebugOnlyToken, GrantType
from .endpoints.access_token import AccessTokenEndpoint, AccessTokenResponse
from .endpoints.base import EndpointErr, EndpointOk, EndpointRet, respond_endpoint
from .endpoints.debug_token import DebugTokenEndpoint
from .endpoints.pages_search import PagesSearchEndpoint, PagesSearchResponse
from .errors import ErrorResponse, KnownErrorCase, classify
from .exceptions import GraphApiError
from .http_client import HttpClient
from .objects.debug_token import DebugTokenResult
from .tokens import (
    AccessTokenExpiresIn,
    AnyUserAccessToken,
    AppAccessToken,
    LongLivedUserAccessToken,
    PageAccessToken,
    PageSessionInfoAccessToken,
    ShortLivedUserAccessToken,
    UserAccessToken,
    UserSessionInfoAccessToken,
)

_logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


# =============================================================================
# Outcome
# =============================================================================


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A non-200 answer from the Graph API."""

    status_code: int
    error: ErrorResponse

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> None:
        raise GraphApiError(self.status_code, self.error)

    def known_error_case(self) -> KnownErrorCase | None:
        return classify(self.error.error)


Outcome = Union[Success[T], Failure]


def _to_outcome(ret: EndpointRet[R], convert: Callable[[R], T]) -> Outcome[T]:
    if isinstance(ret, EndpointOk):
        return Success(convert(ret.value))
    if isinstance(ret, EndpointErr):
        return Failure(ret.status_code, ret.error)

    body = ret.body.decode("utf-8", errors="replace")
    return Failure(ret.status_code, ErrorResponse.with_status_code_and_body(ret.status_code, body))


def _token_and_expires_in(
    token_cls: Callable[[str], T],
) -> Callable[[AccessTokenResponse], tuple[T, AccessTokenExpiresIn | None]]:
    def convert(ok: AccessTokenResponse) -> tuple[T, AccessTokenExpiresIn | None]:
        return token_cls(ok.access_token), ok.expires()

    return convert


# =============================================================================
# Exchange
# =============================================================================


def gen_app_access_token(
    http_client: HttpClient,
    app_id: int,
    app_secret: str,
    version: str | None = None,
) -> Outcome[AppAccessToken]:
    """Generate an app access token with the client_credentials grant.

    AppAccessToken.with_app_secret() builds an equivalent token without
    a network call.
    """
    _logger.debug("Generating app access token for app %s", app_id)
    endpoint = AccessTokenEndpoint(
        GrantType.CLIENT_CREDENTIALS, app_id, app_secret=app_secret, version=version
    )
    ret = respond_endpoint(http_client, endpoint)
    return _to_outcome(ret, lambda ok: AppAccessToken(ok.access_token))


def get_long_lived_user_access_token(
    http_client: HttpClient,
    app_id: int,
    app_secret: str,
    short_lived_user_access_token: str | ShortLivedUserAccessToken,
    version: str | None = None,
) -> Outcome[tuple[LongLivedUserAccessToken, AccessTokenExpiresIn | None]]:
    """Exchange a short-lived user token for a long-lived one.

    The short-lived token stays valid after the exchange.
    """
    short_lived = ShortLivedUserAccessToken.coerce(short_lived_user_access_token)
    _logger.debug("Exchanging short-lived user access token for app %s", app_id)
    endpoint = AccessTokenEndpoint(
        GrantType.FB_EXCHANGE_TOKEN,
        app_id,
        app_secret=app_secret,
        fb_exchange_token=short_lived.value,
        version=version,
    )
    ret = respond_endpoint(http_client, endpoint)
    return _to_outcome(ret, _token_and_expires_in(LongLivedUserAccessToken))


def _attenuate(
    http_client: HttpClient, app_id: int, token: str, version: str | None
) -> EndpointRet[AccessTokenResponse]:
    endpoint = AccessTokenEndpoint(
        GrantType.FB_ATTENUATE_TOKEN, app_id, fb_exchange_token=token, version=version
    )
    return respond_endpoint(http_client, endpoint)


def gen_user_session_info_access_token(
    http_client: HttpClient,
    app_id: int,
    long_lived_user_access_token: str | LongLivedUserAccessToken,
    version: str | None = None,
) -> Outcome[tuple[UserSessionInfoAccessToken, AccessTokenExpiresIn | None]]:
    """Derive a session info token from a long-lived user token.

    See https://developers.facebook.com/docs/facebook-login/guides/access-tokens/get-session-info
    """
    long_lived = LongLivedUserAccessToken.coerce(long_lived_user_access_token)
    _logger.debug("Generating user session info access token for app %s", app_id)
    ret = _attenuate(http_client, app_id, long_lived.value, version)
    return _to_outcome(ret, _token_and_expires_in(UserSessionInfoAccessToken))


def gen_page_session_info_access_token(
    http_client: HttpClient,
    app_id: int,
    page_access_token: str | PageAccessToken,
    version: str | None = None,
) -> Outcome[tuple[PageSessionInfoAccessToken, AccessTokenExpiresIn | None]]:
    """Derive a session info token from a page token."""
    page_token = PageAccessToken.coerce(page_access_token)
    _logger.debug("Generating page session info access token for app %s", app_id)
    ret = _attenuate(http_client, app_id, page_token.value, version)
    return _to_outcome(ret, _token_and_expires_in(PageSessionInfoAccessToken))


# =============================================================================
# Debug
# =============================================================================


def _debug(
    http_client: HttpClient, input_token: str, access_token: str, version: str | None
) -> Outcome[DebugTokenResult]:
    endpoint = DebugTokenEndpoint(input_token, access_token, version=version)
    ret = respond_endpoint(http_client, endpoint)
    return _to_outcome(ret, lambda ok: ok.data)


def debug_user_access_token(
    http_client: HttpClient,
    user_access_token: AnyUserAccessToken,
    version: str | None = None,
) -> Outcome[DebugTokenResult]:
    """Debug a short-lived or long-lived user token with itself.

    The Graph API sometimes refuses this with code 100 ("You must provide
    an app access token..."); use
    debug_user_access_token_via_app_access_token() in that case.
    """
    token = UserAccessToken.coerce(user_access_token)
    return _debug(http_client, token.value, token.value, version)


def debug_user_access_token_via_app_access_token(
    http_client: HttpClient,
    user_access_token: AnyUserAccessToken,
    app_access_token: str | AppAccessToken,
    version: str | None = None,
) -> Outcome[DebugTokenResult]:
    input_token = UserAccessToken.coerce(user_access_token)
    access_token = AppAccessToken.coerce(app_access_token)
    return _debug(http_client, input_token.value, access_token.value, version)


def debug_app_access_token(
    http_client: HttpClient,
    app_access_token: str | AppAccessToken,
    version: str | None = None,
) -> Outcome[DebugTokenResult]:
    token = AppAccessToken.coerce(app_access_token)
    return _debug(http_client, token.value, token.value, version)


def debug_page_access_token(
    http_client: HttpClient,
    page_access_token: str | PageAccessToken,
    version: str | None = None,
) -> Outcome[DebugTokenResult]:
    token = PageAccessToken.coerce(page_access_token)
    return _debug(http_client, token.value, token.value, version)


def debug_user_session_info_access_token_via_app_access_token(
    http_client: HttpClient,
    user_session_info_access_token: str | UserSessionInfoAccessToken,
    app_access_token: str | AppAccessToken,
    version: str | None = None,
) -> Outcome[DebugTokenResult]:
    input_token = UserSessionInfoAccessToken.coerce(user_session_info_access_token)
    access_token = AppAccessToken.coerce(app_access_token)
    return _debug(http_client, input_token.value, access_token.value, version)


def debug_user_session_info_access_token_via_long_lived_user_access_token(
    http_client: HttpClient,
    user_session_info_access_token: str | UserSessionInfoAccessToken,
    long_lived_user_access_token: str | LongLivedUserAccessToken,
    version: str | None = None,
) -> Outcome[DebugTokenResult]:
    input_token = UserSessionInfoAccessToken.coerce(user_session_info_access_token)
    access_token = LongLivedUserAccessToken.coerce(long_lived_user_access_token)
    return _debug(http_client, input_token.value, access_token.value, version)


def debug_page_session_info_access_token_via_app_access_token(
    http_client: HttpClient,
    page_session_info_access_token: str | PageSessionInfoAccessToken,
    app_access_token: str | AppAccessToken,
    version: str | None = None,
) -> Outcome[DebugTokenResult]:
    input_token = PageSessionInfoAccessToken.coerce(page_session_info_access_token)
    access_token = AppAccessToken.coerce(app_access_token)
    return _debug(http_client, input_token.value, access_token.value, version)


def debug_page_session_info_access_token_via_page_access_token(
    http_client: HttpClient,
    page_session_info_access_token: str | PageSessionInfoAccessToken,
    page_access_token: str | PageAccessToken,
    version: str | None = None,
) -> Outcome[DebugTokenResult]:
    input_token = PageSessionInfoAccessToken.coerce(page_session_info_access_token)
    access_token = PageAccessToken.coerce(page_access_token)
    return _debug(http_client, input_token.value, access_token.value, version)


def is_debug_only_access_token_rejection(status_code: int, error: ErrorResponse) -> bool:
    """True for the 400 returned when a session info token debugs itself."""
    return (
        status_code == DebugOnlyToken.STATUS_CODE
        and DebugOnlyToken.MESSAGE.lower() in error.error.message.lower()
    )


def debug_session_info_access_token_self(
    http_client: HttpClient,
    session_info_access_token: UserSessionInfoAccessToken | PageSessionInfoAccessToken,
    version: str | None = None,
) -> Outcome[DebugTokenResult] | None:
    """Debug a session info token with itself.

    The Graph API is expected to refuse this with a 400 "Debug only
    access token" error, for which None is returned. Any other failure
    is returned as a Failure; an unexpected 200 as a Success.
    """
    value = session_info_access_token.value
    outcome = _debug(http_client, value, value, version)

    if isinstance(outcome, Failure) and is_debug_only_access_token_rejection(
        outcome.status_code, outcome.error
    ):
        _logger.debug("Session info access token refused to debug itself, as expected")
        return None

    if isinstance(outcome, Failure):
        _logger.debug(
            "Unexpected debug_token answer for session info access token: HTTP %s %s",
            outcome.status_code,
            outcome.error.error,
        )
    return outcome


# =============================================================================
# Pages
# =============================================================================


def search_pages(
    http_client: HttpClient,
    q: str,
    access_token: str | UserAccessToken | PageAccessToken | AppAccessToken,
    limit: int | None = None,
    after: str | None = None,
    version: str | None = None,
) -> Outcome[PagesSearchResponse]:
    """Search pages by name; pass ``after`` from Paging.next_cursor() to continue."""
    endpoint = PagesSearchEndpoint(
        q, str(access_token), version=version, limit=limit, after=after
    )
    ret = respond_endpoint(http_client, endpoint)
    return _to_outcome(ret, lambda ok: ok)


__all__ = [
    "Success",
    "Failure",
    "Outcome",
    "gen_app_access_token",
    "get_long_lived_user_access_token",
    "gen_user_session_info_access_token",
    "gen_page_session_info_access_token",
    "debug_user_access_token",
    "debug_user_access_token_via_app_access_token",
    "debug_app_access_token",
    "debug_page_access_token",
    "debug_user_session_info_access_token_via_app_access_token",
    "debug_user_session_info_access_token_via_long_lived_user_access_token",
    "debug_page_session_info_access_token_via_app_access_token",
    "debug_page_session_info_access_token_via_page_access_token",
    "is_debug_only_access_token_rejection",
    "debug_session_info_access_token_self",
    "search_pages",
]
