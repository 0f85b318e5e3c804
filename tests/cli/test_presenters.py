"""Tests for result presenters."""

from io import StringIO

import pytest
from rich.console import Console

from graph_access_token.cli.presenters import ResultPresenter
from graph_access_token.errors import ErrorResponse, GraphError
from graph_access_token.objects import DebugTokenResult, PageForSearch
from graph_access_token.tokens import AccessTokenExpiresIn, LongLivedUserAccessToken
from graph_access_token.workflows import Failure


@pytest.fixture
def console():
    return Console(file=StringIO(), width=200)


@pytest.mark.unit
def test_present_user_debug_result(console, debug_token_user_response):
    """Test user token fields are displayed."""
    result = DebugTokenResult.from_dict(debug_token_user_response["data"])

    ResultPresenter(console=console).present_debug_result("long_lived", result)

    output = console.file.getvalue()
    assert "debug_token: long_lived" in output
    assert "USER" in output
    assert "10158000000000000" in output
    assert "2023-11-14T22:13:20+00:00" in output
    assert "pages_show_list, public_profile" in output


@pytest.mark.unit
def test_present_app_debug_result_has_no_user_fields(console, debug_token_app_response):
    result = DebugTokenResult.from_dict(debug_token_app_response["data"])

    ResultPresenter(console=console).present_debug_result("app", result)

    output = console.file.getvalue()
    assert "APP" in output
    assert "User ID" not in output


@pytest.mark.unit
def test_present_invalid_debug_result(console, debug_token_invalid_response):
    result = DebugTokenResult.from_dict(debug_token_invalid_response["data"])

    ResultPresenter(console=console).present_debug_result("user", result)

    output = console.file.getvalue()
    assert "no" in output
    assert "(190) Error validating access token" in output


@pytest.mark.unit
def test_present_token_with_expiry(console):
    """Test tokens are printed in full, with their expiry."""
    ResultPresenter(console=console).present_token(
        "long_lived", LongLivedUserAccessToken("EAAlong"), AccessTokenExpiresIn(60)
    )

    output = console.file.getvalue()
    assert "value:EAAlong" in output
    assert "expires_in:60" in output


@pytest.mark.unit
def test_present_token_is_not_markup(console):
    ResultPresenter(console=console).present_token(
        "[bold]app", LongLivedUserAccessToken("EAA[red]x[/red]")
    )

    output = console.file.getvalue()
    assert "[bold]app" in output
    assert "value:EAA[red]x[/red]" in output


@pytest.mark.unit
def test_present_raw_failure(console):
    failure = Failure(502, ErrorResponse.with_status_code_and_body(502, "[bad] gateway"))

    ResultPresenter(console=console).present_failure("debug", failure)

    output = console.file.getvalue()
    assert "debug: HTTP 502" in output
    assert "Unrecognized response body" in output
    assert "[bad] gateway" in output


@pytest.mark.unit
def test_present_error_classification(console):
    error = GraphError(message="Session has expired", code=190, error_subcode=463)

    ResultPresenter(console=console).present_error_classification(error)

    output = console.file.getvalue()
    assert "access_token_expired_or_revoked_or_invalid" in output
    assert "463" in output


@pytest.mark.unit
def test_present_pages(console, pages_search_response):
    pages = [PageForSearch.from_dict(page) for page in pages_search_response["data"]]

    ResultPresenter(console=console).present_pages(pages, "MQZDZD")

    output = console.file.getvalue()
    assert "Pages (2)" in output
    assert "Facebook Gaming" in output
    assert "--after MQZDZD" in output
