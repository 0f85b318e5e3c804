"""Tests for the graph-token CLI."""

import json
import logging

import httpx
import pytest
from typer.testing import CliRunner

from graph_access_token import __version__
from graph_access_token.cli.main import app
from graph_access_token.config import ConfigSchema
from tests.fixtures.graph_api import create_graph_error

runner = CliRunner()

# Wide enough that Rich never wraps table cells
ENV = {"COLUMNS": "200"}


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI callback reconfigures the root logger."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def credentials(app_id, app_secret):
    return ["--app-id", str(app_id), "--app-secret", app_secret]


def _ok(body: dict) -> httpx.Response:
    return httpx.Response(200, json=body)


@pytest.mark.unit
class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["version"], env=ENV)

        assert result.exit_code == 0
        assert f"graph-token version {__version__}" in result.output


@pytest.mark.unit
class TestEnvCommand:
    def test_lists_every_variable(self):
        result = runner.invoke(app, ["env"], env=ENV)

        assert result.exit_code == 0
        for name in ConfigSchema.all_specs():
            assert name in result.output
        assert "v15.0" in result.output


@pytest.mark.unit
class TestAppCommand:
    """Test `graph-token app`."""

    def test_generates_and_debugs(
        self,
        mock_graph_api,
        credentials,
        app_id,
        app_secret,
        app_access_token_response,
        debug_token_app_response,
    ):
        mock_graph_api.get("/v15.0/oauth/access_token").mock(
            return_value=_ok(app_access_token_response)
        )
        debug_route = mock_graph_api.get("/v15.0/debug_token").mock(
            return_value=_ok(debug_token_app_response)
        )

        result = runner.invoke(app, ["app", *credentials], env=ENV)

        assert result.exit_code == 0, result.output
        assert f"{app_id}|generated-app-token" in result.output
        assert "Test App" in result.output
        assert debug_route.call_count == 2
        local_debug = debug_route.calls[1].request.url.params
        assert local_debug["access_token"] == f"{app_id}|{app_secret}"

    def test_credentials_from_environment(
        self, mock_graph_api, app_id, app_access_token_response, debug_token_app_response
    ):
        token_route = mock_graph_api.get("/v15.0/oauth/access_token").mock(
            return_value=_ok(app_access_token_response)
        )
        mock_graph_api.get("/v15.0/debug_token").mock(return_value=_ok(debug_token_app_response))

        result = runner.invoke(
            app, ["app"], env={**ENV, "FB_APP_ID": str(app_id), "FB_APP_SECRET": "from-env"}
        )

        assert result.exit_code == 0, result.output
        assert token_route.calls.last.request.url.params["client_secret"] == "from-env"

    def test_api_version_from_environment(
        self, mock_graph_api, credentials, app_access_token_response, debug_token_app_response
    ):
        token_route = mock_graph_api.get("/v18.0/oauth/access_token").mock(
            return_value=_ok(app_access_token_response)
        )
        mock_graph_api.get("/v18.0/debug_token").mock(return_value=_ok(debug_token_app_response))

        result = runner.invoke(
            app, ["app", *credentials], env={**ENV, "GRAPH_API_VERSION": "v18.0"}
        )

        assert result.exit_code == 0, result.output
        assert token_route.called

    def test_missing_credentials(self):
        result = runner.invoke(app, ["app"], env=ENV)

        assert result.exit_code == 1
        assert "Missing Credentials" in result.output
        assert "FB_APP_SECRET" in result.output

    def test_invalid_configuration(self, credentials):
        result = runner.invoke(
            app, ["app", *credentials], env={**ENV, "GRAPH_HTTP_TIMEOUT": "soon"}
        )

        assert result.exit_code == 1
        assert "Configuration Error" in result.output
        assert "GRAPH_HTTP_TIMEOUT" in result.output

    def test_graph_error(self, mock_graph_api, credentials):
        mock_graph_api.get("/v15.0/oauth/access_token").mock(
            return_value=httpx.Response(
                400, json=create_graph_error(101, "Error validating application.")
            )
        )

        result = runner.invoke(app, ["app", *credentials], env=ENV)

        assert result.exit_code == 1
        assert "gen_app_access_token: HTTP 400" in result.output
        assert "Error validating application." in result.output
        assert "unclassified" in result.output

    def test_transport_error(self, mock_graph_api, credentials):
        mock_graph_api.get("/v15.0/oauth/access_token").mock(
            side_effect=httpx.ConnectError("connection refused")
        )

        result = runner.invoke(app, ["app", *credentials], env=ENV)

        assert result.exit_code == 1
        assert "Request Error" in result.output
        assert "connection refused" in result.output


@pytest.mark.unit
class TestUserCommand:
    """Test `graph-token user`."""

    def test_full_chain(
        self,
        mock_graph_api,
        credentials,
        app_access_token_response,
        long_lived_user_access_token_response,
        session_info_access_token_response,
        debug_token_user_response,
        debug_only_access_token_error,
    ):
        token_route = mock_graph_api.get("/v15.0/oauth/access_token").mock(
            side_effect=[
                _ok(app_access_token_response),
                _ok(long_lived_user_access_token_response),
                _ok(session_info_access_token_response),
            ]
        )
        debug_route = mock_graph_api.get("/v15.0/debug_token").mock(
            side_effect=[
                _ok(debug_token_user_response),
                _ok(debug_token_user_response),
                httpx.Response(400, json=debug_only_access_token_error),
                _ok(debug_token_user_response),
                _ok(debug_token_user_response),
            ]
        )

        result = runner.invoke(app, ["user", "EAAshort", *credentials], env=ENV)

        assert result.exit_code == 0, result.output
        assert "EAAlonglived" in result.output
        assert "expires_in:5183944" in result.output
        assert "EAAsessioninfo" in result.output
        assert "as expected" in result.output

        grant_types = [call.request.url.params["grant_type"] for call in token_route.calls]
        assert grant_types == ["client_credentials", "fb_exchange_token", "fb_attenuate_token"]

        authorizers = [call.request.url.params["access_token"] for call in debug_route.calls]
        assert authorizers == [
            "EAAshort",
            "EAAlonglived",
            "EAAsessioninfo",
            "EAAlonglived",
            "123456789|generated-app-token",
        ]

    def test_exchange_failure_stops_chain(
        self, mock_graph_api, credentials, app_access_token_response, session_expired_error
    ):
        mock_graph_api.get("/v15.0/oauth/access_token").mock(
            side_effect=[
                _ok(app_access_token_response),
                httpx.Response(400, json=session_expired_error),
            ]
        )
        debug_route = mock_graph_api.get("/v15.0/debug_token").mock(
            return_value=httpx.Response(400, json=session_expired_error)
        )

        result = runner.invoke(app, ["user", "EAAshort", *credentials], env=ENV)

        assert result.exit_code == 1
        assert "get_long_lived_user_access_token: HTTP 400" in result.output
        assert "access_token_expired_or_revoked_or_invalid" in result.output
        assert debug_route.call_count == 1


@pytest.mark.unit
class TestPageCommand:
    """Test `graph-token page`."""

    def test_full_chain(
        self,
        mock_graph_api,
        credentials,
        app_access_token_response,
        session_info_access_token_response,
        debug_token_page_response,
        debug_only_access_token_error,
    ):
        mock_graph_api.get("/v15.0/oauth/access_token").mock(
            side_effect=[
                _ok(app_access_token_response),
                _ok(session_info_access_token_response),
            ]
        )
        debug_route = mock_graph_api.get("/v15.0/debug_token").mock(
            side_effect=[
                _ok(debug_token_page_response),
                httpx.Response(400, json=debug_only_access_token_error),
                _ok(debug_token_page_response),
                _ok(debug_token_page_response),
            ]
        )

        result = runner.invoke(app, ["page", "EAApage", *credentials], env=ENV)

        assert result.exit_code == 0, result.output
        assert "103455271248220" in result.output
        assert "never" in result.output

        authorizers = [call.request.url.params["access_token"] for call in debug_route.calls]
        assert authorizers == [
            "EAApage",
            "EAAsessioninfo",
            "EAApage",
            "123456789|generated-app-token",
        ]

    def test_debug_failure_sets_exit_code(
        self,
        mock_graph_api,
        credentials,
        app_access_token_response,
        session_info_access_token_response,
        debug_token_page_response,
        debug_only_access_token_error,
    ):
        mock_graph_api.get("/v15.0/oauth/access_token").mock(
            side_effect=[
                _ok(app_access_token_response),
                _ok(session_info_access_token_response),
            ]
        )
        mock_graph_api.get("/v15.0/debug_token").mock(
            side_effect=[
                httpx.Response(503, text="Service Unavailable"),
                httpx.Response(400, json=debug_only_access_token_error),
                _ok(debug_token_page_response),
                _ok(debug_token_page_response),
            ]
        )

        result = runner.invoke(app, ["page", "EAApage", *credentials], env=ENV)

        assert result.exit_code == 1
        assert "Unrecognized response body" in result.output
        assert "Service Unavailable" in result.output


@pytest.mark.unit
class TestSearchCommand:
    """Test `graph-token search`."""

    def test_search(self, mock_graph_api, pages_search_response):
        route = mock_graph_api.get("/v15.0/pages/search").mock(
            return_value=_ok(pages_search_response)
        )

        result = runner.invoke(app, ["search", "Facebook", "EAAuser", "--limit", "2"], env=ENV)

        assert result.exit_code == 0, result.output
        assert "Facebook App" in result.output
        assert "Menlo Park, United States" in result.output
        assert "--after MQZDZD" in result.output
        assert route.calls.last.request.url.params["limit"] == "2"

    def test_last_page(self, mock_graph_api):
        mock_graph_api.get("/v15.0/pages/search").mock(return_value=_ok({"data": []}))

        result = runner.invoke(app, ["search", "nothing", "EAAuser"], env=ENV)

        assert result.exit_code == 0, result.output
        assert "Pages (0)" in result.output
        assert "--after" not in result.output

    def test_search_failure(self, mock_graph_api):
        mock_graph_api.get("/v15.0/pages/search").mock(
            return_value=httpx.Response(
                400, json=create_graph_error(10, "Application does not have permission")
            )
        )

        result = runner.invoke(app, ["search", "Facebook", "EAAuser"], env=ENV)

        assert result.exit_code == 1
        assert "permission_not_granted_or_removed" in result.output


@pytest.mark.unit
class TestClassifyCommand:
    """Test `graph-token classify`."""

    def test_wrapped_body(self, session_expired_error):
        result = runner.invoke(app, ["classify", json.dumps(session_expired_error)], env=ENV)

        assert result.exit_code == 0, result.output
        assert "access_token_expired_or_revoked_or_invalid" in result.output

    def test_bare_error_object(self):
        body = json.dumps({"message": "Too many calls", "code": 4})

        result = runner.invoke(app, ["classify", body], env=ENV)

        assert result.exit_code == 0, result.output
        assert "api_too_many_calls" in result.output

    def test_unclassified(self):
        body = json.dumps({"message": "Unsupported get request.", "code": 100})

        result = runner.invoke(app, ["classify", body], env=ENV)

        assert result.exit_code == 0
        assert "unclassified" in result.output

    def test_invalid_json(self):
        result = runner.invoke(app, ["classify", "{not json"], env=ENV)

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_not_an_error(self):
        result = runner.invoke(app, ["classify", '{"data": []}'], env=ENV)

        assert result.exit_code == 1
        assert "Not a Graph API error" in result.output
