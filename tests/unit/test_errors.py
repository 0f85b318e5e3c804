"""Unit tests for Graph API error decoding and classification."""

import pytest

from graph_access_token.constants import ErrorCodes
from graph_access_token.errors import (
    ErrorResponse,
    ErrorType,
    GraphError,
    KnownErrorCase,
    classify,
)
from graph_access_token.exceptions import ValidationError


def _error(code: int, subcode: int | None = None, message: str = "msg") -> GraphError:
    return GraphError(message=message, code=code, error_subcode=subcode)


@pytest.mark.unit
class TestGraphErrorDecoding:
    """Test GraphError.from_dict / to_dict."""

    def test_from_dict_full(self, session_expired_error):
        error = ErrorResponse.from_dict(session_expired_error).error

        assert error.code == 190
        assert error.error_subcode == 463
        assert error.type is ErrorType.OAUTH_EXCEPTION
        assert error.fbtrace_id == "AbCdEfGh"
        assert error.message.startswith("Error validating access token")

    def test_unknown_type_kept_as_string(self):
        error = GraphError.from_dict({"message": "m", "code": 1, "type": "SomethingNew"})
        assert error.type == "SomethingNew"

    def test_graph_method_exception(self):
        error = GraphError.from_dict({"message": "m", "code": 100, "type": "GraphMethodException"})
        assert error.type is ErrorType.GRAPH_METHOD_EXCEPTION

    def test_extra_fields_preserved(self):
        data = {"message": "m", "code": 2, "is_transient": True, "error_data": {"k": "v"}}
        error = GraphError.from_dict(data)

        assert error.extra == {"is_transient": True, "error_data": {"k": "v"}}
        assert error.to_dict()["is_transient"] is True

    def test_to_dict_round_trip(self, session_expired_error):
        error = GraphError.from_dict(session_expired_error["error"])
        assert GraphError.from_dict(error.to_dict()) == error

    @pytest.mark.parametrize(
        "data",
        [
            {"code": 190},
            {"message": "m"},
            {"message": "m", "code": "190"},
            {"message": None, "code": 190},
            {"message": "m", "code": 190, "error_subcode": "463"},
            "not an object",
        ],
    )
    def test_malformed_error_rejected(self, data):
        with pytest.raises(ValidationError):
            GraphError.from_dict(data)

    def test_error_response_requires_error_key(self):
        with pytest.raises(ValidationError):
            ErrorResponse.from_dict({"message": "m", "code": 1})

    def test_str(self):
        assert str(_error(190, message="Bad token")) == "(190) Bad token"


@pytest.mark.unit
class TestFabricatedErrors:
    """Test errors fabricated from unstructured responses."""

    def test_with_status_code_and_body(self):
        error = GraphError.with_status_code_and_body(502, "<html>Bad Gateway</html>")

        assert error.code == ErrorCodes.STATUS_CODE_AND_BODY
        assert error.code == -2147483001
        assert error.as_status_code_and_body() == (502, "<html>Bad Gateway</html>")

    def test_error_response_with_status_code_and_body(self):
        response = ErrorResponse.with_status_code_and_body(500, "")
        assert response.error.as_status_code_and_body() == (500, "")

    def test_real_error_is_not_fabricated(self):
        assert _error(190).as_status_code_and_body() is None

    def test_fabricated_error_is_unclassified(self):
        assert classify(GraphError.with_status_code_and_body(503, "busy")) is None


@pytest.mark.unit
class TestClassification:
    """Test mapping of Graph errors onto KnownErrorCase."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            (2, KnownErrorCase.RETRY_LATER),
            (4, KnownErrorCase.API_TOO_MANY_CALLS),
            (17, KnownErrorCase.API_USER_TOO_MANY_CALLS),
            (10, KnownErrorCase.PERMISSION_NOT_GRANTED_OR_REMOVED),
            (200, KnownErrorCase.PERMISSION_NOT_GRANTED_OR_REMOVED),
            (250, KnownErrorCase.PERMISSION_NOT_GRANTED_OR_REMOVED),
            (299, KnownErrorCase.PERMISSION_NOT_GRANTED_OR_REMOVED),
            (190, KnownErrorCase.ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID),
            (102, KnownErrorCase.ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID),
        ],
    )
    def test_code(self, code, expected):
        assert classify(_error(code)) is expected

    @pytest.mark.parametrize("code", [1, 100, 199, 300, 368, -2147483001])
    def test_unknown_code(self, code):
        assert classify(_error(code)) is None

    @pytest.mark.parametrize("subcode", [463, 467])
    @pytest.mark.parametrize("code", [1, 4, 17, 102, 190, 250])
    def test_expired_subcodes_win_over_code(self, code, subcode):
        assert (
            classify(_error(code, subcode))
            is KnownErrorCase.ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID
        )

    def test_session_code_with_other_subcode_is_unclassified(self):
        assert classify(_error(102, 1)) is None

    def test_other_subcode_does_not_change_code_classification(self):
        assert classify(_error(4, 1)) is KnownErrorCase.API_TOO_MANY_CALLS
        assert classify(_error(190, 460)) is (
            KnownErrorCase.ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID
        )

    def test_to_known_error_case(self):
        assert _error(4).to_known_error_case() is KnownErrorCase.API_TOO_MANY_CALLS

    def test_known_error_case_helpers(self):
        expired = KnownErrorCase.ACCESS_TOKEN_EXPIRED_OR_REVOKED_OR_INVALID
        permission = KnownErrorCase.PERMISSION_NOT_GRANTED_OR_REMOVED

        assert KnownErrorCase.RETRY_LATER.is_retry_later()
        assert not KnownErrorCase.RETRY_LATER.is_api_too_many_calls()
        assert KnownErrorCase.API_USER_TOO_MANY_CALLS.is_api_user_too_many_calls()
        assert permission.is_permission_not_granted_or_removed()
        assert expired.is_access_token_expired_or_revoked_or_invalid()
        assert not expired.is_retry_later()


@pytest.mark.unit
class TestMessageHeuristics:
    """Test substring heuristics on error messages."""

    def test_error_validating_access_token(self, session_expired_error):
        error = GraphError.from_dict(session_expired_error["error"])

        assert error.is_error_validating_access_token()
        assert error.is_access_token_session_has_expired()
        assert not error.is_access_token_session_has_been_invalidated()

    def test_session_has_been_invalidated(self):
        error = _error(
            190,
            message="Error validating access token: The session has been invalidated because "
            "the user changed their password.",
        )
        assert error.is_access_token_session_has_been_invalidated()
        assert not error.is_access_token_session_has_expired()

    @pytest.mark.parametrize(
        "message",
        [
            "The session key is malformed",
            "Session key EAAB... is malformed",
            "SESSION KEY IS MALFORMED",
        ],
    )
    def test_session_key_is_malformed(self, message):
        assert _error(190, message=message).is_access_token_session_key_is_malformed()

    def test_unrelated_message(self):
        error = _error(100, message="Unsupported get request.")

        assert not error.is_error_validating_access_token()
        assert not error.is_access_token_session_key_is_malformed()
