"""Unit tests for access token kinds."""

import datetime

import pytest

from graph_access_token.exceptions import ValidationError
from graph_access_token.tokens import (
    LONG_LIVED_USER_ACCESS_TOKEN_LIFETIME,
    AccessTokenExpiresIn,
    AppAccessToken,
    ClientAccessToken,
    LongLivedUserAccessToken,
    PageAccessToken,
    ShortLivedUserAccessToken,
    UserAccessToken,
    UserSessionInfoAccessToken,
    redact_token,
)


@pytest.mark.unit
class TestAccessTokenValue:
    """Test behavior shared by every token kind."""

    def test_str_returns_raw_value(self):
        assert str(PageAccessToken("EAApage")) == "EAApage"

    def test_repr_does_not_leak_value(self):
        token = LongLivedUserAccessToken("EAAsecretvalue")
        assert "EAAsecretvalue" not in repr(token)
        assert repr(token).startswith("LongLivedUserAccessToken(")

    def test_empty_value_rejected(self):
        with pytest.raises(ValidationError):
            PageAccessToken("")

    def test_non_string_value_rejected(self):
        with pytest.raises(ValidationError):
            PageAccessToken(123)

    def test_kinds_are_not_equal(self):
        assert PageAccessToken("x") != UserAccessToken("x")
        assert PageAccessToken("x") == PageAccessToken("x")

    def test_redact_token(self):
        assert redact_token("EAAB1234567890") == "EAAB12…"
        assert redact_token("abc") == "…"


@pytest.mark.unit
class TestTokenConversions:
    """Test conversions allowed by the exchange graph."""

    def test_short_lived_to_user_access_token(self):
        token = ShortLivedUserAccessToken("EAAshort").to_user_access_token()
        assert token == UserAccessToken("EAAshort")

    def test_long_lived_to_user_access_token(self):
        token = LongLivedUserAccessToken("EAAlong").to_user_access_token()
        assert token == UserAccessToken("EAAlong")

    def test_user_access_token_coerce_accepts_lifetime_kinds(self):
        assert UserAccessToken.coerce(ShortLivedUserAccessToken("a")) == UserAccessToken("a")
        assert UserAccessToken.coerce(LongLivedUserAccessToken("b")) == UserAccessToken("b")
        assert UserAccessToken.coerce("c") == UserAccessToken("c")

    def test_coerce_returns_same_instance(self):
        token = PageAccessToken("EAApage")
        assert PageAccessToken.coerce(token) is token

    def test_coerce_rejects_other_kind(self):
        with pytest.raises(ValidationError) as exc_info:
            UserAccessToken.coerce(PageAccessToken("EAApage"))

        assert "cannot convert PageAccessToken" in str(exc_info.value)

    def test_session_info_token_is_not_a_user_token(self):
        with pytest.raises(ValidationError):
            LongLivedUserAccessToken.coerce(UserSessionInfoAccessToken("EAAsession"))


@pytest.mark.unit
class TestAppAccessToken:
    """Test locally built app access tokens."""

    def test_with_app_secret(self):
        assert str(AppAccessToken.with_app_secret(123, "secret")) == "123|secret"

    def test_app_id_and_app_secret_round_trip(self):
        token = AppAccessToken.with_app_secret(123456789, "abc")
        assert token.app_id_and_app_secret() == (123456789, "abc")

    def test_app_id_accepts_plus_sign(self):
        assert AppAccessToken("+7|secret").app_id_and_app_secret() == (7, "secret")

    def test_app_id_at_u64_max(self):
        value = 2**64 - 1
        assert AppAccessToken(f"{value}|s").app_id_and_app_secret() == (value, "s")

    @pytest.mark.parametrize(
        "value",
        [
            "1",
            "1|",
            "|x",
            "1|a|b",
            "-1|x",
            "abc|x",
            " 1|x",
            f"{2**64}|x",
            "EAAgeneratedbyoauth",
        ],
    )
    def test_app_id_and_app_secret_malformed(self, value):
        assert AppAccessToken(value).app_id_and_app_secret() is None


@pytest.mark.unit
class TestClientAccessToken:
    def test_new(self):
        assert str(ClientAccessToken.new(123, "client-token")) == "123|client-token"


@pytest.mark.unit
class TestAccessTokenExpiresIn:
    """Test expiry durations."""

    def test_str_is_seconds(self):
        assert str(AccessTokenExpiresIn(5183944)) == "5183944"

    def test_int_and_timedelta(self):
        expires_in = AccessTokenExpiresIn(3600)
        assert int(expires_in) == 3600
        assert expires_in.as_timedelta() == datetime.timedelta(hours=1)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            AccessTokenExpiresIn(-1)

    def test_long_lived_lifetime(self):
        assert LONG_LIVED_USER_ACCESS_TOKEN_LIFETIME == datetime.timedelta(days=60)
