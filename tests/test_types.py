"""Tests for shared auth types and the error hierarchy."""

from __future__ import annotations

from google_authsub.auth.types import AuthSession, AuthType, LoginErrorCode, LoginRequest
from google_authsub.utils.errors import (
    AuthenticationError,
    AuthSubError,
    CaptchaRequiredError,
    LoginFailedError,
)


class TestAuthType:
    def test_schemes(self):
        assert AuthType.CLIENT_LOGIN.scheme == "GoogleLogin auth"
        assert AuthType.AUTH_SUB.scheme == "AuthSub token"


class TestLoginErrorCode:
    def test_parse_known(self):
        assert LoginErrorCode.parse("NotVerified") is LoginErrorCode.NOT_VERIFIED

    def test_parse_unknown_and_none(self):
        assert LoginErrorCode.parse("Whatever") is LoginErrorCode.UNKNOWN
        assert LoginErrorCode.parse(None) is LoginErrorCode.UNKNOWN


class TestAuthSession:
    def test_authorization(self):
        session = AuthSession(token="abc", auth_type=AuthType.CLIENT_LOGIN, username="u")
        assert session.authorization == "GoogleLogin auth=abc"

    def test_repr_masks_token(self):
        session = AuthSession(
            token="0123456789abcdef", auth_type=AuthType.AUTH_SUB, username="u"
        )
        assert "0123456789abcdef" not in repr(session)


class TestLoginRequest:
    """Tests for the login form builder."""

    def _request(self, **extra: str) -> LoginRequest:
        return LoginRequest(
            email="user@example.com",
            password="secret",
            service="cl",
            source="acme-1.0",
            account_type="HOSTED_OR_GOOGLE",
            extra_params=extra,
        )

    def test_field_order(self):
        """Test fixed fields come first, extras last."""
        form = self._request(logintoken="t").to_form()
        assert list(form) == ["Email", "Passwd", "service", "source", "accountType", "logintoken"]

    def test_extra_overrides_fixed_field(self):
        """Test extras with a fixed wire name replace the default."""
        request = self._request(service="wise")

        assert request.to_form()["service"] == "wise"
        assert request.overridden_fields() == ["service"]

    def test_repr_hides_password(self):
        assert "secret" not in repr(self._request())


class TestErrorHierarchy:
    def test_captcha_error_is_login_failure(self):
        error = CaptchaRequiredError("captcha", captcha_token="t", captcha_url="u")

        assert isinstance(error, LoginFailedError)
        assert isinstance(error, AuthenticationError)
        assert isinstance(error, AuthSubError)
        assert error.error_code == "CaptchaRequired"

    def test_str_includes_details(self):
        error = AuthSubError("failed", details={"status_code": 403})
        assert str(error) == "failed | Details: {'status_code': 403}"
