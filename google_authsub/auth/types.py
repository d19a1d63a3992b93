"""Data models shared by the login client and the response parser."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AuthType(str, Enum):
    """How the stored token was obtained.

    Attributes:
        CLIENT_LOGIN: Token returned by a username/password ClientLogin call.
        AUTH_SUB: Token obtained through the AuthSub web redirect flow.
    """

    CLIENT_LOGIN = "client_login"
    AUTH_SUB = "auth_sub"

    @property
    def scheme(self) -> str:
        """Authorization scheme prefix used for this kind of token."""
        if self is AuthType.CLIENT_LOGIN:
            return "GoogleLogin auth"
        return "AuthSub token"


class LoginErrorCode(str, Enum):
    """Error codes returned by the ClientLogin endpoint."""

    BAD_AUTHENTICATION = "BadAuthentication"
    NOT_VERIFIED = "NotVerified"
    TERMS_NOT_AGREED = "TermsNotAgreed"
    CAPTCHA_REQUIRED = "CaptchaRequired"
    UNKNOWN = "Unknown"
    ACCOUNT_DELETED = "AccountDeleted"
    ACCOUNT_DISABLED = "AccountDisabled"
    SERVICE_DISABLED = "ServiceDisabled"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"

    @classmethod
    def parse(cls, value: str | None) -> LoginErrorCode:
        """Map a raw ``Error`` value to a code, ``UNKNOWN`` if unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class AuthSession(BaseModel):
    """Credentials held by an authenticated client.

    A client without a session is unauthenticated; ``auth_type`` only has
    meaning alongside ``token``, so both live on the same object.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., description="Bearer token")
    auth_type: AuthType = Field(..., description="How the token was obtained")
    username: str = Field(..., description="Account the token belongs to")

    @property
    def authorization(self) -> str:
        """Value of the ``Authorization`` header for this session."""
        return f"{self.auth_type.scheme}={self.token}"

    def __repr__(self) -> str:
        return (
            f"AuthSession(username={self.username!r}, "
            f"auth_type={self.auth_type.value!r}, token={self.token[:8]!r}...)"
        )


class LoginRequest(BaseModel):
    """Fields of a ClientLogin POST.

    The fixed fields are emitted first in wire order; anything in ``extra_params``
    (``logintoken``, ``logincaptcha``, a per-call ``accountType``...) is
    overlaid last and wins over a fixed field of the same wire name.

    Example:
        >>> req = LoginRequest(
        ...     email="user@example.com", password="secret",
        ...     service="cl", source="acme-1.0", account_type="GOOGLE",
        ...     extra_params={"logintoken": "abc"},
        ... )
        >>> list(req.to_form())
        ['Email', 'Passwd', 'service', 'source', 'accountType', 'logintoken']
    """

    email: str
    password: str = Field(..., repr=False)
    service: str
    source: str
    account_type: str
    extra_params: dict[str, str] = Field(default_factory=dict)

    def to_form(self) -> dict[str, str]:
        """Build the form-encoded body as an ordered dict."""
        form = {
            "Email": self.email,
            "Passwd": self.password,
            "service": self.service,
            "source": self.source,
            "accountType": self.account_type,
        }
        form.update(self.extra_params)
        return form

    def overridden_fields(self) -> list[str]:
        """Wire names of fixed fields replaced by ``extra_params``."""
        fixed = ("Email", "Passwd", "service", "source", "accountType")
        return [name for name in fixed if name in self.extra_params]


__all__ = [
    "AuthType",
    "LoginErrorCode",
    "AuthSession",
    "LoginRequest",
]
