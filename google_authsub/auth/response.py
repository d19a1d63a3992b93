"""Parsing of ClientLogin responses.

The ClientLogin endpoint answers with a plain-text body of ``Key=Value``
lines, for example::

    SID=DQAAAGgA...
    LSID=DQAAAGsA...
    Auth=DQAAAGgA...

or, on failure (HTTP 403)::

    Url=https://www.google.com/login/captcha
    Error=CaptchaRequired
    CaptchaToken=DQAAAGgA...
    CaptchaUrl=Captcha?ctoken=HiteT4b0Bk5Xg18_AcVoP6-yFkHPibe7O9EqxeiI7lUSN

A login succeeds only when the HTTP status is 2xx and an ``Auth`` line is
present. Anything else, including an empty or unparseable body, is a
failure with error code ``Unknown`` unless the body names one.
"""

from __future__ import annotations

import logging
from urllib.parse import urljoin

import requests
from pydantic import BaseModel, Field

from google_authsub.auth.types import LoginErrorCode
from google_authsub.utils.errors import CaptchaRequiredError, LoginFailedError

logger = logging.getLogger(__name__)

CAPTCHA_REQUIRED = LoginErrorCode.CAPTCHA_REQUIRED.value


class LoginResponse(BaseModel):
    """Outcome of a ClientLogin attempt.

    Attributes:
        success: True when the login produced a token.
        status_code: HTTP status of the login response.
        auth: The bearer token, present iff ``success``.
        error: ClientLogin error code, present iff not ``success``.
        captcha_token: CAPTCHA challenge token, only for ``CaptchaRequired``.
        captcha_url: Absolute URL of the CAPTCHA image, only for
            ``CaptchaRequired``.
        values: Every ``Key=Value`` pair in the body (``SID``, ``LSID``,
            ``Url``...).
    """

    success: bool
    status_code: int = 0
    auth: str | None = Field(default=None, repr=False)
    error: str | None = None
    captcha_token: str | None = None
    captcha_url: str | None = None
    values: dict[str, str] = Field(default_factory=dict, repr=False)

    @classmethod
    def from_http(
        cls, response: requests.Response, base_url: str | None = None
    ) -> LoginResponse:
        """Parse a ``requests.Response`` from the login endpoint."""
        return parse_login_response(response.status_code, response.text, base_url)

    @property
    def is_success(self) -> bool:
        return self.success

    @property
    def error_code(self) -> LoginErrorCode | None:
        """The error as a ``LoginErrorCode``, or None on success."""
        if self.success:
            return None
        return LoginErrorCode.parse(self.error)

    @property
    def captcha_required(self) -> bool:
        return self.error == CAPTCHA_REQUIRED

    def raise_for_error(self) -> None:
        """Raise if the login failed.

        Raises:
            CaptchaRequiredError: If Google demands a CAPTCHA.
            LoginFailedError: For any other failure.
        """
        if self.success:
            return

        if self.captcha_required:
            raise CaptchaRequiredError(
                "Login requires solving a CAPTCHA",
                captcha_token=self.captcha_token,
                captcha_url=self.captcha_url,
                details={"status_code": self.status_code},
            )

        raise LoginFailedError(
            f"Login failed: {self.error}",
            error_code=self.error,
            details={"status_code": self.status_code},
        )


def parse_values(body: str | None) -> dict[str, str]:
    """Split a ``Key=Value`` body into a dict.

    Lines without ``=`` are skipped. Values may contain ``=``; only the
    first one separates key from value. Later duplicates win.
    """
    values: dict[str, str] = {}
    if not body:
        return values

    for line in body.splitlines():
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        values[key] = value.strip()
    return values


def resolve_captcha_url(captcha_url: str | None, base_url: str | None) -> str | None:
    """Make a relative ``CaptchaUrl`` absolute.

    Google returns paths like ``Captcha?ctoken=...`` relative to
    ``{base_url}/accounts/``. Absolute URLs are returned unchanged.
    """
    if not captcha_url or not base_url:
        return captcha_url
    return urljoin(base_url.rstrip("/") + "/accounts/", captcha_url)


def parse_login_response(
    status_code: int, body: str | None, base_url: str | None = None
) -> LoginResponse:
    """Parse a raw ClientLogin response into a ``LoginResponse``.

    Never raises: malformed bodies become a generic ``Unknown`` failure.

    Args:
        status_code: HTTP status code of the response.
        body: Response body text.
        base_url: Base URL the request went to, used to absolutise a
            relative CAPTCHA URL.

    Returns:
        The parsed login result.

    Example:
        >>> r = parse_login_response(200, "Auth=XYZ123\\n")
        >>> r.success, r.auth
        (True, 'XYZ123')
    """
    values = parse_values(body)
    http_ok = 200 <= status_code < 300

    token = values.get("Auth")
    if http_ok and token:
        logger.debug("ClientLogin response parsed: success")
        return LoginResponse(
            success=True,
            status_code=status_code,
            auth=token,
            values=values,
        )

    error = values.get("Error") or LoginErrorCode.UNKNOWN.value
    captcha_token = None
    captcha_url = None
    if error == CAPTCHA_REQUIRED:
        captcha_token = values.get("CaptchaToken")
        captcha_url = resolve_captcha_url(values.get("CaptchaUrl"), base_url)

    if not values:
        logger.debug("ClientLogin response body empty or malformed (HTTP %d)", status_code)
    else:
        logger.debug("ClientLogin response parsed: error=%s (HTTP %d)", error, status_code)

    return LoginResponse(
        success=False,
        status_code=status_code,
        error=error,
        captcha_token=captcha_token,
        captcha_url=captcha_url,
        values=values,
    )


__all__ = [
    "LoginResponse",
    "parse_login_response",
    "parse_values",
    "resolve_captcha_url",
    "CAPTCHA_REQUIRED",
]
