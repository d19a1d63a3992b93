"""Exception hierarchy for the AuthSub / ClientLogin client.

Ordinary login failures are reported through ``LoginResponse`` rather than
raised. The exceptions below are raised for bad client configuration and by
the opt-in helpers (``LoginResponse.raise_for_error`` and ``AuthSubAuth``).
Transport failures are never wrapped; they surface as ``requests``
exceptions.
"""

from __future__ import annotations


class AuthSubError(Exception):
    """Base exception for all google-authsub errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(AuthSubError):
    """Exception raised when a client is constructed with invalid options.

    Examples:
        - Unknown configuration key (e.g. a misspelt ``servcie``)
        - Non-numeric timeout
    """

    pass


class AuthenticationError(AuthSubError):
    """Base exception for authentication failures."""

    pass


class LoginFailedError(AuthenticationError):
    """Exception raised by ``LoginResponse.raise_for_error`` for a failed login.

    Attributes:
        error_code: The ClientLogin ``Error`` value (e.g. "BadAuthentication").
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        """Initialize the login failure exception.

        Args:
            message: Human-readable error description.
            error_code: The ClientLogin error code.
            details: Optional dictionary containing additional error context.
        """
        super().__init__(message, details)
        self.error_code = error_code


class CaptchaRequiredError(LoginFailedError):
    """Exception raised when Google demands a CAPTCHA before another attempt.

    Show ``captcha_url`` to the user, then call ``login`` again with
    ``logintoken=captcha_token`` and ``logincaptcha=<answer>``.

    Attributes:
        captcha_token: Token identifying the CAPTCHA challenge.
        captcha_url: URL of the CAPTCHA image.
    """

    def __init__(
        self,
        message: str,
        captcha_token: str | None = None,
        captcha_url: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message, error_code="CaptchaRequired", details=details)
        self.captcha_token = captcha_token
        self.captcha_url = captcha_url


class NotAuthenticatedError(AuthenticationError):
    """Exception raised when an authorised request is made without a token."""

    pass


__all__ = [
    "AuthSubError",
    "ConfigurationError",
    "AuthenticationError",
    "LoginFailedError",
    "CaptchaRequiredError",
    "NotAuthenticatedError",
]
