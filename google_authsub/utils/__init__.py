"""Shared helpers for google-authsub.

Currently this is the exception hierarchy used across the package.
"""

from google_authsub.utils.errors import (
    AuthenticationError,
    AuthSubError,
    CaptchaRequiredError,
    ConfigurationError,
    LoginFailedError,
    NotAuthenticatedError,
)

__all__ = [
    "AuthSubError",
    "ConfigurationError",
    "AuthenticationError",
    "LoginFailedError",
    "CaptchaRequiredError",
    "NotAuthenticatedError",
]
