"""ClientLogin / AuthSub authentication.

This package provides:

- ``AuthSubClient``: logs in with a username and password, or accepts a
  token from the AuthSub redirect flow, and builds ``Authorization`` headers
- ``LoginResponse`` / ``parse_login_response``: parsing of the plain-text
  ClientLogin response body
- ``AuthType`` / ``LoginErrorCode``: token kinds and login error codes

Usage:
    >>> from google_authsub.auth import AuthSubClient
    >>>
    >>> client = AuthSubClient(service="cl")
    >>> response = client.login("user@example.com", "secret")
    >>> if response.success:
    ...     headers = client.auth_headers()
"""

from google_authsub.auth.client import (
    CLIENT_LOGIN_PATH,
    DISPLAY_UNLOCK_CAPTCHA_URL,
    AuthSubAuth,
    AuthSubClient,
)
from google_authsub.auth.response import LoginResponse, parse_login_response
from google_authsub.auth.types import AuthSession, AuthType, LoginErrorCode, LoginRequest

__all__ = [
    # Client
    "AuthSubClient",
    "AuthSubAuth",
    "CLIENT_LOGIN_PATH",
    "DISPLAY_UNLOCK_CAPTCHA_URL",
    # Response parsing
    "LoginResponse",
    "parse_login_response",
    # Types
    "AuthType",
    "LoginErrorCode",
    "AuthSession",
    "LoginRequest",
]
