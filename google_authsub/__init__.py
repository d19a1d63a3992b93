"""Client for Google's legacy ClientLogin and AuthSub authentication."""

from google_authsub.auth import (
    DISPLAY_UNLOCK_CAPTCHA_URL,
    AuthSubAuth,
    AuthSubClient,
    AuthType,
    LoginErrorCode,
    LoginResponse,
    parse_login_response,
)
from google_authsub.config import APP_NAME, VERSION, AuthSubConfig
from google_authsub.utils.errors import (
    AuthenticationError,
    AuthSubError,
    CaptchaRequiredError,
    ConfigurationError,
    LoginFailedError,
    NotAuthenticatedError,
)

__version__ = VERSION

__all__ = [
    "__version__",
    "APP_NAME",
    "AuthSubConfig",
    "AuthSubClient",
    "AuthSubAuth",
    "AuthType",
    "LoginErrorCode",
    "LoginResponse",
    "parse_login_response",
    "DISPLAY_UNLOCK_CAPTCHA_URL",
    "AuthSubError",
    "ConfigurationError",
    "AuthenticationError",
    "LoginFailedError",
    "CaptchaRequiredError",
    "NotAuthenticatedError",
]
