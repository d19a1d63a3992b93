"""Client for Google's ClientLogin and AuthSub authentication.

Two ways to become authenticated:

1. ClientLogin: ``login(username, password)`` posts the credentials to
   ``{url}/accounts/ClientLogin`` and keeps the returned ``Auth`` token.

2. AuthSub: a token obtained through Google's web redirect flow is handed
   over with ``register_token(username, token)``.

Either way, ``auth_headers()`` returns the ``Authorization`` header to send
with later requests.

Dealing with CAPTCHAs:
    A failed login may carry the error ``CaptchaRequired``. Show the user
    ``response.captcha_url`` (or send them to ``DISPLAY_UNLOCK_CAPTCHA_URL``)
    and retry with the challenge token and their answer::

        >>> client = AuthSubClient(service="cl")
        >>> res = client.login(user, password)
        >>> if not res.success and res.captcha_required:
        ...     answer = ask_user(res.captcha_url)
        ...     res = client.login_with_captcha(
        ...         user, password, res.captcha_token, answer
        ...     )

No retries are made here; the caller drives every attempt.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError
from requests.auth import AuthBase

from google_authsub.auth.response import LoginResponse
from google_authsub.auth.types import AuthSession, AuthType, LoginRequest
from google_authsub.config import AuthSubConfig
from google_authsub.utils.errors import ConfigurationError, NotAuthenticatedError

logger = logging.getLogger(__name__)

CLIENT_LOGIN_PATH = "/accounts/ClientLogin"
DISPLAY_UNLOCK_CAPTCHA_URL = "https://www.google.com/accounts/DisplayUnlockCaptcha"


def _mask(token: str) -> str:
    return token[:8] + "..."


class AuthSubAuth(AuthBase):
    """``requests`` auth hook that signs requests with a client's token.

    Example:
        >>> requests.get(feed_url, auth=client.auth)
    """

    def __init__(self, client: AuthSubClient) -> None:
        self._client = client

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        headers = self._client.auth_headers()
        if not headers:
            raise NotAuthenticatedError(
                "Client is not authenticated",
                details={"hint": "Call login() or register_token() first"},
            )
        request.headers.update(headers)
        return request


class AuthSubClient:
    """Authenticates against Google ClientLogin / AuthSub.

    Each client owns one ``requests.Session`` and one set of credentials.
    It starts unauthenticated; a successful ``login`` or a call to
    ``register_token`` replaces the stored credentials.

    Attributes:
        config: The client's immutable configuration.

    Example:
        >>> client = AuthSubClient(service="cl", source="acme-calendar-1.0")
        >>> response = client.login("user@example.com", "secret")
        >>> if response.success:
        ...     headers = client.auth_headers()
        ... else:
        ...     print("Login failed:", response.error)
    """

    def __init__(
        self,
        config: AuthSubConfig | None = None,
        *,
        session: requests.Session | None = None,
        **overrides: Any,
    ) -> None:
        """Create a client.

        Args:
            config: Base configuration. Defaults to ``AuthSubConfig()``.
            session: HTTP session to use. A new one is created (and closed
                by ``close()``) when omitted.
            **overrides: Configuration fields overriding ``config``
                (``url``, ``service``, ``source``, ``account_type`` /
                ``accountType``, ``timeout``).

        Raises:
            ConfigurationError: If an override is unknown or invalid.
        """
        try:
            if config is None:
                config = AuthSubConfig(**overrides)
            elif overrides:
                merged = config.model_dump()
                if "accountType" in overrides:
                    merged.pop("account_type")
                merged.update(overrides)
                config = AuthSubConfig(**merged)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid AuthSub client configuration",
                details={
                    "errors": [
                        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                        for err in e.errors()
                    ]
                },
            ) from e

        self.config = config
        self._owns_session = session is None
        self._http = session if session is not None else requests.Session()
        self._session: AuthSession | None = None

        logger.debug(
            "AuthSubClient created for %s (service=%s)", config.url, config.service
        )

    def __enter__(self) -> AuthSubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._http.close()

    @property
    def login_url(self) -> str:
        return self.config.url + CLIENT_LOGIN_PATH

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    def login(self, username: str, password: str, **extra: str) -> LoginResponse:
        """Log in with a username and password.

        Args:
            username: Google account email.
            password: Account password. Never stored or logged.
            **extra: Additional form fields, overlaid on the defaults.
                Use ``logintoken`` / ``logincaptcha`` to answer a CAPTCHA,
                or ``accountType`` to override it for this call.

        Returns:
            The parsed response, whether or not the login succeeded.
            Check ``response.success``.

        Raises:
            requests.RequestException: On network failure. Not wrapped.
        """
        request = LoginRequest(
            email=username,
            password=password,
            service=self.config.service,
            source=self.config.source,
            account_type=self.config.account_type,
            extra_params={key: str(value) for key, value in extra.items()},
        )

        overridden = request.overridden_fields()
        if overridden:
            logger.debug("Login fields overridden by caller: %s", ", ".join(overridden))
        if "logintoken" in extra:
            logger.debug("Retrying login for %s with CAPTCHA answer", username)

        http_response = self._http.post(
            self.login_url,
            data=request.to_form(),
            timeout=self.config.timeout,
        )
        response = LoginResponse.from_http(http_response, self.config.url)

        if not response.success:
            logger.warning(
                "ClientLogin failed for %s: %s (HTTP %d)",
                username,
                response.error,
                response.status_code,
            )
            return response

        self._session = AuthSession(
            token=response.auth,
            auth_type=AuthType.CLIENT_LOGIN,
            username=username,
        )
        logger.info("Logged in as %s via ClientLogin", username)
        return response

    def login_with_captcha(
        self, username: str, password: str, captcha_token: str, answer: str
    ) -> LoginResponse:
        """Retry a login that failed with ``CaptchaRequired``."""
        return self.login(
            username, password, logintoken=captcha_token, logincaptcha=answer
        )

    def register_token(self, username: str, token: str) -> bool:
        """Use a token obtained from the AuthSub web redirect flow.

        The token is not validated.

        Returns:
            Always True.
        """
        self._session = AuthSession(
            token=token,
            auth_type=AuthType.AUTH_SUB,
            username=username,
        )
        logger.info("Registered AuthSub token %s for %s", _mask(token), username)
        return True

    def clear(self) -> None:
        """Forget the stored credentials."""
        if self._session is not None:
            logger.info("Cleared credentials for %s", self._session.username)
        self._session = None

    # -------------------------------------------------------------------------
    # Session state
    # -------------------------------------------------------------------------

    @property
    def is_authenticated(self) -> bool:
        """True once a token has been obtained or registered."""
        return self._session is not None

    @property
    def username(self) -> str | None:
        return self._session.username if self._session else None

    @property
    def token(self) -> str | None:
        return self._session.token if self._session else None

    @property
    def auth_type(self) -> AuthType | None:
        return self._session.auth_type if self._session else None

    def auth_headers(self) -> dict[str, str]:
        """Headers needed to authorise a request.

        Returns:
            ``{"Authorization": "GoogleLogin auth=<token>"}`` after a
            ClientLogin, ``{"Authorization": "AuthSub token=<token>"}`` after
            ``register_token``, or ``{}`` when unauthenticated.
        """
        if self._session is None:
            return {}
        return {"Authorization": self._session.authorization}

    @property
    def auth(self) -> AuthSubAuth:
        """A ``requests`` auth hook bound to this client."""
        return AuthSubAuth(self)

    def __repr__(self) -> str:
        state = f"user={self.username!r}" if self.is_authenticated else "unauthenticated"
        return f"AuthSubClient(url={self.config.url!r}, service={self.config.service!r}, {state})"


__all__ = [
    "AuthSubClient",
    "AuthSubAuth",
    "CLIENT_LOGIN_PATH",
    "DISPLAY_UNLOCK_CAPTCHA_URL",
]
