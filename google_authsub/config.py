"""Typed configuration for the AuthSub client.

Every option has a documented default, so ``AuthSubConfig()`` is a working
configuration for Google's hosted ClientLogin endpoint. Unknown keys are
rejected rather than silently carried along; per-login overrides such as a
different ``accountType`` are passed to ``AuthSubClient.login`` instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

VERSION = "0.1.0"
APP_NAME = f"google-authsub-{VERSION}"

DEFAULT_URL = "https://www.google.com"
DEFAULT_SERVICE = "xapi"
DEFAULT_ACCOUNT_TYPE = "HOSTED_OR_GOOGLE"
DEFAULT_TIMEOUT = 30.0


class AuthSubConfig(BaseModel):
    """Client configuration.

    Attributes:
        url: Base URL of the service to authenticate against. The login
            request goes to ``{url}/accounts/ClientLogin``.
        service: Name of the Google service access is requested for,
            e.g. "cl" for Calendar. Defaults to "xapi".
        source: Short string identifying the calling application, used by
            Google for logging. Defaults to ``APP_NAME``.
        account_type: Type of account to authenticate ("GOOGLE", "HOSTED"
            or "HOSTED_OR_GOOGLE"). Also accepted as ``accountType``.
        timeout: Seconds to wait for the login endpoint, handed to
            ``requests``. ``None`` waits forever.

    Example:
        >>> config = AuthSubConfig(service="cl", source="acme-calendar-1.0")
        >>> config.account_type
        'HOSTED_OR_GOOGLE'
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    url: str = Field(
        default=DEFAULT_URL,
        description="Base URL of the login service",
    )
    service: str = Field(
        default=DEFAULT_SERVICE,
        description="Google service name access is requested for",
    )
    source: str = Field(
        default=APP_NAME,
        description="Application identifier sent as the 'source' field",
    )
    account_type: str = Field(
        default=DEFAULT_ACCOUNT_TYPE,
        alias="accountType",
        description="Value of the 'accountType' field",
    )
    timeout: float | None = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="HTTP timeout in seconds for the login request",
    )

    @field_validator("url", "service", "source", "account_type", mode="before")
    @classmethod
    def _default_when_empty(cls, value: Any, info: ValidationInfo) -> Any:
        # None or "" falls back to the field default
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")


__all__ = [
    "AuthSubConfig",
    "APP_NAME",
    "VERSION",
    "DEFAULT_URL",
    "DEFAULT_SERVICE",
    "DEFAULT_ACCOUNT_TYPE",
    "DEFAULT_TIMEOUT",
]
