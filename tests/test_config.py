"""Tests for AuthSubConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from google_authsub.config import APP_NAME, AuthSubConfig


class TestAuthSubConfig:
    """Tests for configuration defaults and validation."""

    def test_defaults(self):
        """Test every option has its documented default."""
        config = AuthSubConfig()

        assert config.url == "https://www.google.com"
        assert config.service == "xapi"
        assert config.source == APP_NAME
        assert config.account_type == "HOSTED_OR_GOOGLE"
        assert config.timeout == 30.0

    def test_account_type_alias(self):
        """Test the wire name accountType is accepted."""
        assert AuthSubConfig(accountType="GOOGLE").account_type == "GOOGLE"
        assert AuthSubConfig(account_type="HOSTED").account_type == "HOSTED"

    def test_empty_values_fall_back_to_defaults(self):
        """Test empty strings behave like missing options."""
        config = AuthSubConfig(url="", service="", source=None)

        assert config.url == "https://www.google.com"
        assert config.service == "xapi"
        assert config.source == APP_NAME

    def test_trailing_slash_stripped(self):
        """Test the base URL is normalised."""
        assert AuthSubConfig(url="https://example.com/").url == "https://example.com"

    def test_unknown_keys_rejected(self):
        """Test unknown options are refused."""
        with pytest.raises(ValidationError):
            AuthSubConfig(password="secret")

    def test_invalid_timeout(self):
        """Test non-positive timeouts are refused."""
        with pytest.raises(ValidationError):
            AuthSubConfig(timeout=0)

    def test_frozen(self):
        """Test configuration cannot change after construction."""
        config = AuthSubConfig()
        with pytest.raises(ValidationError):
            config.service = "cl"
