"""Pytest configuration and fixtures for google-authsub tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from google_authsub.auth.client import AuthSubClient


@pytest.fixture
def make_http_response():
    """Factory for fake ``requests.Response`` objects."""

    def _make(status_code: int = 200, text: str = "") -> MagicMock:
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.text = text
        return response

    return _make


@pytest.fixture
def mock_http(make_http_response) -> MagicMock:
    """Mocked ``requests.Session`` answering with a successful login."""
    session = MagicMock(spec=requests.Session)
    session.post.return_value = make_http_response(
        200, "SID=sid-value\nLSID=lsid-value\nAuth=XYZ123\n"
    )
    return session


@pytest.fixture
def client(mock_http: MagicMock) -> AuthSubClient:
    """Client wired to the mocked session."""
    return AuthSubClient(service="cl", source="acme-test-1.0", session=mock_http)


@pytest.fixture
def captcha_body() -> str:
    return "Error=CaptchaRequired\nCaptchaToken=ABC\nCaptchaUrl=http://x\n"
