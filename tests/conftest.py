"""Pytest configuration and shared fixtures."""

import os
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

# main.py builds the app at import time; give it a key before anything imports it
os.environ.setdefault("SENDLY_API_KEY", "test-sendly-key")

from sendly_verify.config import Settings, reset_settings  # noqa: E402
from sendly_verify.core.app_factory import create_app  # noqa: E402
from sendly_verify.models.sendly import Verification, VerificationCheck  # noqa: E402
from sendly_verify.services.sendly_service import SendlyClient  # noqa: E402
from sendly_verify.views import PageRenderer  # noqa: E402

INDEX_HTML = "<!DOCTYPE html><html><body><h1>Verify your phone</h1></body></html>"
VERIFY_HTML = "<!DOCTYPE html><html><body><h1>Enter your code</h1></body></html>"


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop the cached Settings singleton between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def mock_settings():
    """Settings instance with test values, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        sendly_api_key="test-sendly-key",
        sendly_base_url="https://sendly.test/api/v1",
        sendly_timeout_seconds=5.0,
        port=8080,
    )


@pytest.fixture
def mock_provider():
    """Mock Sendly client; by default sends succeed and checks verify."""
    provider = AsyncMock(spec=SendlyClient)
    provider.send.return_value = Verification(id="ver_123", status="pending", phone="+15551234567")
    provider.check.return_value = VerificationCheck(id="ver_123", status="verified")
    return provider


@pytest.fixture
def pages():
    """In-memory page source with both pages."""
    return PageRenderer.from_mapping({"index.html": INDEX_HTML, "verify.html": VERIFY_HTML})


@pytest.fixture
def app(mock_settings, mock_provider, pages):
    """App wired to the mock provider and in-memory pages."""
    return create_app(settings=mock_settings, provider=mock_provider, page_source=pages)


@pytest.fixture
def test_client(app):
    """FastAPI test client with lifespan context."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def make_sendly_client(mock_settings):
    """Build a SendlyClient whose HTTP traffic goes to `handler`."""
    def factory(handler):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return SendlyClient.from_settings(http_client, mock_settings)

    return factory
