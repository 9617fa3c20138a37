"""Tests for app startup and shutdown wiring."""

from fastapi.testclient import TestClient

from sendly_verify.core.app_factory import create_app
from sendly_verify.middleware.error_handlers import general_exception_handler, service_exception_handler
from sendly_verify.exceptions import VerifyServiceException
from sendly_verify.services.sendly_service import SendlyClient
from sendly_verify.views import PageRenderer


def test_startup_builds_sendly_client_and_pages(mock_settings):
    """Test the lifespan creates the real provider and bundled pages."""
    app = create_app(settings=mock_settings)

    with TestClient(app) as client:
        assert isinstance(app.state.verification_provider, SendlyClient)
        assert isinstance(app.state.page_source, PageRenderer)
        assert not app.state.http_client.is_closed

        response = client.get("/")
        assert response.status_code == 200
        assert "/send-otp" in response.text

        http_client = app.state.http_client

    assert http_client.is_closed
    assert app.state.verification_provider is None


def test_startup_keeps_injected_provider(mock_settings, mock_provider, pages):
    """Test an injected provider is not replaced or closed."""
    app = create_app(settings=mock_settings, provider=mock_provider, page_source=pages)

    with TestClient(app):
        assert app.state.verification_provider is mock_provider

    assert app.state.verification_provider is mock_provider


def test_exception_handlers_registered(app):
    assert app.exception_handlers[VerifyServiceException] is service_exception_handler
    assert app.exception_handlers[Exception] is general_exception_handler
