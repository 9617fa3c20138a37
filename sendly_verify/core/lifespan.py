"""Application lifespan management."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from sendly_verify import __version__
from sendly_verify.config import Settings, get_settings
from sendly_verify.logging_config import get_logger, log_with_context
from sendly_verify.middleware.logging_middleware import redact_sensitive_data
from sendly_verify.services.sendly_service import SendlyClient
from sendly_verify.views import PageRenderer

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log outbound requests with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log provider responses with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Build the connection-pooled client shared by all provider calls."""
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.sendly_timeout_seconds),
        limits=httpx.Limits(
            max_keepalive_connections=10,
            max_connections=50,
            keepalive_expiry=30.0,
        ),
        headers={"User-Agent": f"sendly-verify/{__version__}"},
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Creates the provider client and page source unless create_app()
    was handed ready-made ones.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    app.state.settings = settings

    log_with_context(
        logger,
        "info",
        "Starting Sendly verification server",
        version=__version__,
        sendly_base_url=settings.sendly_base_url,
        event_type="app_startup",
    )

    client: httpx.AsyncClient | None = None
    if getattr(app.state, "verification_provider", None) is None:
        client = create_http_client(settings)
        app.state.http_client = client
        app.state.verification_provider = SendlyClient.from_settings(client, settings)
        log_with_context(
            logger,
            "info",
            "Sendly client initialized",
            event_type="provider_ready",
        )

    if getattr(app.state, "page_source", None) is None:
        app.state.page_source = PageRenderer.from_directory(settings.templates_dir)

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Sendly verification server",
            event_type="app_shutdown",
        )
        if client is not None:
            await client.aclose()
            app.state.http_client = None
            app.state.verification_provider = None
            log_with_context(
                logger,
                "info",
                "HTTP client closed",
                event_type="http_client_cleanup",
            )
