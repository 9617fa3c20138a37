"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from sendly_verify import __version__
from sendly_verify.config import Settings
from sendly_verify.core.lifespan import lifespan
from sendly_verify.core.middleware import setup_middleware
from sendly_verify.middleware.error_handlers import register_error_handlers
from sendly_verify.protocols import PageSource, VerificationProvider
from sendly_verify.routers import health_router, otp_router, view_router


def create_app(
    settings: Settings | None = None,
    provider: VerificationProvider | None = None,
    page_source: PageSource | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Settings are read lazily at startup, so the app can be imported
    without SENDLY_API_KEY set.

    Args:
        settings: Settings to use instead of the environment
        provider: Verification provider to use instead of the Sendly client
        page_source: Page source to use instead of the bundled templates

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Sendly Verify",
        description="""
        Send and verify one-time passcodes over SMS with the Sendly Verify API.

        - `POST /send-otp` - text a code to a phone number
        - `POST /verify-otp` - check a code against its verification id
        - `GET /` and `GET /verify` - browser pages for both steps
        """,
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.verification_provider = provider
    app.state.page_source = page_source

    setup_middleware(app)
    register_error_handlers(app)

    app.include_router(view_router.router, tags=["views"])
    app.include_router(otp_router.router, tags=["otp"])
    app.include_router(health_router.router, tags=["health"])

    return app
