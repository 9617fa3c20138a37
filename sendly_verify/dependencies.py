"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from sendly_verify.protocols import PageSource, VerificationProvider


async def get_verification_provider(request: Request) -> VerificationProvider:
    """
    Get the verification provider from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared provider client, created once at startup.

    Raises:
        RuntimeError: If the provider is not initialized.
    """
    provider: VerificationProvider | None = getattr(request.app.state, "verification_provider", None)

    if provider is None:
        raise RuntimeError("Verification provider not initialized. This should never happen.")

    return provider


async def get_page_source(request: Request) -> PageSource:
    """
    Get the page source from app state.

    Raises:
        RuntimeError: If the page source is not initialized.
    """
    pages: PageSource | None = getattr(request.app.state, "page_source", None)

    if pages is None:
        raise RuntimeError("Page source not initialized.")

    return pages
