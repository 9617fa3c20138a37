"""Protocol definitions for dependency injection."""

from typing import Protocol

from sendly_verify.models.sendly import Verification, VerificationCheck


class VerificationProvider(Protocol):
    """Interface of the external SMS/OTP verification provider.

    SendlyClient is the production implementation; tests inject fakes
    through FastAPI dependency overrides.
    """

    async def send(self, phone: str) -> Verification:
        """Start a verification by texting a code to `phone`.

        Raises:
            UpstreamFailure: If the provider call errors
        """
        ...

    async def check(self, verification_id: str, code: str) -> VerificationCheck:
        """Check `code` against the verification `verification_id`.

        Raises:
            BadRequestException: If the id cannot be sent to the provider
            UpstreamFailure: If the provider call errors
        """
        ...


class PageSource(Protocol):
    """Fetch an HTML page by name."""

    def render(self, name: str) -> str:
        """Return the page body.

        Raises:
            StaticAssetMissing: If no page has that name
        """
        ...
