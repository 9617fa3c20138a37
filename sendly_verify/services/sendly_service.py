"""Sendly Verify API client."""

from urllib.parse import quote

import httpx
from pydantic import ValidationError

from sendly_verify.config import Settings
from sendly_verify.exceptions import BadRequestException, UpstreamFailure
from sendly_verify.logging_config import get_logger, log_with_context
from sendly_verify.middleware.logging_middleware import mask_phone
from sendly_verify.models.sendly import SendlyError, Verification, VerificationCheck

logger = get_logger(__name__)


class SendlyClient:
    """Calls the Sendly Verify endpoints over a shared HTTP client.

    Instances hold no per-request state and are safe to share across
    concurrent requests.
    """

    def __init__(self, client: httpx.AsyncClient, api_key: str, base_url: str, timeout: float = 30.0):
        self._client = client
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @classmethod
    def from_settings(cls, client: httpx.AsyncClient, settings: Settings) -> "SendlyClient":
        return cls(
            client,
            api_key=settings.sendly_api_key,
            base_url=settings.sendly_base_url,
            timeout=settings.sendly_timeout_seconds,
        )

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

    async def send(self, phone: str) -> Verification:
        """Send a verification code to `phone`.

        Args:
            phone: Destination phone number, ideally E.164

        Returns:
            The created Verification

        Raises:
            UpstreamFailure: On transport error, non-2xx status or unexpected payload
        """
        log_with_context(
            logger,
            "info",
            "Sending verification",
            phone=mask_phone(phone),
            event_type="sendly_verify_send",
        )
        data = await self._post("/verify", {"to": phone})
        try:
            return Verification.model_validate(data)
        except ValidationError as e:
            raise UpstreamFailure(
                f"unexpected response from Sendly: {e.error_count()} validation error(s)",
                details={"operation": "send"},
            ) from e

    async def check(self, verification_id: str, code: str) -> VerificationCheck:
        """Check `code` for the verification `verification_id`.

        Returns:
            VerificationCheck whose status is "verified" when the code matched

        Raises:
            BadRequestException: If the id cannot be a single URL path segment
            UpstreamFailure: On transport error, non-2xx status or unexpected payload
        """
        if verification_id in {".", ".."}:
            raise BadRequestException("Invalid verification ID")

        log_with_context(
            logger,
            "info",
            "Checking verification",
            verification_id=verification_id,
            event_type="sendly_verify_check",
        )
        data = await self._post(f"/verify/{quote(verification_id, safe='')}/check", {"code": code})
        try:
            return VerificationCheck.model_validate(data)
        except ValidationError as e:
            raise UpstreamFailure(
                f"unexpected response from Sendly: {e.error_count()} validation error(s)",
                details={"operation": "check", "verification_id": verification_id},
            ) from e

    async def _post(self, path: str, payload: dict[str, str]) -> object:
        url = f"{self._base_url}{path}"
        try:
            response = await self._client.post(url, json=payload, headers=self._headers, timeout=self._timeout)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            raise UpstreamFailure(
                f"Sendly API error (HTTP {e.response.status_code}): {message}",
                provider_status=e.response.status_code,
                details={"path": path, "api_response": e.response.text},
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamFailure(
                f"Sendly API request failed: {str(e) or type(e).__name__}",
                details={"path": path, "error_type": "network_error"},
            ) from e
        except ValueError as e:
            # response.json() on a non-JSON body
            raise UpstreamFailure(
                "Sendly API returned an invalid JSON body",
                details={"path": path, "error_type": "parsing_error"},
            ) from e


def _error_message(response: httpx.Response) -> str:
    """Pull the human-readable message out of a Sendly error response."""
    try:
        error = SendlyError.model_validate(response.json())
    except (ValueError, ValidationError):
        return response.text or response.reason_phrase
    return error.text or response.text or response.reason_phrase
