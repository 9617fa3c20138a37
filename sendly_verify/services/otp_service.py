"""Send and verify OTPs through a verification provider.

Turns inbound request bodies into provider calls and provider results
into the JSON envelopes returned by /send-otp and /verify-otp.
"""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from sendly_verify.exceptions import BadRequestException, UpstreamFailure
from sendly_verify.logging_config import get_logger, log_with_context
from sendly_verify.models.otp import (
    VERIFIED_STATUS,
    SendOTPRequest,
    SendOTPResponse,
    VerifyOTPRequest,
    VerifyOTPResponse,
)
from sendly_verify.protocols import VerificationProvider

logger = get_logger(__name__)

VERIFIED_MESSAGE = "Phone number verified successfully!"
INVALID_CODE_ERROR = "Invalid verification code"

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def parse_request(model: type[RequestModel], body: bytes) -> RequestModel:
    """Decode a JSON request body into `model`.

    A literal `null` body decodes to a model with every field empty.

    Raises:
        BadRequestException: If the body is not a JSON object matching the model
    """
    if body.strip() == b"null":
        return model()
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise BadRequestException(
            "Invalid request body",
            details={"errors": e.error_count()},
        ) from e


async def send_otp(provider: VerificationProvider, request: SendOTPRequest) -> SendOTPResponse:
    """Start a verification for `request.phone`.

    Raises:
        BadRequestException: If phone is empty
        UpstreamFailure: If the provider call fails; message is prefixed for the client
    """
    if not request.phone:
        raise BadRequestException("Phone number is required")

    try:
        verification = await provider.send(request.phone)
    except UpstreamFailure as e:
        log_with_context(
            logger,
            "error",
            "Failed to send OTP",
            error=e.message,
            provider_status=e.provider_status,
            event_type="otp_send_failed",
        )
        raise UpstreamFailure(
            f"Failed to send OTP: {e.message}",
            provider_status=e.provider_status,
            details=e.details,
        ) from e

    log_with_context(
        logger,
        "info",
        "OTP sent",
        verification_id=verification.id,
        event_type="otp_sent",
    )
    return SendOTPResponse(verification_id=verification.id, success=True)


async def verify_otp(provider: VerificationProvider, request: VerifyOTPRequest) -> VerifyOTPResponse:
    """Check `request.code` for `request.verification_id`.

    A provider status other than "verified" is not an error: the response
    carries success=False with the status echoed back.

    Raises:
        BadRequestException: If verification id or code is empty
        UpstreamFailure: If the provider call fails; message is prefixed for the client
    """
    if not request.verification_id or not request.code:
        raise BadRequestException("Verification ID and code are required")

    try:
        result = await provider.check(request.verification_id, request.code)
    except UpstreamFailure as e:
        log_with_context(
            logger,
            "error",
            "Failed to verify OTP",
            verification_id=request.verification_id,
            error=e.message,
            provider_status=e.provider_status,
            event_type="otp_verify_failed",
        )
        raise UpstreamFailure(
            f"Failed to verify OTP: {e.message}",
            provider_status=e.provider_status,
            details=e.details,
        ) from e

    if result.status == VERIFIED_STATUS:
        log_with_context(
            logger,
            "info",
            "OTP verified",
            verification_id=request.verification_id,
            event_type="otp_verified",
        )
        return VerifyOTPResponse(success=True, status=result.status, message=VERIFIED_MESSAGE)

    log_with_context(
        logger,
        "info",
        "OTP rejected",
        verification_id=request.verification_id,
        status=result.status,
        event_type="otp_rejected",
    )
    return VerifyOTPResponse(success=False, status=result.status or None, error=INVALID_CODE_ERROR)
