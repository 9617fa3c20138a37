"""OTP API routes: send a code and verify it."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from sendly_verify.dependencies import get_verification_provider
from sendly_verify.exceptions import VerifyServiceException
from sendly_verify.logging_config import get_logger, log_with_context
from sendly_verify.models.otp import SendOTPRequest, SendOTPResponse, VerifyOTPRequest, VerifyOTPResponse
from sendly_verify.protocols import VerificationProvider
from sendly_verify.services import otp_service

logger = get_logger(__name__)
router = APIRouter()


def _log_rejection(request: Request, exc: VerifyServiceException) -> None:
    log_with_context(
        logger,
        "warning" if exc.status_code < 500 else "error",
        "OTP request failed",
        path=request.url.path,
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        event_type="otp_request_failed",
    )


@router.post(
    "/send-otp",
    summary="Send a one-time passcode",
    responses={
        200: {
            "description": "Code sent",
            "content": {"application/json": {"example": {"verificationId": "ver_123", "success": True}}},
        },
        400: {"description": "Malformed body or missing phone"},
        500: {"description": "Sendly API error"},
    },
)
async def send_otp(request: Request, provider: VerificationProvider = Depends(get_verification_provider)):
    """Text a verification code to `phone` and return the verification id.

    Body: `{"phone": "+15551234567"}`
    """
    try:
        payload = otp_service.parse_request(SendOTPRequest, await request.body())
        result = await otp_service.send_otp(provider, payload)
    except VerifyServiceException as e:
        _log_rejection(request, e)
        return JSONResponse(
            status_code=e.status_code,
            content=SendOTPResponse(success=False, error=e.message).to_json(),
        )

    return JSONResponse(content=result.to_json())


@router.post(
    "/verify-otp",
    summary="Verify a one-time passcode",
    responses={
        200: {
            "description": "Check completed; `success` tells whether the code matched",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "status": "verified",
                        "message": "Phone number verified successfully!",
                    }
                }
            },
        },
        400: {"description": "Malformed body or missing verification id/code"},
        500: {"description": "Sendly API error"},
    },
)
async def verify_otp(request: Request, provider: VerificationProvider = Depends(get_verification_provider)):
    """Check a code against a verification id.

    Body: `{"verificationId": "ver_123", "code": "123456"}`

    A wrong, expired or otherwise unverified code still returns 200,
    with `success: false` and the provider status.
    """
    try:
        payload = otp_service.parse_request(VerifyOTPRequest, await request.body())
        result = await otp_service.verify_otp(provider, payload)
    except VerifyServiceException as e:
        _log_rejection(request, e)
        return JSONResponse(
            status_code=e.status_code,
            content=VerifyOTPResponse(success=False, error=e.message).to_json(),
        )

    return JSONResponse(content=result.to_json())
