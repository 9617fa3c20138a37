"""Verification server models"""

from sendly_verify.models.base_models import HealthResponse
from sendly_verify.models.otp import (
    VERIFIED_STATUS,
    SendOTPRequest,
    SendOTPResponse,
    VerifyOTPRequest,
    VerifyOTPResponse,
)
from sendly_verify.models.sendly import SendlyError, Verification, VerificationCheck

__all__ = [
    "HealthResponse",
    "SendOTPRequest",
    "SendOTPResponse",
    "SendlyError",
    "VERIFIED_STATUS",
    "Verification",
    "VerificationCheck",
    "VerifyOTPRequest",
    "VerifyOTPResponse",
]
