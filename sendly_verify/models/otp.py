"""Pydantic models for the /send-otp and /verify-otp JSON envelopes."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

VERIFIED_STATUS = "verified"


class RequestBody(BaseModel):
    """Request fields are strings; a JSON null reads as empty."""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class SendOTPRequest(RequestBody):
    """Body of POST /send-otp."""

    phone: str = ""


class VerifyOTPRequest(RequestBody):
    """Body of POST /verify-otp."""

    model_config = ConfigDict(populate_by_name=True)

    verification_id: str = Field(default="", alias="verificationId")
    code: str = ""


class SendOTPResponse(BaseModel):
    """Response of POST /send-otp.

    verificationId is always serialized (empty on failure); error only when set.
    """

    model_config = ConfigDict(populate_by_name=True)

    verification_id: str = Field(default="", alias="verificationId")
    success: bool
    error: str | None = None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class VerifyOTPResponse(BaseModel):
    """Response of POST /verify-otp; unset optional fields are omitted."""

    success: bool
    status: str | None = None
    error: str | None = None
    message: str | None = None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
