"""Pydantic models for Sendly Verify API payloads."""

from pydantic import BaseModel, ConfigDict, Field


class Verification(BaseModel):
    """Verification created by POST /verify."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(min_length=1)
    status: str = "pending"
    phone: str | None = None
    expires_at: str | None = Field(default=None, alias="expiresAt")
    created_at: str | None = Field(default=None, alias="createdAt")


class VerificationCheck(BaseModel):
    """Result of POST /verify/{id}/check."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    status: str


class SendlyError(BaseModel):
    """Error body returned by the Sendly API on non-2xx responses."""

    model_config = ConfigDict(extra="ignore")

    error: str | None = None
    message: str | None = None

    @property
    def text(self) -> str | None:
        return self.message or self.error
