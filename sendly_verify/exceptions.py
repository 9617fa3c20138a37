"""Custom exceptions for the verification server with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error logging."""

    # Generic errors
    SERVICE_ERROR = "SERVICE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Request errors
    BAD_REQUEST = "BAD_REQUEST"

    # Provider errors
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"

    # Page errors
    STATIC_ASSET_MISSING = "STATIC_ASSET_MISSING"


class VerifyServiceException(Exception):
    """Base exception for verification server errors with HTTP status code support.

    All custom exceptions inherit from this class so the routers and
    exception handlers can map them to a response uniformly.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SERVICE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize service exception.

        Args:
            message: Human-readable error message, safe to return to clients
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context for logs
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class BadRequestException(VerifyServiceException):
    """Malformed JSON body or a missing required field."""

    def __init__(self, message: str = "Invalid request body", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.BAD_REQUEST,
            status_code=400,
            details=details,
        )


class UpstreamFailure(VerifyServiceException):
    """The Sendly API call errored (transport, HTTP status or payload)."""

    def __init__(
        self,
        message: str,
        provider_status: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.provider_status = provider_status
        super().__init__(
            message,
            code=ErrorCode.UPSTREAM_FAILURE,
            status_code=500,
            details=details,
        )


class StaticAssetMissing(VerifyServiceException):
    """A requested HTML page is not in the page source."""

    def __init__(self, page_name: str, details: dict[str, Any] | None = None):
        self.page_name = page_name
        super().__init__(
            f"Page not found: {page_name}",
            code=ErrorCode.STATIC_ASSET_MISSING,
            status_code=500,
            details={"page": page_name, **(details or {})},
        )

