"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from sendly_verify.exceptions import ErrorCode, StaticAssetMissing, VerifyServiceException
from sendly_verify.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

PAGE_ERROR_TEXT = "Error loading page"
NOT_FOUND_TEXT = "404 page not found"
METHOD_NOT_ALLOWED_TEXT = "Method not allowed"


async def service_exception_handler(request: Request, exc: VerifyServiceException) -> Response:
    """Handle service exceptions that escape a route.

    Missing pages become a plain-text 500; everything else gets the
    `{"success": false, "error": ...}` envelope.
    """
    log_with_context(
        logger,
        "warning" if exc.status_code < 500 else "error",
        "Service error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="service_error",
    )

    if isinstance(exc, StaticAssetMissing):
        return PlainTextResponse(PAGE_ERROR_TEXT, status_code=exc.status_code)

    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Return routing errors (404, 405) as plain text."""
    log_with_context(
        logger,
        "info",
        "Routing error",
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
        event_type="routing_error",
    )

    if exc.status_code == 404:
        text = NOT_FOUND_TEXT
    elif exc.status_code == 405:
        text = METHOD_NOT_ALLOWED_TEXT
    else:
        text = str(exc.detail)

    return PlainTextResponse(text, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error_code=ErrorCode.INTERNAL_ERROR.value,
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(VerifyServiceException, service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
