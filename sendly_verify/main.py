"""Main FastAPI application entry point."""

import os
import sys

import uvicorn
from dotenv import load_dotenv
from pydantic import ValidationError

from sendly_verify.config import BASE_DIR, get_settings
from sendly_verify.core.app_factory import create_app
from sendly_verify.logging_config import get_logger, log_with_context, setup_logging

# Load environment variables from .env file
env_loaded = load_dotenv(BASE_DIR / ".env")

# Configure structured logging (JSON to file + console)
setup_logging(os.getenv("LOG_LEVEL", "INFO"))
logger = get_logger(__name__)

if not env_loaded:
    logger.info("No .env file found")

app = create_app()


def run() -> None:
    """Validate configuration and serve the app; exit 1 on fatal errors."""
    try:
        settings = get_settings()
    except ValidationError as e:
        log_with_context(
            logger,
            "critical",
            "SENDLY_API_KEY environment variable is required"
            if any(err["loc"] == ("sendly_api_key",) for err in e.errors())
            else "Invalid configuration",
            errors=e.error_count(),
            event_type="config_invalid",
        )
        sys.exit(1)

    log_with_context(
        logger,
        "info",
        f"Server starting on http://localhost:{settings.port}",
        host=settings.host,
        port=settings.port,
        event_type="server_starting",
    )

    # uvicorn reports bind errors itself and exits with its own status code
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    except SystemExit as e:
        if e.code in (0, None):
            raise
        log_with_context(
            logger,
            "critical",
            "Server failed to start",
            host=settings.host,
            port=settings.port,
            uvicorn_exit_code=e.code,
            event_type="server_start_failed",
        )
        sys.exit(1)


if __name__ == "__main__":
    run()
