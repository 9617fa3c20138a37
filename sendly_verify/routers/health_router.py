"""Health endpoint."""

from fastapi import APIRouter

from sendly_verify import __version__
from sendly_verify.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint for container health checks.

    Does not call Sendly.
    """
    return HealthResponse(status="ok", version=__version__)
