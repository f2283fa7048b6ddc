"""Health Probe — liveness endpoint for the hosting platform.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - Never calls the model provider
"""

from fastapi import APIRouter, status

from firmbox import __version__

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "firmbox-api",
        "version": __version__,
    }
