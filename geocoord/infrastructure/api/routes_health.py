"""Health check endpoint."""

from fastapi import APIRouter

from geocoord.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Report service status and the active Earth model."""
    return {
        "status": "ok",
        "service": "geocoord - coordinate distance service",
        "earth_radius_m": settings.earth_radius_m,
        "vincenty_max_iterations": settings.vincenty_max_iterations,
    }
