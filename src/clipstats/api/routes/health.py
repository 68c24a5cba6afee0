"""Health check endpoints."""

from fastapi import APIRouter

from clipstats.core.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check with environment info."""
    settings = get_settings()

    return {
        "status": "ok",
        "service": "clipstats",
        "environment": settings.app_env,
        "is_production": settings.is_production,
        "platforms": settings.configured_platforms(),
    }
