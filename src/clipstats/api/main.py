"""FastAPI application."""

import logging

from fastapi import FastAPI

from clipstats.api.routes import clips, health, stats
from clipstats.core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Clip Stats",
    description="Engagement stats for clips across Facebook, YouTube and X, ranked by clipper",
    version="0.1.0",
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(clips.router, prefix="/api/clips", tags=["Clips"])
app.include_router(stats.router, prefix="/api/stats", tags=["Stats"])

logger.info(f"Platforms configured: {settings.configured_platforms()}")
