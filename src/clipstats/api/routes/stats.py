"""Stats endpoints. Each request runs a full, fresh fetch pass."""

import logging

from fastapi import APIRouter, HTTPException

from clipstats.core.config import get_settings
from clipstats.core.store import ClipStoreError, get_clip_store
from clipstats.services.stats import StatsService

logger = logging.getLogger(__name__)

router = APIRouter()


def _stats_service() -> StatsService:
    # Built per request so credential changes apply on the next pass
    return StatsService.from_settings(get_settings(), get_clip_store())


@router.get("/refresh")
async def refresh_stats() -> list[dict]:
    """Fresh stats for every clip."""
    try:
        annotated = await _stats_service().refresh()
    except ClipStoreError as e:
        logger.error(f"Stats refresh failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return [item.to_dict() for item in annotated]


@router.get("/by-clipper")
async def stats_by_clipper() -> list[dict]:
    """Per-clipper totals ranked by views."""
    try:
        summaries = await _stats_service().by_clipper()
    except ClipStoreError as e:
        logger.error(f"Stats aggregation failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return [summary.to_dict() for summary in summaries]
