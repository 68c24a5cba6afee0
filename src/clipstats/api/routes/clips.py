"""Clip management endpoints."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from clipstats.core.store import ClipStoreError, get_clip_store
from clipstats.models.clip import Platform
from clipstats.services.clips import create_clip

router = APIRouter()


class AddClipRequest(BaseModel):
    clipper: str = Field(min_length=1)
    platform: Platform
    url: str = Field(min_length=1)


@router.get("")
async def list_clips() -> list[dict]:
    """List all tracked clips in ingestion order."""
    try:
        return [clip.to_dict() for clip in get_clip_store().list_clips()]
    except ClipStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("")
async def add_clip(req: AddClipRequest) -> dict:
    """Add a clip; its platform id is extracted from the URL."""
    try:
        clip = create_clip(get_clip_store(), req.clipper, req.platform, req.url)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ClipStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return clip.to_dict()


@router.delete("/{clip_id}")
async def delete_clip(clip_id: str) -> dict:
    """Remove a clip."""
    try:
        removed = get_clip_store().remove_clip(clip_id)
    except ClipStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not removed:
        raise HTTPException(status_code=404, detail=f"Clip {clip_id} not found")
    return {"success": True}
