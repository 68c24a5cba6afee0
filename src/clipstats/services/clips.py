"""Clip ingestion: turn a submitted URL into a stored Clip."""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from clipstats.core.store import ClipStore
from clipstats.models.clip import Clip, Platform
from clipstats.services.extractor import extract_video_id

logger = logging.getLogger(__name__)


def create_clip(store: ClipStore, clipper: str, platform: str | Platform, url: str) -> Clip:
    """Build a clip with its extracted identifier and append it to the store."""
    clipper = clipper.strip()
    if not clipper:
        raise ValueError("clipper must not be empty")

    tag = platform.value if isinstance(platform, Platform) else platform.strip().lower()
    video_id = extract_video_id(url, tag)
    if video_id is None:
        logger.warning(f"Could not extract a {tag} id from {url}; stats will be empty")

    clip = Clip(
        id=str(uuid4()),
        clipper=clipper,
        platform=tag,
        url=url.strip(),
        video_id=video_id,
        added_at=datetime.now(timezone.utc),
    )
    store.append_clip(clip)
    return clip
