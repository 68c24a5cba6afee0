"""
Stats service: read clips, fetch their metrics, aggregate by clipper.

Every call re-reads the clip store and refetches everything; nothing is
cached between passes, so concurrent passes share no state.

Usage:
    service = StatsService.from_settings(get_settings(), get_clip_store())
    ranking = await service.by_clipper()
"""

import logging

from clipstats.adapters.router import AdapterRouter
from clipstats.core.config import Settings
from clipstats.core.store import ClipStore
from clipstats.models.clip import AnnotatedClip, ClipperSummary
from clipstats.services.aggregator import aggregate
from clipstats.services.fetcher import PacedFetcher

logger = logging.getLogger(__name__)


class StatsService:
    def __init__(self, store: ClipStore, fetcher: PacedFetcher):
        self.store = store
        self.fetcher = fetcher

    @classmethod
    def from_settings(cls, settings: Settings, store: ClipStore) -> "StatsService":
        """Build a service whose adapters see the given settings."""
        router = AdapterRouter.from_settings(settings)
        return cls(store, PacedFetcher(router, delay=settings.fetch_delay_seconds))

    async def refresh(self) -> list[AnnotatedClip]:
        """Fresh stats for every clip, in ingestion order."""
        # ClipStoreError propagates: no clip list, no pass
        clips = self.store.list_clips()
        logger.info(f"Refreshing stats for {len(clips)} clips")
        return await self.fetcher.fetch_all(clips)

    async def by_clipper(self) -> list[ClipperSummary]:
        """Fresh stats aggregated per clipper, ranked by total views."""
        annotated = await self.refresh()
        summaries = aggregate(annotated)
        logger.info(f"Aggregated {len(annotated)} clips into {len(summaries)} clippers")
        return summaries
