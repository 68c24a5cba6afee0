"""Sequential, paced metrics fetching for a batch of clips."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from clipstats.adapters.router import AdapterRouter
from clipstats.models.clip import AnnotatedClip, Clip, MetricsSnapshot

logger = logging.getLogger(__name__)


class PacedFetcher:
    """
    Fetch metrics one clip at a time, pausing between clips.

    No parallel fan-out: the outbound request rate is bounded by the pause.
    One clip's failure is recorded in its own snapshot and never stops the
    batch. Output order matches input order.
    """

    def __init__(
        self,
        router: AdapterRouter,
        delay: float = 0.1,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.router = router
        self.delay = delay
        self._sleep = sleep

    async def fetch_one(self, clip: Clip) -> AnnotatedClip:
        adapter = self.router.route_clip(clip)
        if adapter is None:
            return AnnotatedClip(clip=clip, stats=MetricsSnapshot.empty())

        result = await adapter.fetch(clip.video_id)
        return AnnotatedClip(clip=clip, stats=result.to_snapshot())

    async def fetch_all(self, clips: Sequence[Clip]) -> list[AnnotatedClip]:
        annotated: list[AnnotatedClip] = []
        failed = 0

        for i, clip in enumerate(clips):
            item = await self.fetch_one(clip)
            annotated.append(item)
            if item.stats.error is not None:
                failed += 1
            logger.debug(f"  [{i+1}/{len(clips)}] {clip.platform} {clip.video_id}: {item.stats.to_dict()}")

            # Small delay between requests to stay under rate limits
            if i < len(clips) - 1 and self.delay > 0:
                await self._sleep(self.delay)

        logger.info(f"Fetched stats for {len(annotated)} clips ({failed} failed)")
        return annotated
