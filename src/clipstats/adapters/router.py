"""Pick the metrics adapter for a clip."""

import logging
from collections.abc import Mapping

from clipstats.adapters.base import BaseAdapter
from clipstats.adapters.facebook import FacebookAdapter
from clipstats.adapters.twitter import TwitterAdapter
from clipstats.adapters.youtube import YouTubeAdapter
from clipstats.core.config import Settings
from clipstats.models.clip import Clip, Platform

logger = logging.getLogger(__name__)


class AdapterRouter:
    """Maps platform tags to adapters. Unknown platforms route to None (skip)."""

    def __init__(self, adapters: Mapping[Platform, BaseAdapter]):
        self._adapters = dict(adapters)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AdapterRouter":
        return cls({
            Platform.FACEBOOK: FacebookAdapter(settings),
            Platform.YOUTUBE: YouTubeAdapter(settings),
            Platform.TWITTER: TwitterAdapter(settings),
        })

    def route(self, platform: str | Platform) -> BaseAdapter | None:
        resolved = Platform.parse(platform)
        if resolved is None:
            return None
        return self._adapters.get(resolved)

    def route_clip(self, clip: Clip) -> BaseAdapter | None:
        """Adapter for a clip, or None when there is nothing to fetch."""
        if not clip.video_id:
            return None
        adapter = self.route(clip.platform)
        if adapter is None:
            logger.debug(f"No adapter for platform {clip.platform!r}; clip {clip.id} skipped")
        return adapter
