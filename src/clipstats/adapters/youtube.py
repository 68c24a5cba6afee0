"""YouTube adapter using Data API v3."""

import asyncio
import logging
from typing import Any

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from clipstats.adapters.base import BaseAdapter, FailureKind, FetchFailed, FetchResult, MetricsFetched, to_count
from clipstats.core.config import Settings
from clipstats.models.clip import MetricsSnapshot

logger = logging.getLogger(__name__)


class YouTubeAdapter(BaseAdapter):
    """
    YouTube video statistics via Data API v3.

    videos.list with part=statistics costs 1 quota unit per call.
    The API exposes no share count, so shares is always 0.
    """

    platform_name = "youtube"
    missing_credential_message = "YouTube API key not configured"

    def __init__(self, settings: Settings, service: Any = None) -> None:
        super().__init__(settings)
        self._service = service
        self._service_key: str | None = None

    def credential(self) -> str | None:
        return self._settings.youtube_api_key

    def _get_service(self, api_key: str) -> Any:
        # Rebuild if the key rotated since the last call
        if self._service is None or (self._service_key is not None and self._service_key != api_key):
            self._service = build("youtube", "v3", developerKey=api_key, cache_discovery=False)
            self._service_key = api_key
        return self._service

    async def _fetch(self, identifier: str, credential: str) -> FetchResult:
        youtube = self._get_service(credential)
        request = youtube.videos().list(part="statistics", id=identifier)

        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(None, request.execute)
        except HttpError as e:
            if e.resp.status == 404:
                return FetchFailed("Video not found", FailureKind.NOT_FOUND)
            return FetchFailed(str(e), FailureKind.TRANSPORT)

        items = response.get("items") or []
        if not items:
            return FetchFailed("Video not found", FailureKind.NOT_FOUND)

        stats = items[0].get("statistics", {})
        return MetricsFetched(
            MetricsSnapshot(
                views=to_count(stats.get("viewCount")),
                likes=to_count(stats.get("likeCount")),
                comments=to_count(stats.get("commentCount")),
                shares=0,
            )
        )
