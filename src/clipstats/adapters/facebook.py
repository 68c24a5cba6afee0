"""Facebook adapter using the Graph API."""

import logging
from typing import Any

import httpx

from clipstats.adapters.base import BaseAdapter, FailureKind, FetchFailed, FetchResult, MetricsFetched, to_count
from clipstats.core.config import Settings
from clipstats.models.clip import MetricsSnapshot

logger = logging.getLogger(__name__)

GRAPH_BASE_URL = "https://graph.facebook.com"
GRAPH_FIELDS = "engagement,likes.summary(true),comments.summary(true),shares"


def _graph_error(response: httpx.Response) -> str:
    """Graph API errors carry a message under ``error.message``."""
    try:
        message = response.json().get("error", {}).get("message")
    except ValueError:
        message = None
    return message or f"Facebook API returned HTTP {response.status_code}"


class FacebookAdapter(BaseAdapter):
    """
    Facebook video/post metrics via the Graph API.

    Field mapping:
    - engagement.count -> views
    - likes.summary.total_count -> likes
    - comments.summary.total_count -> comments
    - shares.count -> shares (absent on some post types)
    """

    platform_name = "facebook"
    missing_credential_message = "Facebook API token not configured"

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(settings)
        self._client = client

    def credential(self) -> str | None:
        return self._settings.facebook_access_token

    async def _fetch(self, identifier: str, credential: str) -> FetchResult:
        url = f"{GRAPH_BASE_URL}/{self._settings.facebook_graph_version}/{identifier}"
        params = {"fields": GRAPH_FIELDS, "access_token": credential}

        if self._client is not None:
            response = await self._client.get(url, params=params)
        else:
            async with httpx.AsyncClient(timeout=self._settings.request_timeout_seconds) as client:
                response = await client.get(url, params=params)

        if response.status_code == 404:
            return FetchFailed("Post not found", FailureKind.NOT_FOUND)
        if response.is_error:
            return FetchFailed(_graph_error(response), FailureKind.TRANSPORT)

        data = response.json()
        if not data or not isinstance(data, dict):
            return FetchFailed("Post not found", FailureKind.NOT_FOUND)
        return MetricsFetched(self._to_snapshot(data))

    @staticmethod
    def _to_snapshot(data: dict[str, Any]) -> MetricsSnapshot:
        def field(obj: Any, *path: str) -> Any:
            # Any level may be absent, null or not an object
            for key in path:
                if not isinstance(obj, dict):
                    return None
                obj = obj.get(key)
            return obj

        return MetricsSnapshot(
            views=to_count(field(data, "engagement", "count")),
            likes=to_count(field(data, "likes", "summary", "total_count")),
            comments=to_count(field(data, "comments", "summary", "total_count")),
            shares=to_count(field(data, "shares", "count")),
        )
