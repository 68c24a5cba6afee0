"""Shared fixtures for clip stats tests."""

from datetime import datetime, timedelta, timezone

import pytest

from clipstats.adapters.base import BaseAdapter, FailureKind, FetchFailed, FetchResult, MetricsFetched
from clipstats.core.config import Settings
from clipstats.core.store import ClipStore
from clipstats.models.clip import Clip, MetricsSnapshot

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_clip(
    clipper: str,
    platform: str = "youtube",
    video_id: str | None = "v1",
    clip_id: str | None = None,
    url: str | None = None,
    offset: int = 0,
) -> Clip:
    """Build a clip without going through URL extraction."""
    return Clip(
        id=clip_id or f"{clipper}-{platform}-{video_id}-{offset}",
        clipper=clipper,
        platform=platform,
        url=url or f"https://example.com/{platform}/{video_id}",
        video_id=video_id,
        added_at=BASE_TIME + timedelta(minutes=offset),
    )


class FakeAdapter(BaseAdapter):
    """Adapter returning canned metrics per id; unknown ids are 'not found'."""

    platform_name = "fake"
    missing_credential_message = "Fake API key not configured"

    def __init__(self, settings: Settings, metrics: dict[str, MetricsSnapshot] | None = None, raises: dict | None = None):
        super().__init__(settings)
        self.metrics = metrics or {}
        self.raises = raises or {}
        self.calls: list[str] = []

    def credential(self) -> str | None:
        return "fake-key"

    async def _fetch(self, identifier: str, credential: str) -> FetchResult:
        self.calls.append(identifier)
        if identifier in self.raises:
            raise self.raises[identifier]
        if identifier not in self.metrics:
            return FetchFailed("Video not found", FailureKind.NOT_FOUND)
        return MetricsFetched(self.metrics[identifier])


@pytest.fixture
def settings(tmp_path):
    """Settings with no credentials and no pacing, isolated from the environment."""
    return Settings(
        _env_file=None,
        facebook_access_token=None,
        youtube_api_key=None,
        twitter_bearer_token=None,
        clips_file=tmp_path / "clips.json",
        fetch_delay_seconds=0,
        request_timeout_seconds=1.0,
    )


@pytest.fixture
def credentialed_settings(settings):
    """Settings with every platform credential present."""
    return settings.model_copy(update={
        "facebook_access_token": "fb-token",
        "youtube_api_key": "yt-key",
        "twitter_bearer_token": "x-bearer",
    })


@pytest.fixture
def store(tmp_path):
    """Empty clip store in a temp dir."""
    return ClipStore(tmp_path / "clips.json")
