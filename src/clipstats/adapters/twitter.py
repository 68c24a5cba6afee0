"""X (Twitter) adapter using the v2 tweet lookup endpoint."""

import logging
from typing import Any

import tweepy
from tweepy.asynchronous import AsyncClient

from clipstats.adapters.base import BaseAdapter, FailureKind, FetchFailed, FetchResult, MetricsFetched, to_count
from clipstats.core.config import Settings
from clipstats.models.clip import MetricsSnapshot

logger = logging.getLogger(__name__)


class TwitterAdapter(BaseAdapter):
    """
    X (Twitter) public metrics for a single tweet.

    impression_count -> views, like_count -> likes,
    reply_count -> comments, retweet_count -> shares.
    """

    platform_name = "twitter"
    missing_credential_message = "Twitter API token not configured"

    def __init__(self, settings: Settings, client: Any = None) -> None:
        super().__init__(settings)
        self._client = client
        self._client_token: str | None = None

    def credential(self) -> str | None:
        return self._settings.twitter_bearer_token

    def _get_client(self, bearer_token: str) -> Any:
        if self._client is None or (self._client_token is not None and self._client_token != bearer_token):
            # wait_on_rate_limit=False to fail fast instead of waiting 15 min
            self._client = AsyncClient(bearer_token=bearer_token, wait_on_rate_limit=False)
            self._client_token = bearer_token
        return self._client

    async def _fetch(self, identifier: str, credential: str) -> FetchResult:
        client = self._get_client(credential)
        try:
            response = await client.get_tweet(identifier, tweet_fields=["public_metrics"])
        except tweepy.errors.NotFound:
            return FetchFailed("Tweet not found", FailureKind.NOT_FOUND)
        except tweepy.errors.TweepyException as e:
            return FetchFailed(str(e), FailureKind.TRANSPORT)

        tweet = getattr(response, "data", None)
        if tweet is None:
            return FetchFailed("Tweet not found", FailureKind.NOT_FOUND)

        metrics = getattr(tweet, "public_metrics", None) or {}
        return MetricsFetched(
            MetricsSnapshot(
                views=to_count(metrics.get("impression_count")),
                likes=to_count(metrics.get("like_count")),
                comments=to_count(metrics.get("reply_count")),
                shares=to_count(metrics.get("retweet_count")),
            )
        )
