"""Platform adapters for fetching clip metrics."""

from clipstats.adapters.base import BaseAdapter, FailureKind, FetchFailed, FetchResult, MetricsFetched
from clipstats.adapters.facebook import FacebookAdapter
from clipstats.adapters.router import AdapterRouter
from clipstats.adapters.twitter import TwitterAdapter
from clipstats.adapters.youtube import YouTubeAdapter

__all__ = [
    "AdapterRouter",
    "BaseAdapter",
    "FacebookAdapter",
    "FailureKind",
    "FetchFailed",
    "FetchResult",
    "MetricsFetched",
    "TwitterAdapter",
    "YouTubeAdapter",
]
