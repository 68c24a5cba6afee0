"""Business logic services."""

from clipstats.services.aggregator import aggregate
from clipstats.services.clips import create_clip
from clipstats.services.extractor import extract_video_id
from clipstats.services.fetcher import PacedFetcher
from clipstats.services.stats import StatsService

__all__ = [
    "PacedFetcher",
    "StatsService",
    "aggregate",
    "create_clip",
    "extract_video_id",
]
