"""Clip and metrics models shared by the fetch and aggregation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class Platform(str, Enum):
    """Supported platforms."""
    FACEBOOK = "facebook"
    YOUTUBE = "youtube"
    TWITTER = "twitter"

    @classmethod
    def parse(cls, value: "str | Platform") -> "Platform | None":
        """Return the platform for a tag, or None if it is not supported."""
        if isinstance(value, Platform):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Clip:
    """One posted clip, tracked by URL. Immutable once ingested."""

    id: str
    clipper: str
    platform: str  # Platform tag as stored; may be a tag we have no adapter for
    url: str
    video_id: str | None
    added_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON serialization (camelCase wire names)."""
        return {
            "id": self.id,
            "clipper": self.clipper,
            "platform": self.platform,
            "url": self.url,
            "videoId": self.video_id,
            "addedAt": self.added_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Clip:
        added_at = data.get("addedAt")
        if isinstance(added_at, str):
            parsed = datetime.fromisoformat(added_at.replace("Z", "+00:00"))
        else:
            parsed = datetime.fromtimestamp(0, tz=timezone.utc)
        return cls(
            id=str(data["id"]),
            clipper=data["clipper"],
            platform=data["platform"],
            url=data["url"],
            video_id=data.get("videoId") or None,
            added_at=parsed,
        )


@dataclass(frozen=True)
class MetricsSnapshot:
    """
    Point-in-time engagement counters for one clip.

    If ``error`` is set the fetch failed and every counter is zero.
    """

    views: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0
    error: str | None = None

    def __post_init__(self) -> None:
        if self.error is not None and any((self.views, self.likes, self.comments, self.shares)):
            raise ValueError("failed snapshot must have zeroed counters")
        for name in ("views", "likes", "comments", "shares"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @classmethod
    def empty(cls) -> MetricsSnapshot:
        """No data attempted (unresolvable identifier or unsupported platform)."""
        return cls()

    @classmethod
    def failed(cls, reason: str) -> MetricsSnapshot:
        return cls(error=reason)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "views": self.views,
            "likes": self.likes,
            "comments": self.comments,
            "shares": self.shares,
        }
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class AnnotatedClip:
    """A clip paired with the snapshot read for it during one pass."""

    clip: Clip
    stats: MetricsSnapshot

    def to_dict(self) -> dict[str, Any]:
        return {**self.clip.to_dict(), "stats": self.stats.to_dict()}


@dataclass
class ClipperSummary:
    """Per-clipper totals built fresh on every aggregation pass."""

    clipper: str
    total_clips: int = 0
    platforms: dict[str, int] = field(default_factory=dict)
    total_views: int = 0
    total_likes: int = 0
    total_comments: int = 0
    total_shares: int = 0
    clips: list[AnnotatedClip] = field(default_factory=list)

    def add(self, annotated: AnnotatedClip) -> None:
        """Fold one clip into the running totals."""
        stats = annotated.stats
        platform = annotated.clip.platform

        self.total_clips += 1
        self.total_views += stats.views or 0
        self.total_likes += stats.likes or 0
        self.total_comments += stats.comments or 0
        self.total_shares += stats.shares or 0
        self.platforms[platform] = self.platforms.get(platform, 0) + 1
        self.clips.append(annotated)

    def to_dict(self) -> dict[str, Any]:
        return {
            "clipper": self.clipper,
            "totalClips": self.total_clips,
            "platforms": dict(self.platforms),
            "totalViews": self.total_views,
            "totalLikes": self.total_likes,
            "totalComments": self.total_comments,
            "totalShares": self.total_shares,
            "clips": [c.to_dict() for c in self.clips],
        }
