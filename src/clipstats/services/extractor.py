"""Pull the platform content id out of a clip URL."""

import re

from clipstats.models.clip import Platform

# Alternatives are tried left to right; the first that matches wins.
_FACEBOOK_ID = re.compile(r"/videos/(\d+)|/posts/(\d+)|/\d+/videos/(\d+)|story_fbid=(\d+)")
_YOUTUBE_ID = re.compile(r"shorts/([a-zA-Z0-9_-]+)|v=([a-zA-Z0-9_-]+)")
_TWITTER_ID = re.compile(r"status/(\d+)")

_PATTERNS = {
    Platform.FACEBOOK: _FACEBOOK_ID,
    Platform.YOUTUBE: _YOUTUBE_ID,
    Platform.TWITTER: _TWITTER_ID,
}


def extract_video_id(url: str, platform: str | Platform) -> str | None:
    """
    Extract the content identifier for ``platform`` from ``url``.

    Facebook: /videos/{id}, /posts/{id}, /{page}/videos/{id} or story_fbid={id}
    YouTube:  shorts/{id} or v={id}
    Twitter:  status/{numeric id}

    Returns None for unknown platforms, non-string URLs and URLs with no
    recognizable id. Pure; never raises.
    """
    resolved = Platform.parse(platform)
    if resolved is None or not isinstance(url, str):
        return None

    match = _PATTERNS[resolved].search(url)
    if not match:
        return None
    # Exactly one group is set per alternative
    return next((g for g in match.groups() if g), None)
