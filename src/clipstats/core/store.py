"""Simple file-based clip store.

Clips live in a single JSON document: ``{"clips": [...]}``. The stats
pipeline only ever reads it; the HTTP layer appends and removes.
"""

import json
import logging
import threading
from pathlib import Path

from clipstats.core.config import get_settings
from clipstats.models.clip import Clip

logger = logging.getLogger(__name__)


class ClipStoreError(Exception):
    """The clip store exists but could not be read or written."""


class ClipStore:
    """JSON file of ingested clips, in ingestion order."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            raise ClipStoreError(f"Failed to read clip store {self.path}: {e}") from e

        clips = data.get("clips") if isinstance(data, dict) else None
        if not isinstance(clips, list):
            raise ClipStoreError(f"Clip store {self.path} has no 'clips' list")
        if not all(isinstance(raw, dict) for raw in clips):
            raise ClipStoreError(f"Malformed clip record in {self.path}: every clip must be an object")
        return clips

    def _save(self, clips: list[dict]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"clips": clips}, indent=2))
        except OSError as e:
            raise ClipStoreError(f"Failed to write clip store {self.path}: {e}") from e

    def list_clips(self) -> list[Clip]:
        """All clips in ingestion order."""
        try:
            return [Clip.from_dict(raw) for raw in self._load()]
        except (KeyError, TypeError, ValueError) as e:
            raise ClipStoreError(f"Malformed clip record in {self.path}: {e}") from e

    def append_clip(self, clip: Clip) -> None:
        with self._lock:
            clips = self._load()
            clips.append(clip.to_dict())
            self._save(clips)
        logger.info(f"Stored clip {clip.id} for {clip.clipper} ({clip.platform})")

    def remove_clip(self, clip_id: str) -> bool:
        """Remove a clip by id. Returns False if no such clip."""
        with self._lock:
            clips = self._load()
            remaining = [c for c in clips if str(c.get("id")) != clip_id]
            if len(remaining) == len(clips):
                return False
            self._save(remaining)
        logger.info(f"Removed clip {clip_id}")
        return True


# Singleton instance
_clip_store: ClipStore | None = None


def get_clip_store() -> ClipStore:
    """Get the clip store singleton."""
    global _clip_store
    if _clip_store is None:
        _clip_store = ClipStore(get_settings().clips_file)
    return _clip_store


def reset_clip_store() -> None:
    """Drop the singleton (for testing)."""
    global _clip_store
    _clip_store = None
