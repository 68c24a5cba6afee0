"""Base adapter interface for all platforms."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from clipstats.core.config import Settings
from clipstats.models.clip import MetricsSnapshot

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    CONFIGURATION = "configuration"  # Credential missing
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"  # Network, timeout or unexpected payload


@dataclass(frozen=True)
class MetricsFetched:
    """Adapter succeeded."""

    snapshot: MetricsSnapshot

    def to_snapshot(self) -> MetricsSnapshot:
        return self.snapshot


@dataclass(frozen=True)
class FetchFailed:
    """Adapter failed; ``reason`` is shown to operators as-is."""

    reason: str
    kind: FailureKind

    def to_snapshot(self) -> MetricsSnapshot:
        return MetricsSnapshot.failed(self.reason)


FetchResult = MetricsFetched | FetchFailed


def to_count(value: Any) -> int:
    """Parse an API counter, treating missing or garbage values as 0."""
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


class BaseAdapter(ABC):
    """
    Abstract base class for platform metrics adapters.

    Subclasses implement ``_fetch``; callers use ``fetch``, which never raises.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Return the platform tag (e.g., 'youtube')."""
        pass

    @abstractmethod
    def credential(self) -> str | None:
        """Current credential for this platform, read at call time."""
        pass

    @property
    @abstractmethod
    def missing_credential_message(self) -> str:
        pass

    @abstractmethod
    async def _fetch(self, identifier: str, credential: str) -> FetchResult:
        """
        Fetch metrics for one content id.

        May raise; ``fetch`` converts exceptions into transport failures.
        """
        pass

    async def fetch(self, identifier: str) -> FetchResult:
        """Fetch metrics for one content id. Every failure is returned, not raised."""
        credential = self.credential()
        if not credential:
            logger.warning(f"{self.platform_name} credential not configured; skipping {identifier}")
            return FetchFailed(self.missing_credential_message, FailureKind.CONFIGURATION)

        timeout = self._settings.request_timeout_seconds
        try:
            result = await asyncio.wait_for(self._fetch(identifier, credential), timeout=timeout)
        except asyncio.TimeoutError:
            reason = f"Request timed out after {timeout:g}s"
            logger.error(f"{self.platform_name} API error for {identifier}: {reason}")
            return FetchFailed(reason, FailureKind.TRANSPORT)
        except Exception as e:
            logger.error(f"{self.platform_name} API error for {identifier}: {e}")
            return FetchFailed(str(e) or type(e).__name__, FailureKind.TRANSPORT)

        if isinstance(result, FetchFailed):
            if result.kind is FailureKind.NOT_FOUND:
                logger.warning(f"{self.platform_name} content not found: {identifier}")
            else:
                logger.error(f"{self.platform_name} API error for {identifier}: {result.reason}")
        else:
            logger.debug(f"{self.platform_name} {identifier}: {result.snapshot}")
        return result
