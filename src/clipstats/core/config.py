"""Application configuration loaded from environment."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (src/clipstats/core -> repo root)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Platform credentials (all optional - missing ones degrade per clip)
    facebook_access_token: str | None = None
    facebook_graph_version: str = "v18.0"
    youtube_api_key: str | None = None
    twitter_bearer_token: str | None = None

    # Clip store
    clips_file: Path = PROJECT_ROOT / ".cache" / "clips.json"

    # Fetching
    fetch_delay_seconds: float = 0.1  # Pause between clips to stay under rate limits
    request_timeout_seconds: float = 15.0

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    def configured_platforms(self) -> dict[str, bool]:
        """Which platform credentials are present (never the values)."""
        return {
            "facebook": bool(self.facebook_access_token),
            "youtube": bool(self.youtube_api_key),
            "twitter": bool(self.twitter_bearer_token),
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
