"""
Configuration for the leaderboard client.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Environment-backed settings for the command-line client."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_url: str = Field(
        default="http://127.0.0.1:8000/api", validation_alias="LEADERBOARD_API_URL"
    )
    # None waits indefinitely for the remote backend.
    request_timeout: Optional[float] = Field(
        default=None, validation_alias="LEADERBOARD_REQUEST_TIMEOUT"
    )

    # Local persistence: a JSON file unless a Redis URL is given.
    local_store_path: str = Field(
        default="data/local_storage.json",
        validation_alias="LEADERBOARD_LOCAL_STORE_PATH",
    )
    redis_url: Optional[str] = Field(default=None, validation_alias="LEADERBOARD_REDIS_URL")
    redis_key_prefix: str = Field(
        default="leaderboard:", validation_alias="LEADERBOARD_REDIS_KEY_PREFIX"
    )


@lru_cache(maxsize=1)
def get_client_settings() -> ClientSettings:
    """Return cached settings instance."""
    return ClientSettings()
