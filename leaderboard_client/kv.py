"""
Key-value persistence for local mode.

The leaderboard keeps two plain-text values: the serialized participant list
and the backend preference flag. Stores are injected into the controller so
tests can substitute the in-memory variant.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Protocol

import redis
from redis import exceptions as redis_exceptions

from leaderboard_client.errors import StorageError

logger = logging.getLogger(__name__)

PARTICIPANTS_KEY = "leaderboardParticipants"
USE_DATABASE_KEY = "useDatabase"


class KeyValueStore(Protocol):
    """Minimal string key-value interface."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


@dataclass
class InMemoryKeyValueStore:
    """Dict-backed store for tests and throwaway sessions."""

    items: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set(self, key: str, value: str) -> None:
        self.items[key] = value


@dataclass
class JsonFileKeyValueStore:
    """Keeps every key in a single JSON object on disk."""

    path: str

    def _read_all(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("Unreadable local store at %s, starting empty", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        directory = os.path.dirname(self.path)
        tmp_path = f"{self.path}.tmp"
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.error("Could not write local store at %s: %s", self.path, exc)
            raise StorageError(f"Could not save to local storage: {exc}") from exc


@dataclass
class RedisKeyValueStore:
    """Redis-backed store, one string key per value under a common prefix."""

    url: str
    key_prefix: str = "leaderboard:"

    def __post_init__(self):
        self.client = redis.Redis.from_url(self.url, decode_responses=True)

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(self.key_prefix + key)
        except redis_exceptions.ConnectionError:
            # A dropped connection reads as missing; local mode then shows an empty board.
            logger.warning("Redis unavailable reading %s", key)
            self.client = redis.Redis.from_url(self.url, decode_responses=True)
            return None

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(self.key_prefix + key, value)
        except redis_exceptions.RedisError as exc:
            logger.error("Redis unavailable writing %s: %s", key, exc)
            if isinstance(exc, redis_exceptions.ConnectionError):
                self.client = redis.Redis.from_url(self.url, decode_responses=True)
            raise StorageError(f"Could not save to local storage: {exc}") from exc
