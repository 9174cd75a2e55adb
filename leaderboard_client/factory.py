"""
Builds a controller from client settings.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from leaderboard_client.adapters import RemoteStoreAdapter
from leaderboard_client.config import ClientSettings, get_client_settings
from leaderboard_client.controller import LeaderboardController, Notification
from leaderboard_client.kv import JsonFileKeyValueStore, KeyValueStore, RedisKeyValueStore

logger = logging.getLogger(__name__)


def build_store(settings: ClientSettings) -> KeyValueStore:
    if settings.redis_url:
        return RedisKeyValueStore(url=settings.redis_url, key_prefix=settings.redis_key_prefix)
    return JsonFileKeyValueStore(path=settings.local_store_path)


def build_controller(
    settings: Optional[ClientSettings] = None,
    *,
    notify: Optional[Callable[[Notification], None]] = None,
) -> LeaderboardController:
    settings = settings or get_client_settings()
    store = build_store(settings)
    remote = RemoteStoreAdapter(settings.api_url, timeout=settings.request_timeout)
    logger.debug("Remote participant API at %s", settings.api_url)
    return LeaderboardController(store, remote, notify=notify)
