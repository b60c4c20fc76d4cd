"""
Real Redis-backed course cache for production when REDIS_URL is set.
Implements the same interface as umd_courses.database.redis (in-memory stub).

Values are stored as JSON together with their absolute expiry so that get()
can hand back a full CacheEntry; Redis itself drops the key at expires_at.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import redis

from umd_courses.integrations.contracts.courses import CacheEntry, CachedValue

logger = logging.getLogger(__name__)


class CourseCache:
    """
    Redis-backed course cache. Use when REDIS_URL is set in production.
    Backend errors are logged and treated as cache misses.
    """

    def __init__(self, url: str, namespace: str = "umd_courses", client: Optional[redis.Redis] = None) -> None:
        self._client = client or redis.from_url(url, decode_responses=True)
        self._namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get(self, key: str) -> Optional[CacheEntry]:
        try:
            raw = self._client.get(self._key(key))
        except redis.RedisError as e:
            logger.warning("Redis get failed for %s: %s", key, e)
            return None
        if not raw:
            return None
        try:
            payload = json.loads(raw)
            return CacheEntry(key=key, value=payload["value"], expires_at=float(payload["expires_at"]))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            logger.warning("Discarding unreadable cache entry %s", key)
            return None

    def set(self, key: str, value: CachedValue, expires_at: float) -> None:
        payload = json.dumps({"value": value, "expires_at": expires_at})
        try:
            self._client.set(self._key(key), payload, exat=int(expires_at))
        except redis.RedisError as e:
            logger.warning("Redis set failed for %s: %s", key, e)

    def ping(self) -> bool:
        try:
            return self._client.ping()
        except Exception:
            return False
