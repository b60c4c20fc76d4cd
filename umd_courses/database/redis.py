"""
Lightweight in-memory cache replacement for local development.

Implements the CacheBackend interface used by UmdApiClient so the app can
run without a real Redis instance. Expiry is honored on read: an expired
entry is dropped and reported as a miss.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional

from umd_courses.integrations.contracts.courses import CacheEntry, CachedValue


class CourseCache:
    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._entries: Dict[str, CacheEntry] = {}
        self._clock = clock

    def get(self, key: str) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            self._entries.pop(key, None)
            return None
        return entry

    def set(self, key: str, value: CachedValue, expires_at: float) -> None:
        self._entries[key] = CacheEntry(key=key, value=value, expires_at=expires_at)

    def __len__(self) -> int:
        return len(self._entries)

    # --- Misc -----------------------------------------------------------------

    def ping(self) -> bool:
        """
        Health check calls this; always True so the API reports the cache
        as "connected" in local/dev mode.
        """
        return True
