"""
Course catalog contracts.

A course record is whatever the UMD API returns for one course: the client
never interprets its fields, it only moves the parsed JSON around.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Union


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

# One course, e.g. {"course_id": "AAAS100", "grading_method": ["Regular"], ...}
CourseRecord = Dict[str, JSONValue]

# What gets cached: a single record or a whole listing.
CachedValue = Union[CourseRecord, List[CourseRecord]]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class MockStrategy(str, Enum):
    NONE = "none"
    SERVICE = "service"          # fixture served by the client, cache bypassed
    TRANSPORT = "transport"      # fixture served by the HTTP transport, cache kept


class FixtureFallback(str, Enum):
    LIVE = "live"                # missing fixture -> behave as if mock mode were off
    EMPTY = "empty"              # missing fixture -> empty listing


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------

@dataclass
class CacheEntry:
    key: str
    value: CachedValue
    expires_at: float            # epoch seconds

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class CacheBackend(Protocol):
    """Anything the client can read through and write through."""

    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the live entry for key, or None when absent or expired."""

    def set(self, key: str, value: CachedValue, expires_at: float) -> None:
        """Store value under key until expires_at (epoch seconds)."""


class MockModeSource(Protocol):
    def mock_mode_enabled(self) -> bool:
        """Current value of the persisted mock-mode flag."""
