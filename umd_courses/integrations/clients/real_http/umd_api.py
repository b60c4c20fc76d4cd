"""
UMD Course Catalog HTTP Client.

Purpose:
- Fetches course listings and single courses from https://api.umd.io/v1
- Writes successful responses through to the cache for one hour
- Consults the service-layer mock policy (if any) while mock mode is on

Lookup order for fetch_courses:
    fixture (mock mode, service strategy) -> cache -> live API

Error contract:
- Public methods never raise for upstream problems. Transport and parse
  failures are logged and degrade to [] (listings) or None (single course).
- Nothing is cached unless the body parsed as JSON of the expected shape
  (a list for listings, an object for a single course).

Concurrency:
- No locking. Two concurrent misses for the same key both hit the API and
  both write the cache; the last write wins.

Important:
- Keep this client as the ONLY place where UMD API HTTP calls are made.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

import httpx

from umd_courses.integrations.clients.mocks.fixture_courses import (
    CourseFixture,
    FixtureCoursePolicy,
)
from umd_courses.integrations.contracts.courses import (
    CacheBackend,
    CachedValue,
    CourseRecord,
    MockModeSource,
)
from umd_courses.integrations.errors import ParseError, TransportError

API_BASE_URL = "https://api.umd.io/v1"


class UmdApiClient:
    """Fetch-cache-fallback client for the UMD course catalog."""

    API_BASE_URL = API_BASE_URL
    # Cache expiration time (1 hour).
    CACHE_EXPIRE = 3600
    TIMEOUT_SECONDS = 30.0

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        cache: CacheBackend,
        settings: MockModeSource,
        clock: Callable[[], float] = time.time,
        mock_policy: Optional[FixtureCoursePolicy] = None,
        fixture: Optional[CourseFixture] = None,
        logger: Optional[logging.Logger] = None,
        base_url: Optional[str] = None,
        timeout: float = TIMEOUT_SECONDS,
        cache_ttl: int = CACHE_EXPIRE,
    ) -> None:
        self.http_client = http_client
        self.cache = cache
        self.settings = settings
        self.clock = clock
        self.mock_policy = mock_policy
        self.fixture = fixture or (mock_policy.fixture if mock_policy else None)
        self.logger = logger or logging.getLogger(__name__)
        self.base_url = (base_url or self.API_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.cache_ttl = cache_ttl

    # -- Public API -----------------------------------------------------------

    async def fetch_courses(self, limit: int = 50) -> List[CourseRecord]:
        """Return up to ``limit`` courses; [] on any upstream failure."""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        if self.mock_policy is not None and self.is_mock_mode_enabled():
            fixture_data = self.mock_policy.serve_courses()
            if fixture_data is not None:
                return fixture_data

        cache_key = f"courses:{limit}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached.value

        try:
            data = await self._get_json("/courses", params={"per_page": limit})
            if not isinstance(data, list):
                raise ParseError(f"Expected a list of courses from UMD API, got {type(data).__name__}")
            self._cache_set(cache_key, data)
            return data
        except TransportError as e:
            self.logger.error("Failed to fetch courses from UMD API: %s", e)
            return []
        except Exception as e:
            self.logger.error("Error processing UMD API response: %s", e)
            return []

    async def fetch_course(self, course_id: str) -> Optional[CourseRecord]:
        """Return one course by id; None on any upstream failure."""
        if not course_id:
            raise ValueError("course_id is required")

        # Only answered from the fixture when include_single_course is configured.
        if self.mock_policy is not None and self.is_mock_mode_enabled():
            record = self.mock_policy.serve_course(course_id)
            if record is not None:
                return record

        cache_key = f"course:{course_id}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached.value

        try:
            data = await self._get_json(f"/courses/{quote(course_id, safe='')}")
            if not isinstance(data, dict):
                raise ParseError(f"Expected a course object from UMD API, got {type(data).__name__}")
            self._cache_set(cache_key, data)
            return data
        except TransportError as e:
            self.logger.error("Failed to fetch course %s from UMD API: %s", course_id, e)
            return None
        except Exception as e:
            self.logger.error("Error processing UMD API response for course %s: %s", course_id, e)
            return None

    def is_mock_mode_enabled(self) -> bool:
        return bool(self.settings.mock_mode_enabled())

    def fixture_available(self) -> bool:
        return self.fixture is not None and self.fixture.available()

    def notices(self) -> List[str]:
        """User-facing status messages for the courses page."""
        if self.mock_policy is None or not self.is_mock_mode_enabled():
            return []
        if self.mock_policy.available():
            return []
        return [self.mock_policy.missing_fixture_notice()]

    # -- Internals ------------------------------------------------------------

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(str(e), status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        try:
            return response.json()
        except ValueError as e:
            raise ParseError("Invalid JSON response from UMD API") from e

    def _cache_set(self, key: str, value: CachedValue) -> None:
        self.cache.set(key, value, self.clock() + self.cache_ttl)
