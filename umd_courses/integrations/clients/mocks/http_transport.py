"""
Fixture HTTP Transport (Mock/Transport layer).

Purpose:
- Wraps the real httpx transport and answers UMD API listing requests with the
  local fixture while mock mode is on.
- Unlike the service-layer policy, the client's cache and error handling stay
  in place: fixture responses are parsed and cached exactly like live ones.

Behavior:
- Only requests under the configured API base URL are intercepted.
- A missing fixture is logged as an error and the request passes through
  silently to the real transport (no user-visible notice).
- Everything else is delegated to the wrapped transport untouched.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import httpx

from umd_courses.integrations.contracts.courses import MockModeSource
from umd_courses.integrations.errors import FixtureNotFoundError, ParseError

from .fixture_courses import MISSING_FIXTURE_MESSAGE, CourseFixture

logger = logging.getLogger(__name__)


class FixtureTransport(httpx.AsyncBaseTransport):
    def __init__(
        self,
        inner: httpx.AsyncBaseTransport,
        fixture: CourseFixture,
        settings: MockModeSource,
        api_base_url: str,
        include_single_course: bool = False,
    ) -> None:
        self.inner = inner
        self.fixture = fixture
        self.settings = settings
        self.api_base = httpx.URL(api_base_url.rstrip("/"))
        self.include_single_course = include_single_course

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if self.settings.mock_mode_enabled():
            response = self._fixture_response(request)
            if response is not None:
                return response
        return await self.inner.handle_async_request(request)

    async def aclose(self) -> None:
        await self.inner.aclose()

    def _fixture_response(self, request: httpx.Request) -> Optional[httpx.Response]:
        path = self._api_path(request.url)
        if path is None or request.method != "GET":
            return None

        if path == "/courses":
            try:
                body = self.fixture.read_bytes()
            except FixtureNotFoundError:
                logger.error(MISSING_FIXTURE_MESSAGE)
                return None
            logger.debug("Serving %s from fixture %s", request.url, self.fixture.path)
            return _json_response(request, 200, body)

        if path.startswith("/courses/") and self.include_single_course:
            course_id = path[len("/courses/"):]
            try:
                record = self.fixture.find_course(course_id)
            except (FixtureNotFoundError, ParseError) as e:
                logger.error("%s (%s)", MISSING_FIXTURE_MESSAGE, e)
                return None
            if record is None:
                body = {"error_code": 404, "message": f"Course {course_id} not found in fixture."}
                return _json_response(request, 404, json.dumps(body).encode("utf-8"))
            return _json_response(request, 200, json.dumps(record).encode("utf-8"))

        return None

    def _api_path(self, url: httpx.URL) -> Optional[str]:
        """Path relative to the API base, or None for foreign hosts."""
        if (url.scheme, url.host, url.port) != (self.api_base.scheme, self.api_base.host, self.api_base.port):
            return None
        base_path = self.api_base.path.rstrip("/")
        if not url.path.startswith(base_path + "/"):
            return None
        return url.path[len(base_path):]


def _json_response(request: httpx.Request, status_code: int, body: bytes) -> httpx.Response:
    return httpx.Response(
        status_code,
        headers={"Content-Type": "application/json"},
        content=body,
        request=request,
    )
