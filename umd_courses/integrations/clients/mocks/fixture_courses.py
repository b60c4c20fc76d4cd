"""
Fixture Course Catalog (Mock/Local).

Purpose:
- Serves the canned "all courses" response from
  umd_courses/fixtures/courses_api_response.json while mock mode is on.
- Used by UmdApiClient when the configured mock strategy is "service".

Behavior:
- A readable, valid fixture is returned verbatim (no limit applied, no cache).
- A fixture that is not a JSON list counts as corrupt.
- A missing or corrupt fixture is logged as a warning and handled according
  to the configured FixtureFallback (continue live, or return nothing).
- Single-course lookups are only served when include_single_course is set;
  otherwise getCourse-style calls always go live.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from umd_courses.integrations.contracts.courses import CourseRecord, FixtureFallback
from umd_courses.integrations.errors import FixtureNotFoundError, ParseError

logger = logging.getLogger(__name__)

FIXTURE_NAME = "courses_api_response.json"
MISSING_FIXTURE_MESSAGE = "UMD Courses mock fixture file not found. Falling back to live API."
MISSING_FIXTURE_EMPTY_MESSAGE = "UMD Courses mock fixture file not found. No courses will be shown."


def default_fixture_path() -> Path:
    return Path(__file__).resolve().parents[3] / "fixtures" / FIXTURE_NAME


class CourseFixture:
    """Read-only access to the fixture file. Re-read on every call."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path else default_fixture_path()

    def exists(self) -> bool:
        return self.path.is_file()

    def read_bytes(self) -> bytes:
        if not self.exists():
            raise FixtureNotFoundError(self.path)
        return self.path.read_bytes()

    def load(self) -> Any:
        raw = self.read_bytes()
        try:
            return json.loads(raw)
        except ValueError as e:
            raise ParseError(f"Invalid JSON in fixture {self.path}: {e}") from e

    def load_courses(self) -> List[CourseRecord]:
        data = self.load()
        if not isinstance(data, list):
            raise ParseError(f"Fixture {self.path} does not hold a list of courses")
        return data

    def available(self) -> bool:
        try:
            self.load_courses()
        except (FixtureNotFoundError, ParseError):
            return False
        return True

    def find_course(self, course_id: str) -> Optional[CourseRecord]:
        for record in self.load_courses():
            if isinstance(record, dict) and record.get("course_id") == course_id:
                return record
        return None


class FixtureCoursePolicy:
    """Service-layer mock strategy consulted by UmdApiClient.

    Each ``serve_*`` method returns the data to hand back to the caller, or
    None when the client should carry on with its cache / live path.
    """

    def __init__(
        self,
        fixture: CourseFixture,
        fallback: FixtureFallback = FixtureFallback.LIVE,
        include_single_course: bool = False,
    ) -> None:
        self.fixture = fixture
        self.fallback = FixtureFallback(fallback)
        self.include_single_course = include_single_course

    def serve_courses(self) -> Optional[List[CourseRecord]]:
        try:
            return self.fixture.load_courses()
        except FixtureNotFoundError:
            if self.fallback is FixtureFallback.EMPTY:
                logger.warning("UMD Courses mock fixture file not found: %s. Returning no courses.", self.fixture.path)
                return []
            logger.warning("%s (%s)", MISSING_FIXTURE_MESSAGE, self.fixture.path)
            return None
        except ParseError as e:
            if self.fallback is FixtureFallback.EMPTY:
                logger.warning("UMD Courses mock fixture is not valid JSON: %s. Returning no courses.", e)
                return []
            logger.warning("UMD Courses mock fixture is not valid JSON: %s. Falling back to live API.", e)
            return None

    def serve_course(self, course_id: str) -> Optional[CourseRecord]:
        if not self.include_single_course:
            return None
        try:
            return self.fixture.find_course(course_id)
        except (FixtureNotFoundError, ParseError) as e:
            logger.warning("Mock fixture unavailable for course %s: %s. Falling back to live API.", course_id, e)
            return None

    def available(self) -> bool:
        return self.fixture.available()

    def missing_fixture_notice(self) -> str:
        if self.fallback is FixtureFallback.EMPTY:
            return MISSING_FIXTURE_EMPTY_MESSAGE
        return MISSING_FIXTURE_MESSAGE
