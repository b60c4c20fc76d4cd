"""Pytest fixtures for the UMD course client, mocks and API tests."""

import json

import httpx
import pytest

from umd_courses.database.redis import CourseCache
from umd_courses.integrations.clients.real_http import UmdApiClient

REQUEST_TIME = 1234567890

COURSES = [
    {
        "course_id": "AAAS100",
        "name": "Introduction to African American Studies",
        "department": "African American and Africana Studies",
        "credits": "3",
        "description": "Test course description",
        "grading_method": ["Regular", "Pass-Fail"],
        "gen_ed": [["DSHS", "DVUP"]],
        "sections": ["AAAS100-0101", "AAAS100-0102"],
    },
    {
        "course_id": "AAAS101",
        "name": "Advanced Studies",
        "department": "African American and Africana Studies",
        "credits": "4",
        "description": "Another test course",
        "grading_method": ["Regular"],
        "sections": ["AAAS101-0101"],
    },
]

FIXTURE_COURSES = [
    {
        "course_id": "FIX100",
        "name": "Fixture Course",
        "grading_method": ["Regular", "Audit"],
        "sections": ["FIX100-0101"],
        "relationships": {"prereqs": None, "also_offered_as": []},
    },
    {
        "course_id": "FIX200",
        "name": "Second Fixture Course",
        "credits": 3,
        "core": [],
    },
]


class FakeClock:
    def __init__(self, now: float = REQUEST_TIME):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FlagSettings:
    """Stands in for the settings store; flip .enabled between calls."""

    def __init__(self, enabled: bool = False):
        self.enabled = enabled

    def mock_mode_enabled(self) -> bool:
        return self.enabled


class RecordingCache(CourseCache):
    def __init__(self, clock):
        super().__init__(clock=clock)
        self.gets = []
        self.sets = []

    def get(self, key):
        self.gets.append(key)
        return super().get(key)

    def set(self, key, value, expires_at):
        self.sets.append((key, value, expires_at))
        super().set(key, value, expires_at)


class FakeUpstream:
    """httpx.MockTransport handler standing in for api.umd.io."""

    def __init__(self, body=None, status_code=200, content=None, exc=None):
        self.body = COURSES if body is None else body
        self.status_code = status_code
        self.content = content
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return RecordingCache(clock)


@pytest.fixture
def mock_flag():
    return FlagSettings(enabled=False)


@pytest.fixture
def fixture_file(tmp_path):
    path = tmp_path / "fixtures" / "courses_api_response.json"
    path.parent.mkdir()
    path.write_text(json.dumps(FIXTURE_COURSES), encoding="utf-8")
    return path


@pytest.fixture
def make_client(cache, clock, mock_flag):
    created = []

    def _make(upstream, mock_policy=None, transport=None):
        http_client = httpx.AsyncClient(transport=transport or httpx.MockTransport(upstream))
        created.append(http_client)
        return UmdApiClient(
            http_client=http_client,
            cache=cache,
            settings=mock_flag,
            clock=clock,
            mock_policy=mock_policy,
        )

    return _make


def error_messages(caplog):
    return [r.getMessage() for r in caplog.records if r.levelname == "ERROR"]
