"""
Mock integration clients.

These return the local course fixture instead of calling api.umd.io.
They are used when:
- mock mode is switched on in the settings form
- we want to develop or test pages without network access

Two strategies are available (config: mock.strategy):
- service: FixtureCoursePolicy, consulted by UmdApiClient before cache and API
- transport: FixtureTransport, wraps the httpx transport so cache logic still runs

Important:
- Mocks must return data shaped exactly like the live API (see contracts/courses.py).
"""

from .fixture_courses import CourseFixture, FixtureCoursePolicy
from .http_transport import FixtureTransport

__all__ = ["CourseFixture", "FixtureCoursePolicy", "FixtureTransport"]
