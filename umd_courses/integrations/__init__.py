"""
Integrations layer.
This package contains all code used to talk to the UMD course catalog API:
- the live HTTP client with its cache write-through (clients/real_http)
- fixture-backed substitutes used in mock mode (clients/mocks)
- the shared data shapes both sides agree on (contracts)

Key rule:
- Pages and API routes MUST NOT call the UMD API directly.
- They call UmdApiClient, which decides between fixture, cache and live API.

Switching implementations:
- The selection of mock strategy happens in ONE place (umd_courses/api/dependencies.py).
"""

from .contracts.courses import (
    CacheBackend,
    CacheEntry,
    CourseRecord,
    FixtureFallback,
    MockStrategy,
)
from .errors import CatalogError, FixtureNotFoundError, ParseError, TransportError

__all__ = [
    # contracts
    "CacheBackend", "CacheEntry", "CourseRecord", "FixtureFallback", "MockStrategy",
    # errors
    "CatalogError", "FixtureNotFoundError", "ParseError", "TransportError",
]
