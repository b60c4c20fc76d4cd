"""Errors raised inside the integrations layer.

None of these cross UmdApiClient's public methods: the client logs them and
degrades to an empty / absent result.
"""
from typing import Optional


class CatalogError(Exception):
    """Base class for course catalog integration failures."""


class TransportError(CatalogError):
    """Timeout, connection failure or non-2xx status from the UMD API."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(CatalogError):
    """Response body or fixture file that is not valid JSON."""


class FixtureNotFoundError(CatalogError):
    """Mock mode is on but the fixture file is missing."""

    def __init__(self, path) -> None:
        super().__init__(f"Fixture file not found: {path}")
        self.path = path
