"""
Real HTTP integration clients.

UmdApiClient talks to https://api.umd.io/v1 and writes successful responses
through to the cache.

Important:
- Must return data shaped exactly as the UMD API sends it
- Mock strategies plug into it (service policy) or under it (httpx transport);
  the selection happens in umd_courses/api/dependencies.py only.
"""

from .umd_api import API_BASE_URL, UmdApiClient

__all__ = ["API_BASE_URL", "UmdApiClient"]
