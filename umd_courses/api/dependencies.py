"""
Service wiring.

This is the ONE place where the cache backend, the settings store, the HTTP
transport and the mock strategy are chosen and handed to UmdApiClient.
Routes receive the results through FastAPI dependencies.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import httpx
from fastapi import Depends, Request

from umd_courses.database.settings import SettingsStore
from umd_courses.integrations.clients.mocks import CourseFixture, FixtureCoursePolicy, FixtureTransport
from umd_courses.integrations.clients.real_http import UmdApiClient
from umd_courses.integrations.contracts.courses import CacheBackend, MockModeSource, MockStrategy
from umd_courses.utils.config_loader import CatalogConfig, apply_env_overrides, load_catalog_config

logger = logging.getLogger(__name__)


@dataclass
class CatalogServices:
    config: CatalogConfig
    settings: SettingsStore
    cache: CacheBackend
    http_client: httpx.AsyncClient
    client: UmdApiClient

    async def aclose(self) -> None:
        await self.http_client.aclose()


def load_config() -> CatalogConfig:
    try:
        return load_catalog_config()
    except FileNotFoundError as e:
        logger.warning("%s; using built-in defaults", e)
        return apply_env_overrides(CatalogConfig())


def build_cache(cfg: CatalogConfig, clock: Callable[[], float] = time.time) -> CacheBackend:
    # Use real Redis when configured, else the in-memory stub
    if cfg.cache.redis_url:
        from umd_courses.database.redis_real import CourseCache

        return CourseCache(url=cfg.cache.redis_url, namespace=cfg.cache.namespace)

    from umd_courses.database.redis import CourseCache

    return CourseCache(clock=clock)


def build_services(
    cfg: CatalogConfig,
    *,
    settings: Optional[MockModeSource] = None,
    cache: Optional[CacheBackend] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    clock: Callable[[], float] = time.time,
) -> CatalogServices:
    if settings is None:
        settings = SettingsStore(cfg.settings_path())
    if cache is None:
        cache = build_cache(cfg, clock)
    fixture = CourseFixture(cfg.fixture_path())
    if transport is None:
        transport = httpx.AsyncHTTPTransport()

    mock_policy = None
    if cfg.mock.strategy is MockStrategy.SERVICE:
        mock_policy = FixtureCoursePolicy(
            fixture,
            fallback=cfg.mock.fixture_fallback,
            include_single_course=cfg.mock.include_single_course,
        )
    elif cfg.mock.strategy is MockStrategy.TRANSPORT:
        transport = FixtureTransport(
            transport,
            fixture,
            settings,
            api_base_url=cfg.api.base_url,
            include_single_course=cfg.mock.include_single_course,
        )

    logger.info(
        "Course client: base_url=%s mock_strategy=%s cache=%s",
        cfg.api.base_url,
        cfg.mock.strategy.value,
        type(cache).__module__,
    )

    http_client = httpx.AsyncClient(transport=transport, timeout=cfg.api.timeout_seconds)
    client = UmdApiClient(
        http_client=http_client,
        cache=cache,
        settings=settings,
        clock=clock,
        mock_policy=mock_policy,
        fixture=fixture,
        base_url=cfg.api.base_url,
        timeout=cfg.api.timeout_seconds,
        cache_ttl=cfg.cache.ttl_seconds,
    )
    return CatalogServices(config=cfg, settings=settings, cache=cache, http_client=http_client, client=client)


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------

def get_services(request: Request) -> CatalogServices:
    return request.app.state.services


def get_course_client(services: CatalogServices = Depends(get_services)) -> UmdApiClient:
    return services.client


def get_settings_store(services: CatalogServices = Depends(get_services)) -> SettingsStore:
    return services.settings
