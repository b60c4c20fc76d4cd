"""
Settings form endpoints: read and toggle mock mode.

Saving only persists the flag. Cached course data is left as is; the next
request simply routes according to the new value.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from umd_courses.api.dependencies import CatalogServices, get_services

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


class SettingsUpdate(BaseModel):
    mock_mode_enabled: bool = Field(
        ...,
        description="If enabled, course listings come from the local fixture instead of the live UMD API.",
    )


class SettingsResponse(BaseModel):
    mock_mode_enabled: bool
    mock_strategy: str
    fixture_available: bool


def _settings_response(services: CatalogServices) -> SettingsResponse:
    return SettingsResponse(
        mock_mode_enabled=services.settings.mock_mode_enabled(),
        mock_strategy=services.config.mock.strategy.value,
        fixture_available=services.client.fixture_available(),
    )


@router.get("", response_model=SettingsResponse)
async def get_settings(services: CatalogServices = Depends(get_services)):
    """Current mock mode flag and how it is applied."""
    return _settings_response(services)


@router.put("", response_model=SettingsResponse)
async def update_settings(body: SettingsUpdate, services: CatalogServices = Depends(get_services)):
    """Persist the mock mode flag."""
    services.settings.set_mock_mode_enabled(body.mock_mode_enabled)
    logger.info("Mock mode %s", "enabled" if body.mock_mode_enabled else "disabled")
    return _settings_response(services)
