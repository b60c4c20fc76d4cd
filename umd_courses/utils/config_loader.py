"""
Configuration loader for the UMD courses service
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from umd_courses.integrations.contracts.courses import FixtureFallback, MockStrategy

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent


class ApiConfig(BaseModel):
    """Upstream UMD API"""

    base_url: str = "https://api.umd.io/v1"
    timeout_seconds: float = Field(default=30.0, gt=0)


class CacheConfig(BaseModel):
    """Course cache"""

    ttl_seconds: int = Field(default=3600, ge=1)
    redis_url: Optional[str] = None
    namespace: str = "umd_courses"


class MockConfig(BaseModel):
    """Mock mode behavior (the on/off flag itself lives in the settings store)"""

    strategy: MockStrategy = MockStrategy.SERVICE
    fixture_path: Optional[str] = None
    fixture_fallback: FixtureFallback = FixtureFallback.LIVE
    include_single_course: bool = False


class SettingsConfig(BaseModel):
    """Where the settings form persists its values"""

    path: str = "data/settings.json"


class PageConfig(BaseModel):
    """Courses page"""

    course_limit: int = Field(default=30, ge=1)


class CatalogConfig(BaseModel):
    """Complete service configuration"""

    api: ApiConfig = Field(default_factory=ApiConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    mock: MockConfig = Field(default_factory=MockConfig)
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    page: PageConfig = Field(default_factory=PageConfig)

    def settings_path(self) -> Path:
        path = Path(self.settings.path)
        return path if path.is_absolute() else PROJECT_ROOT / path

    def fixture_path(self) -> Optional[Path]:
        if not self.mock.fixture_path:
            return None
        path = Path(self.mock.fixture_path)
        return path if path.is_absolute() else PROJECT_ROOT / path


def load_catalog_config(config_path: Optional[Path] = None) -> CatalogConfig:
    """
    Load and validate service configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to $UMD_COURSES_CONFIG or
            config/catalog_config.yml

    Returns:
        Validated CatalogConfig object, with environment overrides applied

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        env_path = os.getenv("UMD_COURSES_CONFIG")
        config_path = Path(env_path) if env_path else PROJECT_ROOT / "config" / "catalog_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = CatalogConfig(**data)
    except ValidationError as e:
        logger.error("Catalog config validation failed: %s", e)
        raise

    apply_env_overrides(cfg)
    logger.info("Successfully loaded catalog config from %s", config_path)
    return cfg


def apply_env_overrides(cfg: CatalogConfig) -> CatalogConfig:
    if os.getenv("UMD_API_BASE_URL"):
        cfg.api.base_url = os.environ["UMD_API_BASE_URL"]
    if os.getenv("REDIS_URL"):
        cfg.cache.redis_url = os.environ["REDIS_URL"]
    if os.getenv("UMD_COURSES_SETTINGS_PATH"):
        cfg.settings.path = os.environ["UMD_COURSES_SETTINGS_PATH"]
    return cfg
