"""
Persisted module settings (the "settings form" storage).

Holds the mock_mode_enabled flag in a small JSON file. The flag is re-read
on every call so that a toggle takes effect for the next request without a
restart; nothing else (in particular the course cache) is touched on save.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class CourseSettings(BaseModel):
    mock_mode_enabled: bool = False


class SettingsStore:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> CourseSettings:
        if not self.path.exists():
            return CourseSettings()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f) or {}
            return CourseSettings(**data)
        except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.error("Failed to read settings file %s: %s", self.path, e)
            return CourseSettings()

    def save(self, settings: CourseSettings) -> CourseSettings:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(settings.model_dump(), indent=2), encoding="utf-8")
        logger.info("Saved course settings to %s: %s", self.path, settings.model_dump())
        return settings

    def mock_mode_enabled(self) -> bool:
        return self.load().mock_mode_enabled

    def set_mock_mode_enabled(self, enabled: bool) -> CourseSettings:
        return self.save(CourseSettings(mock_mode_enabled=bool(enabled)))
