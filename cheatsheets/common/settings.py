"""
Application settings loaded from environment variables.
It centralizes cross-cutting concerns like settings and logging used by the note runner.
Keeping these helpers isolated reduces duplication and keeps topic modules focused on the idioms.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError

SETTINGS_ENV_VARS: Final[tuple[str, ...]] = (
    "PROJECT_NAME",
    "ENV",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "NOTES_CATALOG_PATH",
    "NOTES_REPORT_DIR",
    "NOTES_RANDOM_SEED",
    "NOTES_STRICT",
)


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str = "python-idiom-cheatsheets"
    ENV: str = "local"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["text", "json"] = "text"
    NOTES_CATALOG_PATH: str = "configs/notes_catalog.yaml"
    NOTES_REPORT_DIR: str = "reports/notes"
    NOTES_RANDOM_SEED: int | None = None
    NOTES_STRICT: bool = True


def _environment_values() -> dict[str, str]:
    # Blank values fall back to the model defaults.
    values: dict[str, str] = {}
    for key in SETTINGS_ENV_VARS:
        value = os.getenv(key)
        if value is not None and value.strip() != "":
            values[key] = value.strip()
    return values


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate settings from `.env` and the process environment."""

    if load_env:
        load_dotenv()

    try:
        return Settings.model_validate(_environment_values())
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
