"""Configuration management.

Settings come from environment variables (``SHOPFLOW_`` prefix, ``__``
between nested keys, e.g. ``SHOPFLOW_PRICING__PER_KG_FEE=6000``) and
are validated by pydantic-settings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from shopflow.domain.service.pricing_service import PricingSettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return level


class Settings(BaseSettings):
    """Top-level application settings."""

    pricing: PricingSettings = Field(default_factory=PricingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {"env_prefix": "SHOPFLOW_", "env_nested_delimiter": "__"}


def load_settings(overrides: dict[str, Any] | None = None) -> Settings:
    """Load settings from env vars, with optional keyword overrides on top."""
    return Settings(**(overrides or {}))
