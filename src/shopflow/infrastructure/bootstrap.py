"""Composition root: wires concrete implementations to domain interfaces.

Settings are read here and handed to the domain as plain values; the
CLI asks this module for ready-made services.
"""

from __future__ import annotations

from shopflow.domain.service.pricing_service import PricingService
from shopflow.infrastructure.config import Settings, load_settings


def settings() -> Settings:
    return load_settings()


def pricing_service(app_settings: Settings | None = None) -> PricingService:
    return PricingService((app_settings or settings()).pricing)
