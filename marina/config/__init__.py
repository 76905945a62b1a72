"""Configuration package."""

from marina.config.settings import (
    AppSettings,
    BillingSettings,
    FleetSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "BillingSettings",
    "FleetSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
