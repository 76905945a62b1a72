"""
Configuration Management for Marina Boat Manager

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The defaults reproduce the marina's published tariff and the limits of
the legacy data file, so the program runs with no environment at all.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FleetSettings(BaseSettings):
    """Limits on the fleet and on individual records."""

    model_config = SettingsConfigDict(
        env_prefix="MARINA_",
        extra="ignore"
    )

    max_vessels: int = Field(
        default=120,
        ge=1,
        description="Maximum number of vessels held in the fleet"
    )


class BillingSettings(BaseSettings):
    """
    Monthly billing rates in dollars per foot of boat length.

    Override with e.g. MARINA_RATE_SLIP=13.00.
    """

    model_config = SettingsConfigDict(
        env_prefix="MARINA_RATE_",
        extra="ignore"
    )

    slip: Decimal = Field(default=Decimal("12.50"), ge=0)
    land: Decimal = Field(default=Decimal("14.00"), ge=0)
    trailer: Decimal = Field(default=Decimal("25.00"), ge=0)
    storage: Decimal = Field(default=Decimal("11.20"), ge=0)


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG log level)"
    )

    # Logging goes to stderr so it never interleaves with the console menu
    log_level: str = Field(
        default="WARNING",
        description="Log level for the structured log"
    )
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of key=value"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return v.upper()

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def fleet(self) -> FleetSettings:
        return FleetSettings()

    @property
    def billing(self) -> BillingSettings:
        return BillingSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    "<name>_error" entry for every group that failed.
    """
    results = {}

    settings = get_settings()

    for name in ("fleet", "billing", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
