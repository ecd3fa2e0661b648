"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Logging level name")

    # Search window configuration
    timezone: str = Field(
        default="Europe/Berlin",
        description="Timezone for the clock that drives search windows (IANA timezone name)",
    )
    max_search_days: int = Field(
        default=30, description="How many days ahead of now schedules can be searched"
    )
    lead_time_minutes: int = Field(
        default=60, description="Minimum lead time in minutes for same-day searches"
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # TOML seed file with stations and schedules
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML file with the station catalog and seed schedules",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name, got {v!r}") from e
        return v

    @field_validator("max_search_days")
    @classmethod
    def validate_max_search_days(cls, v: int) -> int:
        """Validate the search horizon is at least one day."""
        if v < 1:
            raise ValueError("max_search_days must be at least 1")
        return v

    @field_validator("lead_time_minutes")
    @classmethod
    def validate_lead_time_minutes(cls, v: int) -> int:
        """Validate the lead time is not negative."""
        if v < 0:
            raise ValueError("lead_time_minutes must not be negative")
        return v

    def load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML seed file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load the station catalog")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)
