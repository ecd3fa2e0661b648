"""Configuration adapters."""

from travel_schedules.adapters.config.app_config import AppConfig
from travel_schedules.adapters.config.station_catalog_loader import (
    StationCatalog,
    StationCatalogLoader,
)

__all__ = ["AppConfig", "StationCatalog", "StationCatalogLoader"]
