"""Adapters layer - external system integrations."""

from travel_schedules.adapters.clock import SystemClock
from travel_schedules.adapters.config import AppConfig
from travel_schedules.adapters.memory import (
    InMemoryScheduleStore,
    InMemoryStationDirectory,
)

__all__ = [
    "AppConfig",
    "InMemoryScheduleStore",
    "InMemoryStationDirectory",
    "SystemClock",
]
