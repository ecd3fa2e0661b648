"""In-memory persistence adapters."""

from travel_schedules.adapters.memory.in_memory_schedule_store import InMemoryScheduleStore
from travel_schedules.adapters.memory.in_memory_station_directory import (
    InMemoryStationDirectory,
)

__all__ = ["InMemoryScheduleStore", "InMemoryStationDirectory"]
