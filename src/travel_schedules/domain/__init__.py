"""Domain layer - core business logic and models."""

from travel_schedules.domain.models import (
    ScheduleDTO,
    ScheduleSearchResult,
    Station,
    TravelSchedule,
)
from travel_schedules.domain.ports import (
    Clock,
    ScheduleStore,
    StationDirectory,
)

__all__ = [
    "Clock",
    "ScheduleDTO",
    "ScheduleSearchResult",
    "ScheduleStore",
    "Station",
    "StationDirectory",
    "TravelSchedule",
]
