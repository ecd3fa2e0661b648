"""Domain models for travel schedules."""

from travel_schedules.domain.models.error_details import ErrorDetails
from travel_schedules.domain.models.schedule_dto import (
    ScheduleCreateRequest,
    ScheduleDTO,
    ScheduleSearchResult,
    StationDTO,
)
from travel_schedules.domain.models.search_window import SearchWindow, WindowStatus
from travel_schedules.domain.models.station import Station
from travel_schedules.domain.models.travel_schedule import TravelSchedule

__all__ = [
    "ErrorDetails",
    "ScheduleCreateRequest",
    "ScheduleDTO",
    "ScheduleSearchResult",
    "SearchWindow",
    "Station",
    "StationDTO",
    "TravelSchedule",
    "WindowStatus",
]
