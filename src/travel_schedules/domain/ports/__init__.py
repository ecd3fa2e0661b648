"""Ports (interfaces) for the ports-and-adapters architecture."""

from travel_schedules.domain.ports.clock import Clock
from travel_schedules.domain.ports.schedule_services import (
    ScheduleCreationService,
    ScheduleSearchService,
)
from travel_schedules.domain.ports.schedule_store import ScheduleStore
from travel_schedules.domain.ports.station_directory import StationDirectory

__all__ = [
    "Clock",
    "ScheduleCreationService",
    "ScheduleSearchService",
    "ScheduleStore",
    "StationDirectory",
]
