"""Wiring of adapters into the schedule use cases."""

from dataclasses import dataclass
from datetime import timedelta

from travel_schedules.adapters.clock import SystemClock
from travel_schedules.adapters.config import AppConfig, StationCatalogLoader
from travel_schedules.adapters.memory import InMemoryScheduleStore, InMemoryStationDirectory
from travel_schedules.application.services import ScheduleCreator, ScheduleSearchEngine


@dataclass(frozen=True)
class Services:
    """The wired use cases and the directory they share."""

    search_engine: ScheduleSearchEngine
    creator: ScheduleCreator
    station_directory: InMemoryStationDirectory
    schedule_store: InMemoryScheduleStore


async def build_services(config: AppConfig) -> Services:
    """Seed the in-memory adapters from the catalog file and wire the services."""
    catalog = StationCatalogLoader.load(config)

    station_directory = InMemoryStationDirectory(catalog.stations)
    schedule_store = InMemoryScheduleStore()
    for schedule in catalog.schedules:
        await schedule_store.save(schedule)

    clock = SystemClock(config.timezone)
    search_engine = ScheduleSearchEngine(
        station_directory,
        schedule_store,
        clock,
        lead_time=timedelta(minutes=config.lead_time_minutes),
        max_search_days=config.max_search_days,
    )
    creator = ScheduleCreator(station_directory, schedule_store, clock)
    return Services(
        search_engine=search_engine,
        creator=creator,
        station_directory=station_directory,
        schedule_store=schedule_store,
    )
