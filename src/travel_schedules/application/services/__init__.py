"""Application services (use cases) for travel schedules."""

from travel_schedules.application.services.schedule_creator import ScheduleCreator
from travel_schedules.application.services.schedule_search_engine import ScheduleSearchEngine
from travel_schedules.application.services.search_window import compute_search_window

__all__ = ["ScheduleCreator", "ScheduleSearchEngine", "compute_search_window"]
