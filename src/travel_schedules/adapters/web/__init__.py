"""Web adapter for the schedule API."""

from .schedule_routes import create_app
from .web_adapter import ScheduleWebAdapter

__all__ = ["ScheduleWebAdapter", "create_app"]
