"""Test doubles shared across the test modules."""

from dataclasses import replace
from datetime import datetime
from zoneinfo import ZoneInfo

from travel_schedules.domain.models import Station, TravelSchedule

BERLIN = ZoneInfo("Europe/Berlin")
NOW = datetime(2026, 10, 17, 10, 0, tzinfo=BERLIN)

MUNICH = Station(code="MUC", name="München Hbf")
NUREMBERG = Station(code="NUE", name="Nürnberg Hbf")
AUGSBURG = Station(code="AGB", name="Augsburg Hbf")


class FixedClock:
    """Clock that always reports the same instant."""

    def __init__(self, now: datetime = NOW) -> None:
        """Initialize with the instant to report."""
        self.current = now

    def now(self) -> datetime:
        """Return the fixed instant."""
        return self.current


class RecordingScheduleStore:
    """Schedule store returning canned records and remembering every query."""

    def __init__(
        self, schedules: list[TravelSchedule] | None = None, assign_ids: bool = True
    ) -> None:
        """Initialize with the records to return from every query."""
        self.schedules = schedules or []
        self.assign_ids = assign_ids
        self.queries: list[tuple[Station, Station, datetime]] = []
        self.saved: list[TravelSchedule] = []

    async def find_by_source_destination_after(
        self, source: Station, destination: Station, after: datetime
    ) -> list[TravelSchedule]:
        """Record the query and return the canned records unfiltered."""
        self.queries.append((source, destination, after))
        return list(self.schedules)

    async def save(self, schedule: TravelSchedule) -> TravelSchedule:
        """Remember the schedule, assigning a sequential id when enabled."""
        saved = replace(schedule, schedule_id=f"s{len(self.saved) + 1}") if self.assign_ids else schedule
        self.saved.append(saved)
        return saved
