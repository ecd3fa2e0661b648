"""Schedule store port."""

from datetime import datetime
from typing import Protocol

from travel_schedules.domain.models.station import Station
from travel_schedules.domain.models.travel_schedule import TravelSchedule


class ScheduleStore(Protocol):
    """Port for reading and persisting travel schedules."""

    async def find_by_source_destination_after(
        self, source: Station, destination: Station, after: datetime
    ) -> list[TravelSchedule]:
        """Find schedules for a station pair arriving strictly after ``after``.

        The order of the returned list is defined by the store.
        """
        ...

    async def save(self, schedule: TravelSchedule) -> TravelSchedule:
        """Persist a schedule and return it with its assigned identifier."""
        ...
