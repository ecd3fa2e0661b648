"""In-memory schedule store."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import TYPE_CHECKING

from travel_schedules.domain.ports.schedule_store import ScheduleStore

if TYPE_CHECKING:
    from datetime import datetime

    from travel_schedules.domain.models.station import Station
    from travel_schedules.domain.models.travel_schedule import TravelSchedule

logger = logging.getLogger(__name__)


class InMemoryScheduleStore(ScheduleStore):
    """Schedule store that keeps saved schedules in insertion order."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._schedules: dict[str, TravelSchedule] = {}

    async def find_by_source_destination_after(
        self, source: Station, destination: Station, after: datetime
    ) -> list[TravelSchedule]:
        """Find schedules for a station pair arriving strictly after ``after``.

        Results are ordered by arrival time.
        """
        matches = [
            s
            for s in self._schedules.values()
            if s.source.code == source.code
            and s.destination.code == destination.code
            and s.estimated_arrival_time is not None
            and s.estimated_arrival_time > after
        ]
        return sorted(matches, key=lambda s: s.estimated_arrival_time)  # type: ignore[arg-type,return-value]

    async def save(self, schedule: TravelSchedule) -> TravelSchedule:
        """Persist a schedule, assigning a new identifier if it has none."""
        saved = schedule if schedule.schedule_id else replace(schedule, schedule_id=uuid.uuid4().hex)
        self._schedules[saved.schedule_id] = saved  # type: ignore[index]
        logger.debug(f"Stored schedule {saved.schedule_id}")
        return saved

    def __len__(self) -> int:
        return len(self._schedules)
