"""Travel schedule domain model."""

from dataclasses import dataclass
from datetime import datetime

from travel_schedules.domain.models.station import Station


@dataclass(frozen=True)
class TravelSchedule:
    """A directed trip between two stations with an estimated arrival time.

    ``schedule_id`` stays ``None`` until a schedule store has persisted the record.
    """

    source: Station
    destination: Station
    estimated_arrival_time: datetime | None = None
    schedule_id: str | None = None
