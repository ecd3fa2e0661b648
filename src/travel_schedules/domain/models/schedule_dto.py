"""Transport-facing schedule models.

These are the shapes exchanged with callers. Field names are snake_case in
Python and camelCase on the wire (``stationCode``, ``estimatedArrivalTime``).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from travel_schedules.domain.models.station import Station
from travel_schedules.domain.models.travel_schedule import TravelSchedule

_WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StationDTO(BaseModel):
    """A station reference as sent and received by callers."""

    model_config = _WIRE_CONFIG

    station_code: str
    name: str | None = None

    @classmethod
    def from_station(cls, station: Station) -> "StationDTO":
        return cls(station_code=station.code, name=station.name)


class ScheduleDTO(BaseModel):
    """A schedule as returned in search results."""

    model_config = _WIRE_CONFIG

    schedule_id: str | None = None
    source: StationDTO
    destination: StationDTO
    estimated_arrival_time: datetime | None = None

    @classmethod
    def from_schedule(cls, schedule: TravelSchedule) -> "ScheduleDTO":
        return cls(
            schedule_id=schedule.schedule_id,
            source=StationDTO.from_station(schedule.source),
            destination=StationDTO.from_station(schedule.destination),
            estimated_arrival_time=schedule.estimated_arrival_time,
        )


class ScheduleCreateRequest(BaseModel):
    """Payload for registering a new schedule between two known stations."""

    model_config = _WIRE_CONFIG

    source: StationDTO
    destination: StationDTO
    estimated_arrival_time: datetime | None = None


class ScheduleSearchResult(BaseModel):
    """Outcome of a schedule search.

    ``message`` always explains why ``schedules`` has its contents: a success,
    a past date, a date beyond the search horizon, or no match.
    """

    model_config = _WIRE_CONFIG

    message: str
    schedules: list[ScheduleDTO] = Field(default_factory=list)
