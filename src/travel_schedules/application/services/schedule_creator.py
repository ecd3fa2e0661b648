"""Schedule registration."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from travel_schedules.domain.errors import InvalidScheduleError, StationNotFoundError
from travel_schedules.domain.models import ScheduleCreateRequest, Station, TravelSchedule

if TYPE_CHECKING:
    from travel_schedules.domain.ports import Clock, ScheduleStore, StationDirectory

logger = logging.getLogger(__name__)


class ScheduleCreator:
    """Registers a new schedule between two existing stations."""

    def __init__(
        self,
        station_directory: "StationDirectory",
        schedule_store: "ScheduleStore",
        clock: "Clock",
        log: logging.Logger | None = None,
    ) -> None:
        """Initialize with the station directory, schedule store and clock.

        The clock supplies the timezone for arrival times given without one.
        """
        self._station_directory = station_directory
        self._schedule_store = schedule_store
        self._clock = clock
        self._logger = log or logger

    async def create(self, request: ScheduleCreateRequest) -> bool:
        """Resolve both stations and persist a schedule linking them.

        Returns:
            True if the store assigned an identifier to the saved schedule.

        Raises:
            StationNotFoundError: If either station code is unknown. Nothing is saved.
            InvalidScheduleError: If source and destination are the same station.
        """
        self._logger.info(f"Creating travel schedule: {request.model_dump_json()}")

        destination = await self._resolve(request.destination.station_code)
        source = await self._resolve(request.source.station_code)
        if source.code == destination.code:
            raise InvalidScheduleError(
                f"Source and destination must differ, both are {source.code!r}"
            )

        saved = await self._schedule_store.save(
            TravelSchedule(
                source=source,
                destination=destination,
                estimated_arrival_time=self._localize(request.estimated_arrival_time),
            )
        )

        self._logger.info(f"Created travel schedule {saved.schedule_id}")
        return bool(saved.schedule_id)

    async def _resolve(self, station_code: str) -> Station:
        station = await self._station_directory.find_by_code(station_code)
        if station is None:
            self._logger.warning(f"Unknown station code in schedule request: {station_code}")
            raise StationNotFoundError(station_code)
        return station

    def _localize(self, arrival: datetime | None) -> datetime | None:
        if arrival is None or arrival.tzinfo is not None:
            return arrival
        return arrival.replace(tzinfo=self._clock.now().tzinfo)
