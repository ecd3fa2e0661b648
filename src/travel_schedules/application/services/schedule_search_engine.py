"""Schedule availability search."""

import logging
import re
from datetime import date, timedelta
from http import HTTPStatus
from typing import TYPE_CHECKING

from travel_schedules.application.services.search_window import (
    DEFAULT_LEAD_TIME,
    DEFAULT_MAX_SEARCH_DAYS,
    compute_search_window,
)
from travel_schedules.domain.models import (
    ScheduleDTO,
    ScheduleSearchResult,
    SearchWindow,
    Station,
    WindowStatus,
)

if TYPE_CHECKING:
    from travel_schedules.domain.ports import Clock, ScheduleStore, StationDirectory

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

INVALID_INPUT_MESSAGE = "Invalid input parameters"
UNKNOWN_STATION_MESSAGE = "Invalid source or destination station code"
SAME_STATION_MESSAGE = "Source and destination station codes cannot be the same."
PAST_DATE_MESSAGE = (
    "No schedule is available for the date you searched for because it is in the past."
)
TOO_FAR_MESSAGE = (
    "No schedule is available for the date you searched for "
    "because it is more than one month in the future."
)
NO_SCHEDULE_MESSAGE = "No schedule is available for the date you searched for."


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date.

    Raises:
        ValueError: If ``value`` is not in that exact form or is not a real date.
    """
    if not ISO_DATE_RE.match(value):
        raise ValueError(f"Not an ISO calendar date: {value!r}")
    return date.fromisoformat(value)


class ScheduleSearchEngine:
    """Validates search requests and finds schedules inside the search window."""

    def __init__(
        self,
        station_directory: "StationDirectory",
        schedule_store: "ScheduleStore",
        clock: "Clock",
        lead_time: timedelta = DEFAULT_LEAD_TIME,
        max_search_days: int = DEFAULT_MAX_SEARCH_DAYS,
        log: logging.Logger | None = None,
    ) -> None:
        """Initialize with the station directory, schedule store and clock."""
        self._station_directory = station_directory
        self._schedule_store = schedule_store
        self._clock = clock
        self._lead_time = lead_time
        self._max_search_days = max_search_days
        self._logger = log or logger

    async def search(
        self,
        source_code: str | None,
        destination_code: str | None,
        date: str | None,
    ) -> tuple[ScheduleSearchResult, HTTPStatus]:
        """Search schedules between two stations on a calendar date.

        Validation stops at the first failing check. Every outcome, including
        invalid input, is returned as a result with a status; nothing is raised
        for bad input.

        Args:
            source_code: Code of the departure station.
            destination_code: Code of the arrival station.
            date: Requested date as ``YYYY-MM-DD``.

        Returns:
            The result with its message, and the HTTP status it maps to.
        """
        if source_code is None or destination_code is None or date is None:
            return self._reject(INVALID_INPUT_MESSAGE, HTTPStatus.BAD_REQUEST)

        if not destination_code.strip():
            return self._reject(
                f"Destination station code is null or empty. Source code: {source_code}",
                HTTPStatus.BAD_REQUEST,
            )

        if not source_code.strip():
            return self._reject(
                "Source station code is null or empty.", HTTPStatus.BAD_REQUEST
            )

        source = await self._station_directory.find_by_code(source_code)
        destination = await self._station_directory.find_by_code(destination_code)
        if source is None or destination is None:
            return self._reject(UNKNOWN_STATION_MESSAGE, HTTPStatus.NOT_FOUND)

        if source.code == destination.code:
            return self._reject(SAME_STATION_MESSAGE, HTTPStatus.BAD_REQUEST)

        try:
            search_date = parse_iso_date(date)
        except ValueError:
            return self._reject(
                "Invalid date format. The correct format is ISO date format (yyyy-MM-dd). "
                f"Source code: {source_code}, Date: {date}",
                HTTPStatus.BAD_REQUEST,
            )

        window = self._window_for(search_date)
        schedules = await self._find_in_window(source, destination, window)

        if not schedules:
            message = self._empty_result_message(window)
            self._logger.info(message)
            return ScheduleSearchResult(message=message, schedules=[]), HTTPStatus.NOT_FOUND

        message = f"Available schedules between {source.name} and {destination.name} on {date}"
        self._logger.info(message)
        return ScheduleSearchResult(message=message, schedules=schedules), HTTPStatus.OK

    async def find_schedules(
        self, source: Station, destination: Station, search_date: date
    ) -> list[ScheduleDTO]:
        """Find schedules for resolved stations inside the window of ``search_date``.

        Returns an empty list for past dates and for dates beyond the horizon.
        """
        return await self._find_in_window(source, destination, self._window_for(search_date))

    def _window_for(self, search_date: date) -> SearchWindow:
        return compute_search_window(
            search_date,
            self._clock.now(),
            lead_time=self._lead_time,
            max_search_days=self._max_search_days,
        )

    async def _find_in_window(
        self, source: Station, destination: Station, window: SearchWindow
    ) -> list[ScheduleDTO]:
        if window.status is WindowStatus.PAST:
            self._logger.warning("Cannot search for schedules in the past")
            return []

        if window.status is WindowStatus.BEYOND_HORIZON:
            self._logger.warning(
                f"Cannot search for schedules more than {self._max_search_days} days in the future"
            )
            return []

        records = await self._schedule_store.find_by_source_destination_after(
            source, destination, window.effective_instant,  # type: ignore[arg-type]
        )
        schedules = [
            ScheduleDTO.from_schedule(record)
            for record in records
            if record.estimated_arrival_time is not None
            and record.estimated_arrival_time <= window.horizon
        ]

        if not schedules:
            self._logger.warning("No available schedules found for the given search criteria")
        return schedules

    @staticmethod
    def _empty_result_message(window: SearchWindow) -> str:
        if window.status is WindowStatus.PAST:
            return PAST_DATE_MESSAGE
        if window.status is WindowStatus.BEYOND_HORIZON:
            return TOO_FAR_MESSAGE
        return NO_SCHEDULE_MESSAGE

    def _reject(
        self, message: str, status: HTTPStatus
    ) -> tuple[ScheduleSearchResult, HTTPStatus]:
        self._logger.warning(message)
        return ScheduleSearchResult(message=message, schedules=[]), status
