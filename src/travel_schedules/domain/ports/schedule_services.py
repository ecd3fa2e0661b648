"""Schedule use case ports, consumed by the delivery adapters."""

from http import HTTPStatus
from typing import Protocol

from travel_schedules.domain.models.schedule_dto import (
    ScheduleCreateRequest,
    ScheduleSearchResult,
)


class ScheduleSearchService(Protocol):
    """Port for searching schedules between two stations."""

    async def search(
        self,
        source_code: str | None,
        destination_code: str | None,
        date: str | None,
    ) -> tuple[ScheduleSearchResult, HTTPStatus]:
        """Search schedules for a station pair on a ``YYYY-MM-DD`` date.

        Never raises for bad input; invalid requests come back as a result with
        a 400 or 404 status.
        """
        ...


class ScheduleCreationService(Protocol):
    """Port for registering schedules."""

    async def create(self, request: ScheduleCreateRequest) -> bool:
        """Register a schedule and report whether it was assigned an identifier."""
        ...
