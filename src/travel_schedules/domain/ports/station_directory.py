"""Station directory port."""

from typing import Protocol

from travel_schedules.domain.models.station import Station


class StationDirectory(Protocol):
    """Port for looking up stations."""

    async def find_by_code(self, code: str) -> Station | None:
        """Find a station by its unique code."""
        ...

    async def list_stations(self) -> list[Station]:
        """Return all known stations."""
        ...
