"""In-memory station directory."""

from travel_schedules.domain.models.station import Station
from travel_schedules.domain.ports.station_directory import StationDirectory


class InMemoryStationDirectory(StationDirectory):
    """Station directory backed by a dict keyed by station code."""

    def __init__(self, stations: list[Station] | None = None) -> None:
        """Initialize with an optional list of stations."""
        self._stations: dict[str, Station] = {s.code: s for s in stations or []}

    async def find_by_code(self, code: str) -> Station | None:
        """Find a station by its unique code."""
        return self._stations.get(code)

    async def list_stations(self) -> list[Station]:
        """Return all known stations, sorted by code."""
        return sorted(self._stations.values(), key=lambda s: s.code)
