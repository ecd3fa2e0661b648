"""Domain errors raised by the schedule use cases."""


class ScheduleCreationError(Exception):
    """Base class for failures while registering a schedule."""


class StationNotFoundError(ScheduleCreationError):
    """Raised when a station code does not resolve to a known station."""

    def __init__(self, station_code: str) -> None:
        super().__init__(f"Station not found: {station_code!r}")
        self.station_code = station_code


class InvalidScheduleError(ScheduleCreationError):
    """Raised when a schedule would violate a domain invariant."""
