"""System clock adapter."""

from datetime import datetime
from zoneinfo import ZoneInfo

from travel_schedules.domain.ports.clock import Clock


class SystemClock(Clock):
    """Wall clock in a fixed IANA timezone."""

    def __init__(self, timezone: str = "Europe/Berlin") -> None:
        """Initialize with the timezone used for "today" and midnight boundaries."""
        self._tz = ZoneInfo(timezone)

    def now(self) -> datetime:
        """Return the current time in the configured timezone."""
        return datetime.now(self._tz)
