"""Search window domain model."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class WindowStatus(Enum):
    """Whether a requested date can be searched at all."""

    PAST = "past"
    BEYOND_HORIZON = "beyond_horizon"
    OPEN = "open"


@dataclass(frozen=True)
class SearchWindow:
    """Time range in which schedules for a requested date are searchable.

    ``effective_instant`` is the earliest arrival time a schedule may have, and
    ``horizon`` the latest, both in UTC. For past dates there is no effective
    instant.
    """

    search_date: date
    today: date
    now: datetime
    effective_instant: datetime | None
    horizon: datetime
    status: WindowStatus
