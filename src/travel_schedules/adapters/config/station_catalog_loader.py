"""Station catalog loader."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from travel_schedules.adapters.config.app_config import AppConfig
from travel_schedules.domain.models.station import Station
from travel_schedules.domain.models.travel_schedule import TravelSchedule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StationCatalog:
    """Stations and seed schedules read from the TOML file."""

    stations: list[Station]
    schedules: list[TravelSchedule]


class StationCatalogLoader:
    """Loads the station catalog and seed schedules from app config.

    Expected layout::

        [[stations]]
        code = "MUC"
        name = "München Hbf"

        [[schedules]]
        source = "MUC"
        destination = "NUE"
        estimated_arrival_time = 2026-10-20T09:30:00
    """

    @staticmethod
    def load(config: AppConfig) -> StationCatalog:
        """Load the catalog from the file named in ``config.config_file``."""
        return StationCatalogLoader.parse(config.load_toml_data(), ZoneInfo(config.timezone))

    @staticmethod
    def parse(toml_data: dict[str, Any], tz: ZoneInfo) -> StationCatalog:
        """Build a catalog from already-parsed TOML data.

        Naive arrival times are interpreted in ``tz``.

        Raises:
            ValueError: On duplicate station codes, unknown station references,
                or malformed entries.
        """
        stations_data = toml_data.get("stations", [])
        schedules_data = toml_data.get("schedules", [])
        if not isinstance(stations_data, list):
            raise ValueError("TOML config 'stations' must be a list")
        if not isinstance(schedules_data, list):
            raise ValueError("TOML config 'schedules' must be a list")

        stations_by_code: dict[str, Station] = {}
        for station_data in stations_data:
            code = station_data.get("code") if isinstance(station_data, dict) else None
            if not code or not isinstance(code, str):
                raise ValueError(f"Station entry needs a 'code': {station_data!r}")
            if code in stations_by_code:
                raise ValueError(f"Station codes must be unique. Duplicate code: {code}")
            name = station_data.get("name") or code
            stations_by_code[code] = Station(code=code, name=str(name))

        schedules: list[TravelSchedule] = []
        for schedule_data in schedules_data:
            if not isinstance(schedule_data, dict):
                raise ValueError(f"Schedule entry must be a table: {schedule_data!r}")
            source = stations_by_code.get(schedule_data.get("source", ""))
            destination = stations_by_code.get(schedule_data.get("destination", ""))
            if source is None or destination is None:
                raise ValueError(f"Schedule references an unknown station: {schedule_data!r}")
            if source == destination:
                raise ValueError(f"Schedule source and destination must differ: {schedule_data!r}")
            schedules.append(
                TravelSchedule(
                    source=source,
                    destination=destination,
                    estimated_arrival_time=_parse_arrival(
                        schedule_data.get("estimated_arrival_time"), tz
                    ),
                )
            )

        logger.info(
            f"Loaded {len(stations_by_code)} station(s) and {len(schedules)} schedule(s)"
        )
        return StationCatalog(stations=list(stations_by_code.values()), schedules=schedules)


def _parse_arrival(value: Any, tz: ZoneInfo) -> datetime:
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise ValueError(f"Invalid estimated_arrival_time: {value!r}") from e
    if not isinstance(value, datetime):
        raise ValueError(f"Schedule needs an estimated_arrival_time, got {value!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz)
    return value
