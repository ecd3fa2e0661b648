"""Tests for configuration adapters."""

from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from travel_schedules.adapters.config import AppConfig, StationCatalogLoader

BERLIN = ZoneInfo("Europe/Berlin")

CATALOG_TOML = """
[[stations]]
code = "MUC"
name = "München Hbf"

[[stations]]
code = "NUE"
name = "Nürnberg Hbf"

[[schedules]]
source = "MUC"
destination = "NUE"
estimated_arrival_time = 2026-10-20T09:30:00
"""


def test_config_loads_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    monkeypatch.chdir(tmp_path)

    config = AppConfig()

    assert config.host == "0.0.0.0"
    assert config.port == 8000
    assert config.log_level == "INFO"
    assert config.timezone == "Europe/Berlin"
    assert config.max_search_days == 30
    assert config.lead_time_minutes == 60


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("MAX_SEARCH_DAYS", "14")
    monkeypatch.setenv("TIMEZONE", "Europe/London")

    config = AppConfig()

    assert config.port == 9000
    assert config.log_level == "DEBUG"
    assert config.max_search_days == 14
    assert config.timezone == "Europe/London"


@pytest.mark.parametrize(
    ("env_name", "value", "message"),
    [
        ("LOG_LEVEL", "chatty", "log_level must be"),
        ("TIMEZONE", "Mars/Olympus_Mons", "timezone must be"),
        ("MAX_SEARCH_DAYS", "0", "max_search_days must be at least 1"),
        ("LEAD_TIME_MINUTES", "-5", "lead_time_minutes must not be negative"),
    ],
)
def test_config_validates_values(
    monkeypatch: pytest.MonkeyPatch, env_name: str, value: str, message: str
) -> None:
    """Given an invalid value, when loading config, then a validation error is raised."""
    monkeypatch.setenv(env_name, value)

    with pytest.raises(ValueError, match=message):
        AppConfig()


def test_missing_config_file_raises(tmp_path: Path) -> None:
    """Given a path that does not exist, when loading TOML, then FileNotFoundError is raised."""
    config = AppConfig(config_file=str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError):
        config.load_toml_data()


def test_catalog_loads_from_toml_file(tmp_path: Path) -> None:
    """Given a TOML catalog file, when loading, then stations and schedules are built."""
    path = tmp_path / "catalog.toml"
    path.write_text(CATALOG_TOML, encoding="utf-8")

    catalog = StationCatalogLoader.load(AppConfig(config_file=str(path)))

    assert [s.code for s in catalog.stations] == ["MUC", "NUE"]
    assert len(catalog.schedules) == 1
    schedule = catalog.schedules[0]
    assert schedule.source.name == "München Hbf"
    assert schedule.estimated_arrival_time == datetime(2026, 10, 20, 9, 30, tzinfo=BERLIN)
    assert schedule.schedule_id is None


def test_catalog_keeps_explicit_offsets() -> None:
    """Given an arrival with an offset, when parsing, then the offset is kept."""
    data = {
        "stations": [{"code": "A", "name": "Alpha"}, {"code": "B"}],
        "schedules": [
            {"source": "A", "destination": "B", "estimated_arrival_time": "2026-10-20T09:30:00+00:00"}
        ],
    }

    catalog = StationCatalogLoader.parse(data, BERLIN)

    arrival = catalog.schedules[0].estimated_arrival_time
    assert arrival is not None
    assert arrival.utcoffset() is not None
    assert arrival.utcoffset().total_seconds() == 0  # type: ignore[union-attr]
    assert catalog.stations[1].name == "B"


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ({"stations": [{"code": "A"}, {"code": "A"}]}, "Duplicate code: A"),
        ({"stations": [{"name": "No code"}]}, "needs a 'code'"),
        (
            {"stations": [{"code": "A"}], "schedules": [{"source": "A", "destination": "Z"}]},
            "unknown station",
        ),
        (
            {
                "stations": [{"code": "A"}],
                "schedules": [{"source": "A", "destination": "A"}],
            },
            "must differ",
        ),
        (
            {
                "stations": [{"code": "A"}, {"code": "B"}],
                "schedules": [{"source": "A", "destination": "B"}],
            },
            "needs an estimated_arrival_time",
        ),
        (
            {
                "stations": [{"code": "A"}, {"code": "B"}],
                "schedules": [
                    {"source": "A", "destination": "B", "estimated_arrival_time": "soon"}
                ],
            },
            "Invalid estimated_arrival_time",
        ),
        ({"stations": {"code": "A"}}, "'stations' must be a list"),
    ],
)
def test_catalog_rejects_invalid_data(data: dict, message: str) -> None:
    """Given malformed catalog data, when parsing, then ValueError names the problem."""
    with pytest.raises(ValueError, match=message):
        StationCatalogLoader.parse(data, BERLIN)
