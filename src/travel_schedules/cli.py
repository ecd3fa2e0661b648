"""Command-line access to schedule search and registration."""

import asyncio
import json
import sys
from datetime import datetime
from http import HTTPStatus
from typing import Any

from travel_schedules.adapters.config import AppConfig
from travel_schedules.bootstrap import Services, build_services
from travel_schedules.domain.errors import ScheduleCreationError
from travel_schedules.domain.models import ScheduleCreateRequest, StationDTO


async def search_command(services: Services, args: Any) -> int:
    """Run a schedule search and print the result as JSON."""
    result, status = await services.search_engine.search(args.source, args.destination, args.date)
    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
    return 0 if status is HTTPStatus.OK else 1


async def create_command(services: Services, args: Any) -> int:
    """Register a schedule and report the outcome."""
    try:
        arrival = datetime.fromisoformat(args.arrival) if args.arrival else None
    except ValueError:
        print(f"Invalid arrival time: {args.arrival}", file=sys.stderr)
        return 1

    request = ScheduleCreateRequest(
        source=StationDTO(station_code=args.source),
        destination=StationDTO(station_code=args.destination),
        estimated_arrival_time=arrival,
    )
    try:
        created = await services.creator.create(request)
    except ScheduleCreationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Created" if created else "Not created")
    return 0 if created else 1


async def stations_command(services: Services, _args: Any) -> int:
    """Print all known stations."""
    stations = await services.station_directory.list_stations()
    if not stations:
        print("No stations configured.")
        return 0
    for station in stations:
        print(f"{station.code:10} {station.name}")
    return 0


def _setup_argparse() -> Any:
    """Build the argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Search and register travel schedules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  travel-schedules stations
  travel-schedules search MUC NUE 2026-10-20
  travel-schedules create MUC NUE --arrival 2026-10-20T09:30:00
        """,
    )
    parser.add_argument(
        "--config", help="TOML file with the station catalog (overrides CONFIG_FILE)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    search_parser = subparsers.add_parser("search", help="Search schedules between two stations")
    search_parser.add_argument("source", help="Source station code")
    search_parser.add_argument("destination", help="Destination station code")
    search_parser.add_argument("date", help="Date as YYYY-MM-DD")

    create_parser = subparsers.add_parser("create", help="Register a new schedule")
    create_parser.add_argument("source", help="Source station code")
    create_parser.add_argument("destination", help="Destination station code")
    create_parser.add_argument("--arrival", help="Estimated arrival time (ISO 8601)")

    subparsers.add_parser("stations", help="List known stations")
    return parser


COMMANDS = {
    "search": search_command,
    "create": create_command,
    "stations": stations_command,
}


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig(config_file=args.config) if args.config else AppConfig()
    try:
        services = await build_services(config)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error loading station catalog: {e}", file=sys.stderr)
        return 1

    return await COMMANDS[args.command](services, args)


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
