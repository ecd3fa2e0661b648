"""Main entry point for the travel schedules service."""

import asyncio
import logging
import sys

from travel_schedules.adapters.config import AppConfig
from travel_schedules.adapters.web import ScheduleWebAdapter
from travel_schedules.bootstrap import build_services

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    try:
        services = await build_services(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid station catalog: {e}")
        logger.error("Set CONFIG_FILE or copy config.example.toml and customize it.")
        sys.exit(1)

    stations = await services.station_directory.list_stations()
    logger.info(f"Loaded {len(stations)} station(s) and {len(services.schedule_store)} schedule(s)")

    web_adapter = ScheduleWebAdapter(
        services.search_engine,
        services.creator,
        services.station_directory,
        config,
    )

    try:
        await web_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
