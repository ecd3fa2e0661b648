"""Uvicorn-backed web adapter serving the schedule API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from travel_schedules.adapters.config import AppConfig

from .schedule_routes import create_app

if TYPE_CHECKING:
    from travel_schedules.domain.ports import (
        ScheduleCreationService,
        ScheduleSearchService,
        StationDirectory,
    )

logger = logging.getLogger(__name__)


class ScheduleWebAdapter:
    """Serves the schedule API over HTTP until stopped."""

    def __init__(
        self,
        search_service: ScheduleSearchService,
        creation_service: ScheduleCreationService,
        station_directory: StationDirectory,
        config: AppConfig,
    ) -> None:
        """Initialize the web adapter.

        Args:
            search_service: Service answering schedule searches.
            creation_service: Service registering new schedules.
            station_directory: Directory listing the known stations.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        # Protocols can't be checked with isinstance, verify required methods exist
        if not callable(getattr(search_service, "search", None)):
            raise TypeError("search_service must implement ScheduleSearchService protocol")
        if not callable(getattr(creation_service, "create", None)):
            raise TypeError("creation_service must implement ScheduleCreationService protocol")

        self.config = config
        self.app = create_app(
            search_service,
            creation_service,
            station_directory,
            rate_limit_per_minute=config.rate_limit_per_minute,
        )
        self._server: Any | None = None

    async def start(self) -> None:
        """Start the web server and block until it exits."""
        import uvicorn

        server_config = uvicorn.Config(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Serving schedule API on {self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Ask the web server to exit."""
        if self._server:
            self._server.should_exit = True
