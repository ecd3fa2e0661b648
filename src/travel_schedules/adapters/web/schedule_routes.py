"""HTTP routes for the schedule search and creation use cases."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from travel_schedules.domain.errors import (
    InvalidScheduleError,
    ScheduleCreationError,
    StationNotFoundError,
)
from travel_schedules.domain.models import ErrorDetails, ScheduleCreateRequest, StationDTO

from .rate_limit_middleware import RateLimitMiddleware

if TYPE_CHECKING:
    from starlette.requests import Request

    from travel_schedules.domain.ports import (
        ScheduleCreationService,
        ScheduleSearchService,
        StationDirectory,
    )

logger = logging.getLogger(__name__)


def _error_response(status: HTTPStatus, reason: str) -> JSONResponse:
    details = ErrorDetails(status_code=int(status), reason=reason)
    return JSONResponse(details.model_dump(), status_code=int(status))


def _creation_error_status(error: ScheduleCreationError) -> HTTPStatus:
    if isinstance(error, StationNotFoundError):
        return HTTPStatus.NOT_FOUND
    if isinstance(error, InvalidScheduleError):
        return HTTPStatus.BAD_REQUEST
    return HTTPStatus.INTERNAL_SERVER_ERROR


def create_app(
    search_service: ScheduleSearchService,
    creation_service: ScheduleCreationService,
    station_directory: StationDirectory,
    rate_limit_per_minute: int | None = None,
) -> Starlette:
    """Build the Starlette application exposing the schedule API.

    Args:
        search_service: Use case behind ``GET /schedules``.
        creation_service: Use case behind ``POST /schedules``.
        station_directory: Source for ``GET /stations``.
        rate_limit_per_minute: Per-IP quota; no limiting when ``None``.
    """

    async def search_schedules(request: Request) -> Response:
        params = request.query_params
        result, status = await search_service.search(
            params.get("sourceCode"),
            params.get("destinationCode"),
            params.get("date"),
        )
        return JSONResponse(result.model_dump(mode="json", by_alias=True), status_code=int(status))

    async def create_schedule(request: Request) -> Response:
        try:
            payload = await request.json()
            schedule_request = ScheduleCreateRequest.model_validate(payload)
        except (ValueError, ValidationError) as e:
            logger.warning(f"Rejected schedule payload: {e}")
            return _error_response(HTTPStatus.BAD_REQUEST, f"Invalid schedule payload: {e}")

        try:
            created = await creation_service.create(schedule_request)
        except ScheduleCreationError as e:
            return _error_response(_creation_error_status(e), str(e))

        status = HTTPStatus.CREATED if created else HTTPStatus.INTERNAL_SERVER_ERROR
        return JSONResponse(created, status_code=int(status))

    async def list_stations(_request: Request) -> Response:
        stations = await station_directory.list_stations()
        return JSONResponse(
            [StationDTO.from_station(s).model_dump(by_alias=True) for s in stations]
        )

    async def healthz(_request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    app = Starlette(
        routes=[
            Route("/schedules", search_schedules, methods=["GET"]),
            Route("/schedules", create_schedule, methods=["POST"]),
            Route("/stations", list_stations, methods=["GET"]),
            Route("/healthz", healthz, methods=["GET"]),
        ]
    )
    if rate_limit_per_minute is not None:
        app.add_middleware(RateLimitMiddleware, requests_per_minute=rate_limit_per_minute)
    return app
