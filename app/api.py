"""HTTP route definitions for the service."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from app.schemas import HealthResponse, WeatherResponse
from services.errors import ErrorKind, WeatherServiceError
from services.providers import (
    LocationProvider,
    WeatherProvider,
    build_default_location_provider,
    build_default_weather_provider,
)
from services.weather import get_weather

logger = logging.getLogger(__name__)

router = APIRouter()

_STATUS_BY_KIND = {
    ErrorKind.invalid_zipcode: 422,
    ErrorKind.zipcode_not_found: status.HTTP_404_NOT_FOUND,
}


def get_location_provider() -> LocationProvider:
    return build_default_location_provider()


def get_weather_provider() -> WeatherProvider:
    return build_default_weather_provider()


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


@router.get(
    "/weather",
    response_model=WeatherResponse,
    summary="Current temperature for the city behind a zipcode.",
    responses={
        status.HTTP_404_NOT_FOUND: {"description": "can not find zipcode"},
        422: {"description": "invalid zipcode"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Upstream or configuration failure."},
    },
)
def read_weather(
    zipcode: str = Query("", description="8-character zipcode (CEP)."),
    location_provider: LocationProvider = Depends(get_location_provider),
    weather_provider: WeatherProvider = Depends(get_weather_provider),
) -> Response:
    # Sync endpoint: the provider calls block, so FastAPI runs this in its threadpool.
    start = time.perf_counter()
    try:
        weather = get_weather(location_provider, weather_provider, zipcode)
    except WeatherServiceError as exc:
        status_code = _STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
        log = logger.error if status_code >= 500 else logger.info
        log(
            "Weather lookup failed: %s",
            exc,
            extra={
                "zipcode": zipcode,
                "status": status_code,
                "error_kind": exc.kind.value,
                "elapsed_ms": _elapsed_ms(start),
            },
        )
        return PlainTextResponse(str(exc), status_code=status_code)

    payload = WeatherResponse.from_combined(weather).model_dump(by_alias=True)
    try:
        response = JSONResponse(payload)
    except ValueError as exc:
        logger.error(
            "Failed to serialize weather response: %s",
            exc,
            extra={"zipcode": zipcode, "status": status.HTTP_500_INTERNAL_SERVER_ERROR},
        )
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(
        "Weather lookup succeeded",
        extra={
            "zipcode": zipcode,
            "status": status.HTTP_200_OK,
            "temp_c": weather.temp_c,
            "elapsed_ms": _elapsed_ms(start),
        },
    )
    return response


@router.get(
    "/health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> HealthResponse:
    return HealthResponse(status="ok")


@router.get(
    "/",
    response_model=HealthResponse,
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> HealthResponse:
    return HealthResponse(status="ok", detail="See /health for service status.")
