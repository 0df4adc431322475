from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging
from services.providers import build_default_location_provider, build_default_weather_provider


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    # Built before serving so threadpool requests never race to create clients.
    providers = (build_default_location_provider(), build_default_weather_provider())
    try:
        yield
    finally:
        for provider in providers:
            provider.close()
        build_default_location_provider.cache_clear()
        build_default_weather_provider.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Zipcode Weather",
        description="Current temperature in Celsius, Fahrenheit and Kelvin for a Brazilian zipcode.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()
