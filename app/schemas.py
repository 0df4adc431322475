"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from models.weather import CombinedWeather


class WeatherResponse(BaseModel):
    """Current temperature for the city behind a zipcode."""

    model_config = ConfigDict(populate_by_name=True)

    temp_c: float = Field(..., alias="temp_C", description="Temperature in Celsius.")
    temp_f: float = Field(..., alias="temp_F", description="Temperature in Fahrenheit.")
    temp_k: float = Field(..., alias="temp_K", description="Temperature in Kelvin.")

    @classmethod
    def from_combined(cls, weather: CombinedWeather) -> WeatherResponse:
        return cls(temp_c=weather.temp_c, temp_f=weather.temp_f, temp_k=weather.temp_k)


class HealthResponse(BaseModel):
    status: str
    detail: str | None = None
