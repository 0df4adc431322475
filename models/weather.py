"""Domain values passed between the providers and the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PostalLookupResult:
    """Outcome of resolving a zipcode to a city."""

    city: str
    found: bool


@dataclass(frozen=True, slots=True)
class WeatherReading:
    """Current conditions reported by the weather provider."""

    temp_celsius: float


@dataclass(frozen=True, slots=True)
class CombinedWeather:
    temp_c: float
    temp_f: float
    temp_k: float
