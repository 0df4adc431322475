"""Combines the zipcode and weather lookups into a single reading."""

from __future__ import annotations

import logging

from models.weather import CombinedWeather
from services.conversion import to_fahrenheit, to_kelvin
from services.errors import ZipCodeNotFoundError
from services.providers import LocationProvider, WeatherProvider

logger = logging.getLogger(__name__)


def get_weather(
    location_provider: LocationProvider,
    weather_provider: WeatherProvider,
    code: str,
) -> CombinedWeather:
    """Resolve ``code`` to a city and report its temperature in C, F and K.

    Provider failures propagate untouched so callers can still tell an
    invalid zipcode apart from an upstream outage. A lookup flagged as not
    found is the only result translated here, into
    :class:`~services.errors.ZipCodeNotFoundError`.
    """
    location = location_provider.resolve(code)
    if not location.found:
        raise ZipCodeNotFoundError()

    reading = weather_provider.fetch(location.city)
    temp_c = reading.temp_celsius
    logger.debug(
        "Fetched current temperature",
        extra={"zipcode": code, "city": location.city, "temp_c": temp_c},
    )
    return CombinedWeather(
        temp_c=temp_c,
        temp_f=to_fahrenheit(temp_c),
        temp_k=to_kelvin(temp_c),
    )
