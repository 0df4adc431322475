"""Unit tests for the zipcode-to-weather orchestration."""

from __future__ import annotations

from typing import List

import pytest

from models.weather import CombinedWeather, PostalLookupResult, WeatherReading
from services.errors import (
    ErrorKind,
    InvalidZipCodeError,
    ProviderError,
    ZipCodeNotFoundError,
)
from services.weather import get_weather


class StubLocationProvider:
    def __init__(self, result: PostalLookupResult | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: List[str] = []

    def resolve(self, code: str) -> PostalLookupResult:
        self.calls.append(code)
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


class StubWeatherProvider:
    def __init__(self, reading: WeatherReading | None = None, error: Exception | None = None) -> None:
        self.reading = reading
        self.error = error
        self.calls: List[str] = []

    def fetch(self, city: str) -> WeatherReading:
        self.calls.append(city)
        if self.error is not None:
            raise self.error
        assert self.reading is not None
        return self.reading


def test_get_weather_combines_lookups() -> None:
    location = StubLocationProvider(PostalLookupResult(city="TestCity", found=True))
    weather = StubWeatherProvider(WeatherReading(temp_celsius=25.0))

    result = get_weather(location, weather, "12345678")

    assert result == CombinedWeather(temp_c=25.0, temp_f=77.0, temp_k=298.0)
    assert location.calls == ["12345678"]
    assert weather.calls == ["TestCity"]


def test_get_weather_derives_fahrenheit_from_celsius() -> None:
    location = StubLocationProvider(PostalLookupResult(city="Recife", found=True))
    weather = StubWeatherProvider(WeatherReading(temp_celsius=28.3))

    result = get_weather(location, weather, "50030230")

    assert result.temp_f == 82.94
    assert result.temp_k == 301.3


def test_get_weather_propagates_invalid_zipcode() -> None:
    error = InvalidZipCodeError()
    location = StubLocationProvider(error=error)
    weather = StubWeatherProvider()

    with pytest.raises(InvalidZipCodeError) as excinfo:
        get_weather(location, weather, "123")

    assert excinfo.value is error
    assert excinfo.value.kind is ErrorKind.invalid_zipcode
    assert weather.calls == []


def test_get_weather_raises_not_found_when_lookup_has_no_match() -> None:
    location = StubLocationProvider(PostalLookupResult(city="", found=False))
    weather = StubWeatherProvider()

    with pytest.raises(ZipCodeNotFoundError) as excinfo:
        get_weather(location, weather, "99999999")

    assert excinfo.value.kind is ErrorKind.zipcode_not_found
    assert excinfo.value.kind is not ErrorKind.invalid_zipcode
    assert str(excinfo.value) == "can not find zipcode"
    assert weather.calls == []


def test_get_weather_propagates_weather_failures() -> None:
    error = ProviderError("weather service unavailable")
    location = StubLocationProvider(PostalLookupResult(city="TestCity", found=True))
    weather = StubWeatherProvider(error=error)

    with pytest.raises(ProviderError) as excinfo:
        get_weather(location, weather, "12345678")

    assert excinfo.value is error
