"""HTTP adapters for the zipcode and weather upstream APIs."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Protocol

import httpx

from models.weather import PostalLookupResult, WeatherReading
from services.errors import ConfigurationError, InvalidZipCodeError, ProviderError
from services.normalize import strip_accents
from settings import get_settings

logger = logging.getLogger(__name__)

ZIPCODE_LENGTH = 8


class LocationProvider(Protocol):
    def resolve(self, code: str) -> PostalLookupResult:
        """Resolve a zipcode to a city, flagging unknown codes as not found."""


class WeatherProvider(Protocol):
    def fetch(self, city: str) -> WeatherReading:
        """Fetch the current temperature for a city."""


def _get_json(client: httpx.Client, path: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    try:
        response = client.get(path, params=params)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as exc:
        raise ProviderError(
            f"{exc.request.url.host} responded with status {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise ProviderError(f"request to {client.base_url.host} failed: {exc}") from exc
    except ValueError as exc:
        raise ProviderError(f"{client.base_url.host} returned an invalid JSON body") from exc

    if not isinstance(payload, dict):
        raise ProviderError(f"unexpected response shape from {client.base_url.host}")
    return payload


def _is_error_flag(value: Any) -> bool:
    # ViaCEP has answered both ``"erro": true`` and ``"erro": "true"``.
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


class ViaCepLocationProvider:
    """Resolves Brazilian zipcodes (CEP) through the ViaCEP API."""

    def __init__(
        self,
        base_url: str,
        timeout: float,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def resolve(self, code: str) -> PostalLookupResult:
        if len(code) != ZIPCODE_LENGTH:
            raise InvalidZipCodeError()

        payload = _get_json(self._client, f"/ws/{code}/json")
        if _is_error_flag(payload.get("erro", False)):
            logger.info("Zipcode lookup returned no match", extra={"zipcode": code})
            return PostalLookupResult(city="", found=False)

        city = payload.get("localidade")
        if not isinstance(city, str) or not city.strip():
            raise ProviderError("zipcode lookup response did not include a city")
        return PostalLookupResult(city=city, found=True)


def _coerce_temperature(current: Dict[str, Any], field_name: str) -> float:
    value = current.get(field_name)
    if isinstance(value, bool):
        raise ProviderError(f"invalid numeric value for current.{field_name}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ProviderError(f"invalid numeric value for current.{field_name}") from exc


class WeatherApiProvider:
    """Fetches current conditions from weatherapi.com."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        timeout: float,
        client: Optional[httpx.Client] = None,
        normalizer: Callable[[str], str] = strip_accents,
    ) -> None:
        self._api_key = api_key
        self._normalizer = normalizer
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def fetch(self, city: str) -> WeatherReading:
        if not self._api_key or not self._api_key.strip():
            raise ConfigurationError("weather api key not found")

        params = {"key": self._api_key, "q": self._normalizer(city), "aqi": "no"}
        payload = _get_json(self._client, "/current.json", params=params)
        current = payload.get("current")
        if not isinstance(current, dict):
            raise ProviderError("weather response did not include current conditions")

        temp_c = _coerce_temperature(current, "temp_c")
        return WeatherReading(temp_celsius=temp_c)


@lru_cache
def build_default_location_provider() -> ViaCepLocationProvider:
    """Factory that wires the ViaCEP adapter from settings."""
    settings = get_settings()
    return ViaCepLocationProvider(
        base_url=settings.zipcode_api_base_url,
        timeout=settings.http_timeout,
    )


@lru_cache
def build_default_weather_provider() -> WeatherApiProvider:
    """Factory that wires the weatherapi.com adapter from settings."""
    settings = get_settings()
    return WeatherApiProvider(
        base_url=settings.weather_api_base_url,
        api_key=settings.weather_api_key,
        timeout=settings.http_timeout,
    )
