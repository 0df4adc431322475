from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_WEATHER_API_KEY_ENV = "WEATHER_API_KEY"
_WEATHER_API_BASE_URL_ENV = "WEATHER_API_BASE_URL"
_ZIPCODE_API_BASE_URL_ENV = "ZIPCODE_API_BASE_URL"
_HTTP_TIMEOUT_ENV = "HTTP_TIMEOUT_SECONDS"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_WEATHER_API_BASE_URL = "http://api.weatherapi.com/v1"
DEFAULT_ZIPCODE_API_BASE_URL = "http://viacep.com.br"
DEFAULT_HTTP_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    weather_api_key: Optional[str]
    weather_api_base_url: str
    zipcode_api_base_url: str
    http_timeout: float
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_url_env(name: str, default: str) -> str:
    return _read_str_env(name, default).rstrip("/")


def _read_timeout(default: float) -> float:
    value = os.getenv(_HTTP_TIMEOUT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        weather_api_key=_read_optional_env(_WEATHER_API_KEY_ENV, None),
        weather_api_base_url=_read_url_env(
            _WEATHER_API_BASE_URL_ENV, DEFAULT_WEATHER_API_BASE_URL
        ),
        zipcode_api_base_url=_read_url_env(
            _ZIPCODE_API_BASE_URL_ENV, DEFAULT_ZIPCODE_API_BASE_URL
        ),
        http_timeout=_read_timeout(DEFAULT_HTTP_TIMEOUT),
        log_level=_read_log_level("INFO"),
    )
