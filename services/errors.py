"""Error taxonomy shared by the providers, orchestrator and HTTP layer."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Discriminant used to map a failure onto an HTTP status."""

    invalid_zipcode = "invalid_zipcode"
    zipcode_not_found = "zipcode_not_found"
    configuration = "configuration"
    provider = "provider"


class WeatherServiceError(Exception):
    """Base class for every failure raised while answering a weather lookup."""

    kind: ErrorKind = ErrorKind.provider
    default_message: str = "weather lookup failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class InvalidZipCodeError(WeatherServiceError):
    """Raised before any lookup when the zipcode is malformed."""

    kind = ErrorKind.invalid_zipcode
    default_message = "invalid zipcode"


class ZipCodeNotFoundError(WeatherServiceError):
    """Raised when a well-formed zipcode has no matching location."""

    kind = ErrorKind.zipcode_not_found
    default_message = "can not find zipcode"


class ConfigurationError(WeatherServiceError):
    """Raised when a provider is missing a required credential."""

    kind = ErrorKind.configuration
    default_message = "provider is not configured"


class ProviderError(WeatherServiceError):
    """Raised on transport, status or payload failures from an upstream API."""

    kind = ErrorKind.provider
    default_message = "upstream provider request failed"
