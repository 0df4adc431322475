from __future__ import annotations

import logging
import time
from enum import Enum
from logging.config import dictConfig
from typing import Any, Iterable, Sequence

from settings import get_settings

# Order in which lookup context is appended to a log line.
REQUEST_CONTEXT_KEYS = (
    "zipcode",
    "city",
    "temp_c",
    "status",
    "error_kind",
    "elapsed_ms",
)

_configured = False


def _format_context_value(key: str, value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if key == "elapsed_ms":
        return f"elapsed={value}ms"
    text = str(value)
    # City names such as "São Paulo" contain spaces.
    if not text or " " in text:
        text = f'"{text}"'
    return f"{key}={text}"


class LookupContextFormatter(logging.Formatter):
    """Append weather lookup context passed through ``extra`` to each line.

    Timestamps are rendered in UTC. Keys absent from the record, or set to
    ``None``, are skipped, so startup and library logs stay unadorned.
    """

    converter = time.gmtime

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        context_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._context_keys: Sequence[str] = tuple(context_keys or REQUEST_CONTEXT_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            _format_context_value(key, getattr(record, key))
            for key in self._context_keys
            if getattr(record, key, None) is not None
        ]
        if not context:
            return message
        return f"{message} | {' '.join(context)}"


def configure_logging(level: str | int | None = None) -> None:
    """Route application, uvicorn and httpx logs through one UTC stream handler."""
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "lookup": {
                    "()": "logging_config.LookupContextFormatter",
                    "fmt": "%(asctime)sZ %(levelname)-5s [%(name)s] %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "lookup",
                }
            },
            "loggers": {
                # uvicorn installs its own handlers; share ours instead.
                "uvicorn": {"handlers": ["console"], "level": log_level, "propagate": False},
                "uvicorn.access": {"handlers": ["console"], "level": log_level, "propagate": False},
                # httpx logs every outbound request at INFO.
                "httpx": {"level": "WARNING"},
                "httpcore": {"level": "WARNING"},
            },
            "root": {"handlers": ["console"], "level": log_level},
        }
    )

    _configured = True
