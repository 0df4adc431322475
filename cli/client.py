from __future__ import annotations

from typing import Any, Dict, NoReturn

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for the weather service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def get_weather(self, zipcode: str) -> Dict[str, Any]:
        try:
            response = self._client.get("/weather", params={"zipcode": zipcode})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            typer.secho(
                f"Could not reach {self._config.base_url}: {exc}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1) from exc
        payload = response.json()
        if not isinstance(payload, dict):
            raise typer.BadParameter("Unexpected response payload for weather lookup.")
        return payload

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> NoReturn:
        # Error bodies from /weather are plain text.
        detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
