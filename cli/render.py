from __future__ import annotations

from typing import Any, Dict, Iterable

import typer

_UNITS = (
    ("temp_C", "Celsius", "°C"),
    ("temp_F", "Fahrenheit", "°F"),
    ("temp_K", "Kelvin", "K"),
)


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_weather(zipcode: str, payload: Dict[str, Any]) -> None:
    echo_heading(f"Current temperature for {zipcode}")
    pairs = []
    for field, label, suffix in _UNITS:
        value = payload.get(field)
        pairs.append((label, "n/a" if value is None else f"{value} {suffix}"))
    echo_key_values(pairs)
