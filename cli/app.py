from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_weather


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Query the zipcode weather service from the command line.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Weather API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the service to answer.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("lookup")
def lookup_command(
    ctx: typer.Context,
    zipcode: str = typer.Argument(..., help="8-character zipcode (CEP), e.g. 01001000."),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the raw JSON payload instead of a formatted summary.",
    ),
) -> None:
    """Look up the current temperature for a zipcode."""
    state = _get_state(ctx)
    payload = state.client.get_weather(zipcode)
    if as_json:
        typer.echo(json.dumps(payload))
        return
    render_weather(zipcode, payload)
