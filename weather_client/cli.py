"""Command-line entry point: ``weather-report [LATITUDE LONGITUDE CITY]``."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import aiohttp
import typer

from .config import ClientConfig, Location, load_config
from .errors import ConfigLoadError, WeatherClientError
from .fields import WeatherReport
from .http import OpenMeteoHttpClient
from .render import BANNER, render_report

_LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name="weather-report",
    help="Current weather conditions from Open-Meteo (no API key required).",
    add_completion=False,
)


def resolve_location(
    config: ClientConfig,
    latitude: str | None,
    longitude: str | None,
    city: str | None,
) -> Location:
    """Pick the requested location, falling back to the configured default.

    All three arguments are needed to override the default.
    """
    if latitude is None or longitude is None or city is None:
        return config.default_location
    try:
        return Location(float(latitude), float(longitude), city)
    except ValueError:
        typer.echo("⚠ Invalid coordinates. Using default location.")
        return config.default_location


def _echo_status(status: int, reason: str) -> None:
    typer.echo(f"► HTTP Response Code: {status} {reason}".rstrip())
    typer.echo()


async def _fetch(config: ClientConfig, location: Location) -> WeatherReport:
    async with aiohttp.ClientSession() as session:
        client = OpenMeteoHttpClient(session, config, on_response=_echo_status)
        typer.echo(f"► Connecting to: {client.build_url(location.latitude, location.longitude)}")
        typer.echo()
        return await client.fetch_report(location.latitude, location.longitude)


# Negative coordinates look like short options to the parser
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    latitude: Optional[str] = typer.Argument(None, help="Latitude in decimal degrees"),
    longitude: Optional[str] = typer.Argument(None, help="Longitude in decimal degrees"),
    city: Optional[str] = typer.Argument(None, help="Name shown in the report"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file overriding endpoint, units, timeouts or default location",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Fetch and print the current weather report for a location."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(config_path)
    except ConfigLoadError as err:
        typer.echo(f"✗ Configuration error: {err}", err=True)
        raise typer.Exit(2) from err

    location = resolve_location(config, latitude, longitude, city)

    typer.echo(BANNER)
    typer.echo()

    try:
        report = asyncio.run(_fetch(config, location))
    except WeatherClientError as err:
        _LOGGER.debug("Fetch failed", exc_info=True)
        typer.echo(f"✗ Error fetching weather data: {err}")
        typer.echo()
        typer.echo("Tip: Make sure you have an active internet connection.")
        raise typer.Exit(1) from err

    typer.echo(render_report(location.name, location.latitude, location.longitude, report))


if __name__ == "__main__":
    app()
