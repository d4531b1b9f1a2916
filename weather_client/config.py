"""Client configuration loading.

Configuration is data: defaults cover the public Open-Meteo endpoint and a
default location, and an optional YAML file may override any of them::

    base_url: https://api.open-meteo.com/v1/forecast
    connect_timeout: 10
    read_timeout: 10
    temperature_unit: celsius
    wind_speed_unit: kmh
    timezone: auto
    default_location:
      latitude: 40.7128
      longitude: -74.0060
      name: New York City
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigLoadError

_LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.open-meteo.com/v1/forecast"


@dataclass(frozen=True)
class Location:
    """A named coordinate.

    Attributes:
        latitude: Decimal degrees, north positive.
        longitude: Decimal degrees, east positive.
        name: Display name for the report.
    """

    latitude: float
    longitude: float
    name: str


@dataclass(frozen=True)
class ClientConfig:
    """Settings for fetching and rendering a report.

    Attributes:
        base_url: Forecast endpoint without query string.
        default_location: Location used when none is given.
        connect_timeout: Seconds allowed to establish the connection.
        read_timeout: Seconds allowed between reads of the response.
        temperature_unit: Open-Meteo ``temperature_unit`` parameter.
        wind_speed_unit: Open-Meteo ``wind_speed_unit`` parameter.
        timezone: Open-Meteo ``timezone`` parameter.
    """

    base_url: str = DEFAULT_BASE_URL
    default_location: Location = field(
        default_factory=lambda: Location(40.7128, -74.0060, "New York City")
    )
    connect_timeout: float = 10.0
    read_timeout: float = 10.0
    temperature_unit: str = "celsius"
    wind_speed_unit: str = "kmh"
    timezone: str = "auto"


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file with error handling."""
    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigLoadError(f"Cannot read {path}") from err
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {path}") from err
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping in {path}")
    return data


def _parse_location(data: Any) -> Location:
    if not isinstance(data, dict):
        raise ConfigLoadError("default_location must be a mapping")
    try:
        return Location(
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            name=str(data.get("name", f"{data['latitude']}, {data['longitude']}")),
        )
    except (KeyError, TypeError, ValueError) as err:
        raise ConfigLoadError(f"Invalid default_location: {data}") from err


def config_from_dict(data: dict[str, Any]) -> ClientConfig:
    """Build a ClientConfig from a mapping, ignoring unknown keys."""
    known = {f.name for f in fields(ClientConfig)}
    overrides: dict[str, Any] = {}

    for key, value in data.items():
        if key not in known:
            _LOGGER.debug("Ignoring unknown config key %s", key)
            continue
        if key == "default_location":
            overrides[key] = _parse_location(value)
        elif key in ("connect_timeout", "read_timeout"):
            try:
                overrides[key] = float(value)
            except (TypeError, ValueError) as err:
                raise ConfigLoadError(f"{key} must be a number") from err
        else:
            overrides[key] = str(value)

    return replace(ClientConfig(), **overrides)


def load_config(path: Path | None = None) -> ClientConfig:
    """Load configuration, applying YAML overrides from ``path`` if given.

    Raises:
        ConfigLoadError: If the file is missing or malformed.
    """
    if path is None:
        return ClientConfig()
    _LOGGER.debug("Loading config from %s", path)
    return config_from_dict(_load_yaml(path))
