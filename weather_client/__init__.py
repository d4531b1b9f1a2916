"""Open-Meteo current weather client with a dependency-free value extractor."""

__version__ = "0.1.0"

from .codes import describe_weather_code, describe_wind_direction
from .config import ClientConfig, Location, load_config
from .errors import (
    ConfigLoadError,
    WeatherClientError,
    WeatherConnectionError,
    WeatherResponseError,
    WeatherTimeout,
)
from .extract import MISSING, extract_value
from .fields import REPORT_FIELDS, FieldSpec, WeatherReport, map_fields
from .http import OpenMeteoHttpClient
from .render import render_report

__all__ = [
    "MISSING",
    "REPORT_FIELDS",
    "ClientConfig",
    "ConfigLoadError",
    "FieldSpec",
    "Location",
    "OpenMeteoHttpClient",
    "WeatherClientError",
    "WeatherConnectionError",
    "WeatherReport",
    "WeatherResponseError",
    "WeatherTimeout",
    "__version__",
    "describe_weather_code",
    "describe_wind_direction",
    "extract_value",
    "load_config",
    "map_fields",
    "render_report",
]
