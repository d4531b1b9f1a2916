"""Error types for Open-Meteo client interactions.

The extraction core never raises; these cover transport and configuration.
"""

from __future__ import annotations


class WeatherClientError(Exception):
    """Base error for weather client failures."""


class WeatherTimeout(WeatherClientError):
    """Timeout while communicating with the forecast endpoint."""


class WeatherConnectionError(WeatherClientError):
    """Network connection to the forecast endpoint failed."""


class WeatherResponseError(WeatherClientError):
    """Non-200 HTTP response from the forecast endpoint.

    Attributes:
        status: HTTP status code returned.
        url: Request URL, including the coordinate query.
    """

    def __init__(self, status: int, url: str) -> None:
        super().__init__(f"API request failed with HTTP code: {status}")
        self.status = status
        self.url = url


class ConfigLoadError(WeatherClientError):
    """Error loading client configuration."""
