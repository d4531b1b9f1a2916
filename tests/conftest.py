"""Pytest configuration and fixtures for weather_client tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

# Open-Meteo response with the unit block removed.
CURRENT_RESPONSE = (
    '{"latitude":40.710335,"longitude":-73.99307,"generationtime_ms":0.05,'
    '"utc_offset_seconds":-14400,"timezone":"America/New_York",'
    '"timezone_abbreviation":"EDT","elevation":32.0,'
    '"current":{"time":"2024-06-01T14:15","interval":900,'
    '"temperature_2m":22.4,"relative_humidity_2m":61,'
    '"apparent_temperature":23.1,"precipitation":0.00,'
    '"wind_speed_10m":14.8,"wind_direction_10m":315,'
    '"weather_code":2,"surface_pressure":1012.3}}'
)

# Same response as the API actually returns it, units block first.
CURRENT_RESPONSE_WITH_UNITS = (
    '{"latitude":40.710335,"longitude":-73.99307,"generationtime_ms":0.05,'
    '"utc_offset_seconds":-14400,"timezone":"America/New_York",'
    '"timezone_abbreviation":"EDT","elevation":32.0,'
    '"current_units":{"time":"iso8601","interval":"seconds",'
    '"temperature_2m":"°C","relative_humidity_2m":"%",'
    '"apparent_temperature":"°C","precipitation":"mm",'
    '"wind_speed_10m":"km/h","wind_direction_10m":"°",'
    '"weather_code":"wmo code","surface_pressure":"hPa"},'
    '"current":{"time":"2024-06-01T14:15","interval":900,'
    '"temperature_2m":22.4,"relative_humidity_2m":61,'
    '"apparent_temperature":23.1,"precipitation":0.00,'
    '"wind_speed_10m":14.8,"wind_direction_10m":315,'
    '"weather_code":2,"surface_pressure":1012.3}}'
)


@pytest.fixture
def current_response() -> str:
    """Raw current-conditions document without a units block."""
    return CURRENT_RESPONSE


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


def create_mock_response(
    status: int = 200,
    text_data: str | None = None,
    reason: str = "OK",
    body: bytes | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        text_data: Data to return from text() call
        reason: HTTP reason phrase
        body: Raw bytes decoded by text() the way aiohttp does, honouring
            the encoding and errors arguments

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status
    response.reason = reason

    if text_data is not None:
        response.text.return_value = text_data
    if body is not None:
        response.text.side_effect = lambda encoding=None, errors="strict": (
            body.decode(encoding or "utf-8", errors)
        )

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
