"""Human-readable labels for WMO weather codes and wind directions.

Reference: https://open-meteo.com/en/docs#weathervariables
"""

from __future__ import annotations

import math
from typing import Final

NOT_AVAILABLE: Final = "N/A"

# (first code, last code, description), inclusive ranges
_WEATHER_CODE_RANGES: Final[tuple[tuple[int, int, str], ...]] = (
    (0, 0, "Clear sky ☀"),
    (1, 1, "Mainly clear 🌤"),
    (2, 2, "Partly cloudy ⛅"),
    (3, 3, "Overcast ☁"),
    (45, 48, "Fog 🌫"),
    (51, 55, "Drizzle 🌦"),
    (61, 65, "Rain 🌧"),
    (71, 75, "Snow ❄"),
    (77, 77, "Snow grains 🌨"),
    (80, 82, "Rain showers 🌦"),
    (85, 86, "Snow showers 🌨"),
    (95, 99, "Thunderstorm ⛈"),
)

COMPASS_POINTS: Final[tuple[str, ...]] = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)  # fmt: skip

SECTOR_DEGREES: Final = 360.0 / len(COMPASS_POINTS)


def _to_number(value: str | float | None) -> float | None:
    """Parse an extracted value as a finite number, or return None."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def describe_weather_code(code: str | float | None) -> str:
    """Map a WMO weather code to a description.

    Fractional input is truncated toward zero. Codes outside the known
    ranges yield ``Unknown (code N)``; unparseable input yields ``N/A``.
    """
    number = _to_number(code)
    if number is None:
        return NOT_AVAILABLE
    wmo_code = int(number)
    for first, last, description in _WEATHER_CODE_RANGES:
        if first <= wmo_code <= last:
            return description
    return f"Unknown (code {wmo_code})"


def describe_wind_direction(degrees: str | float | None) -> str:
    """Convert wind direction degrees to a compass label, e.g. ``NW (315°)``."""
    number = _to_number(degrees)
    if number is None:
        return NOT_AVAILABLE
    # Half-up rounding: 11.25° is NNE
    index = math.floor(number / SECTOR_DEGREES + 0.5) % len(COMPASS_POINTS)
    return f"{COMPASS_POINTS[index]} ({int(number)}°)"
