"""Fixed-layout text rendering of a weather report."""

from __future__ import annotations

from .codes import describe_wind_direction, describe_weather_code
from .fields import WeatherReport

_RULE = "─" * 49

BANNER = "\n".join(
    (
        "╔══════════════════════════════════════════════════╗",
        "║         Python REST API Weather Client           ║",
        "╚══════════════════════════════════════════════════╝",
    )
)


def render_report(
    city: str, latitude: float, longitude: float, report: WeatherReport
) -> str:
    """Render the report as a Unicode box table.

    Missing values are shown as ``N/A``; column widths are fixed, so long
    values push the right border out rather than being truncated.
    """
    weather = describe_weather_code(report.get("weather_code"))
    wind_from = describe_wind_direction(report.get("wind_direction"))
    wind = f"{report.display('wind_speed')} from {wind_from}"

    lines = [
        f"┌{_RULE}┐",
        f"│  📍 Location : {city:<33}│",
        f"│  🌐 Timezone : {report.display('timezone'):<33}│",
        f"│  🗺  Coords   : Lat {latitude:<6.2f}  Lon {longitude:<14.2f}│",
        f"│  🏔  Elevation: {report.display('elevation'):<29} m │",
        f"│  🕐 Time     : {report.display('time'):<33}│",
        f"├{_RULE}┤",
        "│               CURRENT CONDITIONS                │",
        f"├{_RULE}┤",
        f"│  🌤  Weather  : {weather:<33}│",
        f"│  🌡  Temp     : {report.display('temperature'):<29} °C │",
        f"│  🤔 Feels    : {report.display('feels_like'):<29} °C │",
        f"│  💧 Humidity : {report.display('humidity'):<30} % │",
        f"│  🌧  Precip   : {report.display('precipitation'):<27} mm  │",
        f"│  🌬  Wind     : {wind:<24} km/h  │",
        f"│  📊 Pressure : {report.display('pressure'):<24} hPa   │",
        f"├{_RULE}┤",
        "│  Data source : Open-Meteo (open-meteo.com)      │",
        "│  No API key required, free and open source      │",
        f"└{_RULE}┘",
    ]
    return "\n".join(lines)
