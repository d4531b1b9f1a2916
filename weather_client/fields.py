"""Field mapping from a raw forecast document to a weather report.

The declared field list is data: every entry is extracted exactly once and
appears in the resulting report in declaration order, found or not.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Final

from .extract import MISSING, extract_value

PLACEHOLDER: Final = "N/A"


@dataclass(frozen=True)
class FieldSpec:
    """A report field and where to find it.

    Attributes:
        label: Logical name used by the report.
        json_key: Key searched for in the raw document.
        current: Whether the key is an Open-Meteo ``current`` variable that
            has to be requested explicitly.
    """

    label: str
    json_key: str
    current: bool = False


REPORT_FIELDS: Final[tuple[FieldSpec, ...]] = (
    # Top-level response fields
    FieldSpec("timezone", "timezone"),
    FieldSpec("elevation", "elevation"),
    FieldSpec("time", "time"),
    # Current conditions
    FieldSpec("temperature", "temperature_2m", current=True),
    FieldSpec("feels_like", "apparent_temperature", current=True),
    FieldSpec("humidity", "relative_humidity_2m", current=True),
    FieldSpec("precipitation", "precipitation", current=True),
    FieldSpec("wind_speed", "wind_speed_10m", current=True),
    FieldSpec("wind_direction", "wind_direction_10m", current=True),
    FieldSpec("pressure", "surface_pressure", current=True),
    FieldSpec("weather_code", "weather_code", current=True),
)

CURRENT_VARIABLES: Final[tuple[str, ...]] = tuple(
    spec.json_key for spec in REPORT_FIELDS if spec.current
)


@dataclass(frozen=True)
class WeatherReport(Mapping[str, str | None]):
    """Immutable, ordered label -> extracted value mapping.

    A value of ``None`` is the missing marker for that field.
    """

    entries: tuple[tuple[str, str | None], ...]

    def __getitem__(self, label: str) -> str | None:
        for entry_label, value in self.entries:
            if entry_label == label:
                return value
        raise KeyError(label)

    def __iter__(self) -> Iterator[str]:
        return (label for label, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def display(self, label: str, placeholder: str = PLACEHOLDER) -> str:
        """Return the text for ``label``, or ``placeholder`` if missing."""
        value = self.get(label, MISSING)
        return placeholder if value is MISSING else value

    @property
    def missing(self) -> tuple[str, ...]:
        """Labels whose value could not be extracted."""
        return tuple(label for label, value in self.entries if value is MISSING)


def map_fields(
    document: str, fields: tuple[FieldSpec, ...] = REPORT_FIELDS
) -> WeatherReport:
    """Extract every declared field from ``document``.

    Args:
        document: Raw JSON response text.
        fields: Ordered field declarations; defaults to the report fields.

    Returns:
        WeatherReport with exactly one entry per declared field.
    """
    return WeatherReport(
        entries=tuple(
            (spec.label, extract_value(document, spec.json_key)) for spec in fields
        )
    )
