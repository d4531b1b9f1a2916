"""HTTP client for the Open-Meteo forecast endpoint."""

from __future__ import annotations

import logging
from collections.abc import Callable

import aiohttp

from .config import ClientConfig
from .errors import (
    WeatherConnectionError,
    WeatherResponseError,
    WeatherTimeout,
)
from .fields import CURRENT_VARIABLES, WeatherReport, map_fields

_LOGGER = logging.getLogger(__name__)


class OpenMeteoHttpClient:
    """HTTP client wrapper for current-conditions requests.

    One request per call, no retries. The caller owns the session.

    Args:
        session: aiohttp session used for the request.
        config: Endpoint, unit and timeout settings.
        on_response: Called with the status code and reason phrase of every
            response before its body is read.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        config: ClientConfig | None = None,
        *,
        on_response: Callable[[int, str], None] | None = None,
    ) -> None:
        self._session = session
        self._config = config or ClientConfig()
        self._on_response = on_response

    def build_url(self, latitude: float, longitude: float) -> str:
        """Return the full request URL for a coordinate."""
        cfg = self._config
        return (
            f"{cfg.base_url}"
            f"?latitude={latitude:.4f}&longitude={longitude:.4f}"
            f"&current={','.join(CURRENT_VARIABLES)}"
            f"&temperature_unit={cfg.temperature_unit}"
            f"&wind_speed_unit={cfg.wind_speed_unit}"
            f"&timezone={cfg.timezone}"
        )

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            sock_connect=self._config.connect_timeout,
            sock_read=self._config.read_timeout,
        )

    async def fetch_current(self, latitude: float, longitude: float) -> str:
        """Fetch the raw JSON body of the current conditions for a coordinate.

        Returns:
            Response body as text. Bytes that do not decode in the response
            charset are replaced rather than raising.

        Raises:
            WeatherResponseError: If the endpoint returns a non-200 status.
            WeatherTimeout: If connecting or reading times out.
            WeatherConnectionError: If the network request fails.
        """
        url = self.build_url(latitude, longitude)
        _LOGGER.info("Connecting to %s", url)
        try:
            async with self._session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self._timeout(),
            ) as resp:
                _LOGGER.info("HTTP response code %s %s", resp.status, resp.reason)
                if self._on_response is not None:
                    self._on_response(resp.status, resp.reason or "")
                if resp.status != 200:
                    raise WeatherResponseError(resp.status, url)
                return await resp.text(errors="replace")
        except TimeoutError as err:
            raise WeatherTimeout("Forecast request timed out") from err
        except aiohttp.ClientError as err:
            raise WeatherConnectionError("Forecast request failed") from err

    async def fetch_report(self, latitude: float, longitude: float) -> WeatherReport:
        """Fetch current conditions and map them into a WeatherReport."""
        document = await self.fetch_current(latitude, longitude)
        report = map_fields(document)
        if report.missing:
            _LOGGER.debug("Fields not found in response: %s", ", ".join(report.missing))
        return report
