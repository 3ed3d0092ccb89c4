"""Minimal HTTP client for the OpenWeatherMap current-weather endpoint.

Exposes ``WeatherClient``, which issues a single GET per call and turns the
JSON body into a ``WeatherReport``. Every failure surfaces as ``FetchFailure``.
"""

from typing import Any, Dict, Optional

import requests
from loguru import logger

from config import Settings
from services.weather_service import WeatherReport, build_report


class FetchFailure(Exception):
    """Raised when current weather cannot be fetched or understood."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _provider_message(response: requests.Response) -> str:
    """Extract the provider's error text from a non-2xx response, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return ""


class WeatherClient:
    """Very small client fetching current conditions for a city."""

    def __init__(self, settings: Settings):
        """Initialize the weather client.

        Parameters
        ----------
        settings : Settings
            API key, endpoint, unit system and timeout to use for every call.
        """
        self.settings = settings

    def _params(self, city: str) -> Dict[str, str]:
        """Build the query string for a city lookup."""
        return {
            "q": city,
            "appid": self.settings.api_key,
            "units": self.settings.units,
        }

    def fetch(self, city: str) -> WeatherReport:
        """
        Fetch and normalize the current weather for ``city``.

        Parameters
        ----------
        city : str
            City name, passed to the provider unchanged.

        Returns
        -------
        WeatherReport
            Normalized report for the city the provider resolved.

        Raises
        ------
        FetchFailure
            On transport errors, non-2xx responses, or an unexpected body.
        """
        logger.debug(f"Requesting current weather for {city!r} from {self.settings.base_url}")
        try:
            r = requests.get(
                self.settings.base_url,
                params=self._params(city),
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Error fetching weather data for {city!r}: {e}")
            raise FetchFailure(f"Request for {city!r} failed: {e}") from e

        if not 200 <= r.status_code < 300:
            detail = _provider_message(r)
            logger.error(f"Error fetching weather data for {city!r}: HTTP {r.status_code} {detail}".rstrip())
            message = f"Provider returned HTTP {r.status_code} for {city!r}"
            if detail:
                message = f"{message}: {detail}"
            raise FetchFailure(message, status_code=r.status_code)

        try:
            data: Any = r.json()
        except ValueError as e:
            logger.error(f"Error fetching weather data for {city!r}: response is not JSON")
            raise FetchFailure(f"Response for {city!r} is not JSON", status_code=r.status_code) from e

        try:
            return build_report(data)
        except (KeyError, IndexError, TypeError, ValueError, AttributeError, OverflowError, OSError) as e:
            logger.error(f"Error fetching weather data for {city!r}: unexpected payload ({e!r})")
            raise FetchFailure(
                f"Unexpected response shape for {city!r}: {e!r}", status_code=r.status_code
            ) from e
