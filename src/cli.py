"""Command-line entry point printing the current weather for a city.

Usage: ``weather-now [CITY]`` (defaults to London). Reads the API key from
``OPENWEATHERMAP_API_KEY``; diagnostics go to standard error.
"""

from typing import List, Optional
import sys

from loguru import logger

from client import FetchFailure, WeatherClient
from config import Settings, load_settings
from services.formatter import render


DEFAULT_CITY = "London"


def _configure_logging(settings: Settings) -> None:
    """Send log records to standard error at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)


def _city_from_args(argv: List[str]) -> str:
    """Return the first positional argument, or the default city."""
    return argv[0] if argv and argv[0] else DEFAULT_CITY


def main(argv: Optional[List[str]] = None) -> None:
    """Entrypoint for the weather client."""
    args = sys.argv[1:] if argv is None else argv
    settings = load_settings()
    _configure_logging(settings)

    client = WeatherClient(settings)
    city = _city_from_args(args)
    try:
        report = client.fetch(city)
    except FetchFailure as e:
        logger.error(f"Failed to get weather data: {e}")
        return

    print(render(report))


if __name__ == "__main__":
    main()
