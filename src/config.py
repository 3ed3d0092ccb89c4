"""Runtime configuration for the weather command-line client.

Values are read once at startup from the process environment (and a local
``.env`` file, if present) and handed to the client as a ``Settings`` value.
"""

from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv
from loguru import logger


DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_UNITS = "metric"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """
    Static configuration for a single invocation.

    Attributes
    ----------
    api_key : str
        OpenWeatherMap API key. May be empty, in which case the provider
        rejects the request.
    base_url : str
        Current-weather endpoint.
    units : str
        Unit system requested from the provider.
    timeout : float
        HTTP timeout in seconds.
    log_level : str
        Minimum level written to standard error.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    units: str = DEFAULT_UNITS
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Helper to read environment variables with a default value."""
    val = os.getenv(name)
    return val if val is not None and val != "" else default


def _get_float(name: str, default: float) -> float:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_log_level(name: str, default: str) -> str:
    level = (_get_env(name, default) or default).upper()
    try:
        logger.level(level)
    except ValueError:
        return default
    return level


def load_settings() -> Settings:
    """
    Build ``Settings`` from the environment.

    Returns
    -------
    Settings
        Configuration with defaults applied for unset or empty variables.
    """
    load_dotenv(override=False)
    return Settings(
        api_key=_get_env("OPENWEATHERMAP_API_KEY", "") or "",
        base_url=_get_env("OPENWEATHERMAP_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
        units=_get_env("OPENWEATHERMAP_UNITS", DEFAULT_UNITS) or DEFAULT_UNITS,
        timeout=_get_float("OPENWEATHERMAP_TIMEOUT", DEFAULT_TIMEOUT),
        log_level=_get_log_level("WEATHER_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
