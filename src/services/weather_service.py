from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional


ICONS: Dict[str, str] = {
    "thunderstorm": "⛈️",
    "drizzle": "🌧️",
    "rain": "🌧️",
    "snow": "❄️",
    "atmosphere": "🌫️",
    "clear": "☀️",
    "clouds": "☁️",
    "unknown": "🌡️",
}

# index 0 is Sunday
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


@dataclass
class WeatherReport:
    """
    Normalized snapshot of the current weather for one city.

    Attributes
    ----------
    temperature : float
        Temperature in Celsius degrees.
    description : str
        Free-text condition, e.g. "clear sky".
    humidity : int
        Relative humidity percentage.
    wind_speed : float
        Wind speed in meters per second.
    country : str
        ISO country code.
    city : str
        City name as resolved by the provider.
    lon : float
        Longitude in degrees.
    lat : float
        Latitude in degrees.
    icon : str
        Condition glyph, one of ``ICONS``.
    date_time : datetime | None
        Observation time in the location's UTC offset.
    day : str | None
        Weekday name of ``date_time``.
    timezone : str | None
        Location offset formatted as ``UTC±HH:MM``.
    """

    temperature: float
    description: str
    humidity: int
    wind_speed: float
    country: str
    city: str
    lon: float
    lat: float
    icon: str
    date_time: Optional[datetime] = None
    day: Optional[str] = None
    timezone: Optional[str] = None


def weather_icon(condition_id: int) -> str:
    """
    Pick the glyph for a provider condition code.

    Parameters
    ----------
    condition_id : int
        Numeric condition code from ``weather[0].id``.

    Returns
    -------
    str
        One of the ``ICONS`` values; unknown codes map to the thermometer.
    """
    if 200 <= condition_id < 300:
        return ICONS["thunderstorm"]
    if 300 <= condition_id < 500:
        return ICONS["drizzle"]
    if 500 <= condition_id < 600:
        return ICONS["rain"]
    if 600 <= condition_id < 700:
        return ICONS["snow"]
    if 700 <= condition_id < 800:
        return ICONS["atmosphere"]
    if condition_id == 800:
        return ICONS["clear"]
    if 800 < condition_id < 900:
        return ICONS["clouds"]
    return ICONS["unknown"]


def day_name(moment: datetime) -> str:
    """Return the weekday name for the calendar day of ``moment``."""
    # isoweekday: Monday=1 .. Sunday=7
    return DAY_NAMES[moment.isoweekday() % 7]


def format_utc_offset(offset_seconds: int) -> str:
    """
    Format a UTC offset in seconds as ``UTC±HH:MM``.

    Parameters
    ----------
    offset_seconds : int
        Signed offset from UTC, as sent in the provider's ``timezone`` field.

    Returns
    -------
    str
        E.g. ``UTC+05:30`` for 19800, ``UTC-05:00`` for -18000.
    """
    sign = "+" if offset_seconds >= 0 else "-"
    hours, remainder = divmod(abs(int(offset_seconds)), 3600)
    minutes = remainder // 60
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def local_time(timestamp: int, offset_seconds: int = 0) -> datetime:
    """Express a unix timestamp in a fixed UTC offset."""
    tz = timezone(timedelta(seconds=offset_seconds))
    return datetime.fromtimestamp(timestamp, tz=tz)


def build_report(payload: Dict[str, Any]) -> WeatherReport:
    """
    Map a raw current-weather response into a ``WeatherReport``.

    Parameters
    ----------
    payload : Dict[str, Any]
        Decoded JSON body from the provider.

    Returns
    -------
    WeatherReport
        Normalized report. ``date_time``/``day`` are None when ``dt`` is
        missing; ``timezone`` is None when the provider sends no offset.

    Raises
    ------
    KeyError, IndexError, TypeError, ValueError, OverflowError
        When a mandatory field is missing or has the wrong shape.
    """
    main = payload["main"]
    condition = payload["weather"][0]
    offset = payload.get("timezone")

    moment: Optional[datetime] = None
    if payload.get("dt") is not None:
        moment = local_time(int(payload["dt"]), int(offset or 0))

    return WeatherReport(
        temperature=float(main["temp"]),
        description=str(condition["description"]),
        humidity=int(main["humidity"]),
        wind_speed=float(payload["wind"]["speed"]),
        country=str(payload["sys"]["country"]),
        city=str(payload["name"]),
        lon=float(payload["coord"]["lon"]),
        lat=float(payload["coord"]["lat"]),
        icon=weather_icon(int(condition["id"])),
        date_time=moment,
        day=day_name(moment) if moment is not None else None,
        timezone=format_utc_offset(int(offset)) if offset is not None else None,
    )
