from typing import List, Union

from services.weather_service import WeatherReport


def _number(value: Union[int, float]) -> str:
    """Render a number without a trailing ``.0`` when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _coordinate(value: float, positive: str, negative: str) -> str:
    hemisphere = positive if value >= 0 else negative
    return f"{_number(abs(value))}°{hemisphere}"


def render(report: WeatherReport) -> str:
    """
    Render a weather report as console text.

    Parameters
    ----------
    report : WeatherReport
        Report produced by ``build_report``.

    Returns
    -------
    str
        Multi-line summary. Day and local-time lines are only present when
        the report carries an observation time.
    """
    lines: List[str] = [f"Weather for {report.city}, {report.country}:"]
    if report.day:
        lines.append(f"Day: {report.day}")
    if report.date_time is not None:
        stamp = report.date_time.strftime("%Y-%m-%d %H:%M:%S")
        if report.timezone:
            stamp = f"{stamp} ({report.timezone})"
        lines.append(f"Local Time: {stamp}")
    lines.append(
        f"Coordinates: {_coordinate(report.lat, 'N', 'S')}, {_coordinate(report.lon, 'E', 'W')}"
    )
    lines.append(f"{_number(report.temperature)}°C - {report.description} {report.icon}")
    lines.append(f"Humidity: {report.humidity}%")
    lines.append(f"Wind Speed: {_number(report.wind_speed)} m/s")
    return "\n".join(lines)
