"""Tests for the OpenWeatherMap HTTP client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from client import FetchFailure, WeatherClient
from config import DEFAULT_BASE_URL, Settings


def _response(status_code=200, json_data=None, json_error=None, text=""):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.text = text
    if json_error is not None:
        mock_response.json.side_effect = json_error
    else:
        mock_response.json.return_value = json_data
    return mock_response


@pytest.fixture
def weather_client():
    return WeatherClient(Settings(api_key="test-key", timeout=5.0))


def test_fetch_success(weather_client, london_payload):
    """A 200 response is turned into a report; the query is built from settings."""
    with patch("client.requests.get", return_value=_response(json_data=london_payload)) as mock_get:
        report = weather_client.fetch("London")

    mock_get.assert_called_once_with(
        DEFAULT_BASE_URL,
        params={"q": "London", "appid": "test-key", "units": "metric"},
        timeout=5.0,
    )
    assert report.city == "London"
    assert report.country == "GB"
    assert report.icon == "☀️"


def test_fetch_passes_city_through_unchanged(weather_client, london_payload):
    """City names are not normalized before being sent."""
    with patch("client.requests.get", return_value=_response(json_data=london_payload)) as mock_get:
        weather_client.fetch("  san josé ")

    assert mock_get.call_args.kwargs["params"]["q"] == "  san josé "


def test_fetch_network_error(weather_client):
    """Transport errors surface as FetchFailure with the cause chained."""
    boom = requests.ConnectionError("connection refused")
    with patch("client.requests.get", side_effect=boom):
        with pytest.raises(FetchFailure) as excinfo:
            weather_client.fetch("London")

    assert excinfo.value.__cause__ is boom
    assert excinfo.value.status_code is None


def test_fetch_timeout(weather_client):
    """Timeouts are transport errors too."""
    with patch("client.requests.get", side_effect=requests.Timeout("read timed out")):
        with pytest.raises(FetchFailure, match="read timed out"):
            weather_client.fetch("London")


def test_fetch_http_error_includes_provider_message(weather_client):
    """Non-2xx responses carry the status and the provider's message."""
    not_found = _response(404, json_data={"cod": "404", "message": "city not found"})
    with patch("client.requests.get", return_value=not_found):
        with pytest.raises(FetchFailure, match="city not found") as excinfo:
            weather_client.fetch("Atlantis")

    assert excinfo.value.status_code == 404


def test_fetch_unauthorized_without_json_body(weather_client):
    """A non-JSON error body falls back to the raw text."""
    unauthorized = _response(401, json_error=ValueError("no json"), text="Unauthorized\n")
    with patch("client.requests.get", return_value=unauthorized):
        with pytest.raises(FetchFailure, match="HTTP 401 for 'London': Unauthorized") as excinfo:
            weather_client.fetch("London")

    assert excinfo.value.status_code == 401


def test_fetch_redirect_is_not_success(weather_client, london_payload):
    """Only 2xx counts as success; a 3xx response is a failure."""
    moved = _response(302, json_data=london_payload)
    with patch("client.requests.get", return_value=moved):
        with pytest.raises(FetchFailure, match="HTTP 302") as excinfo:
            weather_client.fetch("London")

    assert excinfo.value.status_code == 302


def test_fetch_non_json_body(weather_client):
    """A 200 response that is not JSON is a failure."""
    with patch("client.requests.get", return_value=_response(json_error=ValueError("Expecting value"))):
        with pytest.raises(FetchFailure, match="not JSON"):
            weather_client.fetch("London")


@pytest.mark.parametrize(
    "body",
    [
        {"cod": 200},
        {"main": {"temp": 1.0, "humidity": 2}, "weather": []},
        [],
        None,
    ],
)
def test_fetch_malformed_payload(weather_client, body):
    """Bodies missing expected fields are reported as FetchFailure."""
    with patch("client.requests.get", return_value=_response(json_data=body)):
        with pytest.raises(FetchFailure, match="Unexpected response shape"):
            weather_client.fetch("London")


@pytest.mark.parametrize("dt", [10**20, float("inf"), -(10**20)])
def test_fetch_out_of_range_timestamp(weather_client, london_payload, dt):
    """A timestamp datetime cannot represent is reported as FetchFailure."""
    london_payload["dt"] = dt
    with patch("client.requests.get", return_value=_response(json_data=london_payload)):
        with pytest.raises(FetchFailure, match="Unexpected response shape"):
            weather_client.fetch("London")
