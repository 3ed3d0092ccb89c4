"""Shared fixtures for the weather client tests."""

import copy

import pytest
from loguru import logger


LONDON_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01n"}],
    "main": {"temp": 15.0, "feels_like": 14.2, "pressure": 1012, "humidity": 70},
    "wind": {"speed": 3.5, "deg": 240},
    "dt": 1700000000,
    "sys": {"country": "GB", "sunrise": 1699946012, "sunset": 1699978771},
    "timezone": 0,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


@pytest.fixture
def london_payload():
    """A realistic current-weather body for London."""
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop any sink a test installed so it does not outlive captured streams."""
    yield
    logger.remove()
