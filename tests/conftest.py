# ABOUTME: Shared test fixtures for the weather widget test suite.
# ABOUTME: Provides a mock HTTP client that answers one Paris geocode and one Paris forecast.

from unittest.mock import AsyncMock

import httpx
import pytest

PARIS_GEOCODE = {"results": [{"latitude": 48.85, "longitude": 2.35, "name": "Paris", "country": "France"}]}

PARIS_FORECAST = {
    "latitude": 48.86,
    "longitude": 2.36,
    "timezone": "Europe/Paris",
    "current_weather": {"temperature": 18.2, "windspeed": 9.4, "weathercode": 2},
    "hourly": {
        "time": [f"2025-06-01T{h:02d}:00" for h in range(10, 18)],
        "temperature_2m": [18.0, 18.6, 19.1, 19.9, 20.4, 20.0, 19.2, 18.1],
        "weathercode": [2, 3, 61, 63, 0, 1, 95, 45],
    },
}


def _response(json_data: dict, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


def _mock_client(*responses: httpx.Response) -> AsyncMock:
    """Create a mock httpx.AsyncClient returning the given responses in order."""
    mock = AsyncMock(spec=httpx.AsyncClient)
    mock.get.side_effect = list(responses)
    return mock


@pytest.fixture
def paris_client() -> AsyncMock:
    return _mock_client(_response(PARIS_GEOCODE), _response(PARIS_FORECAST))
