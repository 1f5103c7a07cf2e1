# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Handles geocoding a city name and fetching current plus hourly forecast data.

import logging
from datetime import datetime

import httpx
from pydantic import ValidationError

from weather_widget import config
from weather_widget.errors import FetchError, NotFoundError
from weather_widget.models import CurrentConditions, Forecast, ForecastPoint, Place

logger = logging.getLogger(__name__)

HOURLY_PARAMS = "temperature_2m,weathercode"


async def geocode(client: httpx.AsyncClient, city_name: str) -> Place:
    """Resolve a city name to the single best Open-Meteo geocoding match.

    Raises NotFoundError on a non-success status or an empty result set.
    """
    try:
        resp = await client.get(config.GEOCODING_URL, params={"name": city_name.strip(), "count": 1})
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPStatusError, ValueError) as e:
        raise NotFoundError() from e
    except httpx.TransportError as e:
        raise FetchError("Geocoding request failed") from e

    try:
        results = data.get("results")
        if not results:
            raise NotFoundError()

        r = results[0]
        country = r.get("country")
        return Place(
            latitude=r["latitude"],
            longitude=r["longitude"],
            display_name=f"{r['name']}, {country}" if country else r["name"],
        )
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        logger.warning("Unusable geocoding payload for %r: %s", city_name, e)
        raise NotFoundError() from e


async def get_forecast(client: httpx.AsyncClient, latitude: float, longitude: float) -> Forecast:
    """Fetch current weather and a one-day hourly series in the location's local timezone."""
    try:
        resp = await client.get(
            config.FORECAST_URL,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "hourly": HOURLY_PARAMS,
                "current_weather": "true",
                "forecast_days": 1,
                "timezone": "auto",
            },
        )
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        raise FetchError() from e

    try:
        return Forecast(
            current=parse_current_weather(data["current_weather"]),
            hourly=parse_hourly_data(data.get("hourly", {})),
        )
    except (KeyError, TypeError, ValueError, ValidationError) as e:
        logger.warning("Unusable forecast payload for %s,%s: %s", latitude, longitude, e)
        raise FetchError() from e


def parse_current_weather(raw: dict) -> CurrentConditions:
    """Map the current_weather block onto CurrentConditions."""
    return CurrentConditions(
        temperature_celsius=raw["temperature"],
        wind_speed_kmh=raw["windspeed"],
        weather_code=raw["weathercode"],
    )


def parse_hourly_data(raw: dict) -> list[ForecastPoint]:
    """Parse Open-Meteo column-oriented hourly data into time-ordered ForecastPoint rows."""
    times = raw.get("time", [])
    if not times:
        return []

    result = []
    for i, t in enumerate(times):
        result.append(
            ForecastPoint(
                timestamp=datetime.fromisoformat(t),
                temperature_celsius=_get_at(raw, "temperature_2m", i),
                weather_code=_get_at(raw, "weathercode", i),
            )
        )
    return result


def _get_at(data: dict, key: str, index: int):
    """Safely get value at index from a column array, returning None if missing."""
    col = data.get(key)
    if col is None or index >= len(col):
        return None
    return col[index]
