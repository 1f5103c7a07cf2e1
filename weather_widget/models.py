# ABOUTME: Pydantic BaseModels for places, weather data and the render surface.
# ABOUTME: Defines structured types for Open-Meteo data and the page regions the presenter writes to.

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Place(BaseModel):
    """Resolved location: coordinates plus the label shown above the conditions."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    display_name: str

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> "Place":
        """Build a place from a device position, labelled by its rounded coordinates."""
        return cls(
            latitude=latitude,
            longitude=longitude,
            display_name=f"Lat {latitude:.2f}, Lon {longitude:.2f}",
        )


class CurrentConditions(BaseModel):
    """Current weather block from the forecast endpoint."""

    model_config = ConfigDict(frozen=True)

    temperature_celsius: float
    wind_speed_kmh: float
    weather_code: int


class ForecastPoint(BaseModel):
    """One hour of the hourly forecast series."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature_celsius: float
    weather_code: int


class Forecast(BaseModel):
    """Parsed response from the Open-Meteo forecast endpoint."""

    model_config = ConfigDict(frozen=True)

    current: CurrentConditions
    hourly: list[ForecastPoint] = []


class UIState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


class ForecastCard(BaseModel):
    """One card of the forecast strip, already formatted for display."""

    hour: str
    icon: str
    temperature: str


class RenderContext(BaseModel):
    """The page regions the presenter writes into.

    Regions are always replaced wholesale, never patched. Tests pass a fresh
    instance and assert on it instead of on rendered HTML.
    """

    location_name: str = ""
    current_temp: str = ""
    description: str = ""
    humidity: str = ""
    wind_speed: str = ""
    forecast_cards: list[ForecastCard] = []
    error_message: str = ""

    current_visible: bool = False
    forecast_visible: bool = False
    error_visible: bool = False

    @property
    def state(self) -> UIState:
        if self.error_visible:
            return UIState.ERROR
        if self.current_visible:
            return UIState.RESULT
        return UIState.IDLE
