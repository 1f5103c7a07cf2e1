# ABOUTME: Device position sources for the automatic page-load lookup.
# ABOUTME: BrowserGeolocation wraps the position (or failure) the browser reported to the server.

from typing import Protocol

from pydantic import BaseModel, ConfigDict

from weather_widget.errors import GeolocationError


class Position(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float
    longitude: float


class Geolocator(Protocol):
    async def current_position(self) -> Position:
        """Return the device position or raise GeolocationError."""
        ...


class BrowserGeolocation:
    """A one-shot position reported by the browser's geolocation API.

    Exactly one of position and error is expected; with neither, the lookup
    fails as if the browser had given no answer.
    """

    def __init__(self, position: Position | None = None, error: str | None = None):
        self.position = position
        self.error = error

    @classmethod
    def from_query(cls, latitude: str, longitude: str) -> "BrowserGeolocation":
        """Build from raw query-string values; unparseable input becomes a failure."""
        try:
            return cls(position=Position(latitude=float(latitude), longitude=float(longitude)))
        except ValueError:
            return cls(error=f"Invalid coordinates: {latitude!r}, {longitude!r}")

    async def current_position(self) -> Position:
        if self.position is not None:
            return self.position
        raise GeolocationError(self.error or "Position unavailable")
