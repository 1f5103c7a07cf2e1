# ABOUTME: Exception taxonomy for the weather widget.
# ABOUTME: Each error's str() is the message shown in the page's error region.


class WeatherWidgetError(Exception):
    """Base class for failures of a single triggered lookup."""


class EmptyInputError(WeatherWidgetError):
    """The search box was blank."""

    def __init__(self, message: str = "Please enter a city name."):
        super().__init__(message)


class NotFoundError(WeatherWidgetError):
    """Geocoding returned no match or a non-success status."""

    def __init__(self, message: str = "City not found"):
        super().__init__(message)


class FetchError(WeatherWidgetError):
    """A weather service request failed or returned an unusable payload."""

    def __init__(self, message: str = "Weather fetch failed"):
        super().__init__(message)


class GeolocationError(WeatherWidgetError):
    """The device declined or failed to provide a position."""
