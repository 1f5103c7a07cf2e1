# ABOUTME: Interaction controller wiring the search box and page-load geolocation to the pipeline.
# ABOUTME: Drives geocode -> forecast -> render and routes failures to the error region.

import logging

from weather_widget import presenter
from weather_widget.deps import WidgetDeps
from weather_widget.errors import EmptyInputError, GeolocationError, WeatherWidgetError
from weather_widget.geolocation import Geolocator
from weather_widget.models import Place, RenderContext, UIState
from weather_widget.weather_service import geocode, get_forecast

logger = logging.getLogger(__name__)


class InteractionController:
    """Runs the idle -> loading -> result|error lifecycle over one RenderContext.

    Triggers are independent coroutines and may overlap. By default the last
    one to finish owns the display. With discard_stale=True a trigger that
    has been superseded by a newer one drops its response instead of rendering.
    """

    def __init__(self, deps: WidgetDeps, context: RenderContext, discard_stale: bool = False):
        self.deps = deps
        self.context = context
        self.discard_stale = discard_stale
        self.state = context.state
        self._generation = 0

    async def on_search(self, city_input: str) -> None:
        """Handle activation of the search button with the raw input text."""
        token = self._next_token()
        city = city_input.strip()
        try:
            if not city:
                raise EmptyInputError()
            self.state = UIState.LOADING
            place = await geocode(self.deps.http_client, city)
            await self._show_weather(place, token)
        except WeatherWidgetError as e:
            logger.info("Search for %r failed: %s", city, e)
            self._show_error(str(e), token)

    async def on_page_load(self, geolocator: Geolocator | None) -> None:
        """Look up the weather for the device position, if one can be had.

        Geolocation failures are logged and otherwise ignored.
        """
        if geolocator is None:
            return
        token = self._next_token()
        try:
            position = await geolocator.current_position()
        except GeolocationError as e:
            logger.warning("Geolocation error: %s", e)
            return

        place = Place.from_coordinates(position.latitude, position.longitude)
        self.state = UIState.LOADING
        try:
            await self._show_weather(place, token)
        except WeatherWidgetError as e:
            self._show_error(str(e), token)

    async def _show_weather(self, place: Place, token: int) -> None:
        forecast = await get_forecast(self.deps.http_client, place.latitude, place.longitude)
        if self._is_stale(token):
            return
        presenter.render_current(self.context, place, forecast.current)
        presenter.render_forecast(self.context, forecast.hourly)
        self.state = self.context.state

    def _show_error(self, message: str, token: int) -> None:
        if self._is_stale(token):
            return
        presenter.render_error(self.context, message)
        self.state = self.context.state

    def _next_token(self) -> int:
        self._generation += 1
        return self._generation

    def _is_stale(self, token: int) -> bool:
        if self.discard_stale and token != self._generation:
            logger.debug("Discarding response of superseded request %d (latest %d)", token, self._generation)
            return True
        return False
