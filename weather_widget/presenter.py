# ABOUTME: Renders places, conditions and forecasts into a RenderContext.
# ABOUTME: Every region is reset and rebuilt on each call; no incremental patching.

from collections.abc import Sequence

from weather_widget.models import CurrentConditions, ForecastCard, ForecastPoint, Place, RenderContext
from weather_widget.weather_codes import describe, icon_for

HUMIDITY_UNAVAILABLE = "N/A"

# Entry 0 of the hourly series is the current hour; the strip shows the next six.
FORECAST_START = 1
FORECAST_CARDS = 6


def format_hour_label(hour: int) -> str:
    """12-hour clock label: 0 -> "12AM", 12 -> "12PM", 13 -> "1PM"."""
    return f"{hour % 12 or 12}{'AM' if hour < 12 else 'PM'}"


def format_temperature(value: float) -> str:
    return f"{value:.1f}°C"


def render_current(ctx: RenderContext, place: Place, current: CurrentConditions) -> None:
    """Fill the current-conditions panel and hide any visible error."""
    ctx.error_visible = False
    ctx.error_message = ""
    ctx.location_name = place.display_name
    ctx.current_temp = format_temperature(current.temperature_celsius)
    ctx.description = describe(current.weather_code)
    ctx.wind_speed = f"{current.wind_speed_kmh:.1f}"
    ctx.humidity = HUMIDITY_UNAVAILABLE
    ctx.current_visible = True


def render_forecast(ctx: RenderContext, points: Sequence[ForecastPoint]) -> None:
    """Rebuild the forecast strip from entries 1..6 of the hourly series.

    Shorter series simply yield fewer cards.
    """
    window = points[FORECAST_START : FORECAST_START + FORECAST_CARDS]
    ctx.forecast_cards = [
        ForecastCard(
            hour=format_hour_label(point.timestamp.hour),
            icon=icon_for(point.weather_code),
            temperature=format_temperature(point.temperature_celsius),
        )
        for point in window
    ]
    ctx.forecast_visible = True


def render_error(ctx: RenderContext, message: str) -> None:
    """Hide the result regions and show a single error message."""
    ctx.current_visible = False
    ctx.forecast_visible = False
    ctx.error_message = message
    ctx.error_visible = True
