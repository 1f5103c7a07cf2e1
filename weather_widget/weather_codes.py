# ABOUTME: Lookup tables from Open-Meteo WMO weather codes to text and glyphs.
# ABOUTME: Unmapped codes fall back to a generic description and a question-mark glyph.

DEFAULT_DESCRIPTION = "Weather"
DEFAULT_ICON = "❓"

_DESCRIPTIONS = {
    # Clear and cloudy
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    # Fog
    45: "Fog",
    48: "Depositing rime fog",
    # Drizzle
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    # Rain
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    80: "Rain showers",
    # Thunderstorm
    95: "Thunderstorm",
}

_ICONS = {
    0: "☀️",
    1: "🌤",
    2: "⛅️",
    3: "☁️",
    45: "🌫️",
    48: "🌫️",
    51: "🌦️",
    53: "🌦️",
    55: "🌧️",
    61: "🌧️",
    63: "🌧️",
    65: "🌧️",
    80: "🌧️",
    95: "⛈️",
}


def describe(code: int) -> str:
    """Human-readable description of a weather code."""
    return _DESCRIPTIONS.get(code, DEFAULT_DESCRIPTION)


def icon_for(code: int) -> str:
    """Short glyph for a weather code, used on forecast cards."""
    return _ICONS.get(code, DEFAULT_ICON)
