# ABOUTME: Environment configuration for the weather widget, loaded from .env with defaults.
# ABOUTME: Also provides the console logging setup used by the web entry point.

import logging
import os

from dotenv import load_dotenv

load_dotenv()

GEOCODING_URL = os.environ.get("WEATHER_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.environ.get("WEATHER_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")

# Unset means httpx's own default timeout applies
_timeout = os.environ.get("WEATHER_HTTP_TIMEOUT")
HTTP_TIMEOUT: float | None = float(_timeout) if _timeout else None

LOG_LEVEL = os.environ.get("WEATHER_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install a console handler on the root logger once and quiet per-request httpx logs."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
