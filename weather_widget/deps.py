# ABOUTME: Dependency container for the weather widget using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient used by the service layer to call Open-Meteo.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_widget import config


class WidgetDeps(BaseModel):
    """Dependencies injected into the interaction controller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient


def create_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create a plain httpx client.

    No retry transport: every failure is terminal for the lookup that hit it.
    """
    timeout = timeout if timeout is not None else config.HTTP_TIMEOUT
    if timeout is None:
        return httpx.AsyncClient()
    return httpx.AsyncClient(timeout=timeout)
