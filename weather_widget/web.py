# ABOUTME: ASGI web entry point serving the weather widget page.
# ABOUTME: Builds a Starlette app that feeds search and geolocation triggers to the controller.

import contextlib
import json
import logging
from pathlib import Path

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route
from starlette.templating import Jinja2Templates

from weather_widget import config
from weather_widget.controller import InteractionController
from weather_widget.deps import WidgetDeps, create_http_client
from weather_widget.geolocation import BrowserGeolocation
from weather_widget.models import RenderContext

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def _controller(request: Request) -> InteractionController:
    """Each request renders its own page, so no two triggers share a display."""
    deps: WidgetDeps = request.app.state.deps
    return InteractionController(deps, RenderContext())


async def index(request: Request) -> Response:
    """Render the page, running whichever trigger the query string carries."""
    params = request.query_params
    controller = _controller(request)
    city = params.get("city")
    auto_locate = False

    if city is not None:
        await controller.on_search(city)
    elif "latitude" in params and "longitude" in params:
        await controller.on_page_load(BrowserGeolocation.from_query(params["latitude"], params["longitude"]))
    else:
        auto_locate = True

    return templates.TemplateResponse(
        request,
        "index.html",
        {"ctx": controller.context, "state": controller.state.value, "city": city or "", "auto_locate": auto_locate},
    )


async def geolocation_error(request: Request) -> Response:
    """Receive a browser geolocation failure; it is logged and never shown."""
    body = await request.body()
    try:
        message = json.loads(body).get("message") or "Position unavailable"
    except (ValueError, AttributeError):
        message = "Position unavailable"
    await _controller(request).on_page_load(BrowserGeolocation(error=message))
    return Response(status_code=204)


def create_app(deps: WidgetDeps | None = None) -> Starlette:
    """Create the widget app; the shared HTTP client is closed on shutdown."""
    if deps is None:
        deps = WidgetDeps(http_client=create_http_client())

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await deps.http_client.aclose()

    app = Starlette(
        routes=[
            Route("/", index, methods=["GET"]),
            Route("/geolocation-error", geolocation_error, methods=["POST"]),
        ],
        lifespan=lifespan,
    )
    app.state.deps = deps
    return app


config.configure_logging()

app = create_app()
