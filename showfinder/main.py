from contextlib import asynccontextmanager
from starlette.applications import Starlette
from starlette.routing import Route
import logging

# startup functions
from showfinder.config import DEBUG
from showfinder.log_config import setup_logging
from showfinder.widget.controller import WidgetController

# web routes
from showfinder.routes.web_routes import homepage, search, episodes

logger = logging.getLogger(__name__)

routes = [
    Route("/", endpoint=homepage, methods=["GET"]),
    Route("/search", endpoint=search, methods=["GET", "POST"]),
    Route("/shows/{show_id:int}/episodes", endpoint=episodes, methods=["POST"]),
]

@asynccontextmanager
async def lifespan(app):
    setup_logging()
    # one controller and one page state for the lifetime of the app
    if getattr(app.state, "controller", None) is None:
        app.state.controller = WidgetController()
    logger.info("showfinder started")
    yield

app = Starlette(debug=DEBUG, routes=routes, lifespan=lifespan)
