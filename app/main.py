"""Deploy demo: minimal API used to verify a server deployment."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import Settings, get_settings
from app.api.routes_demo import router as demo_router
from app.api.routes_admin import router as admin_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Resolve settings before serving; a bad PORT stops startup here.

    Runs before uvicorn binds the socket, so the port logged here is the
    one about to be bound. uvicorn logs the bind itself.
    """
    if app.state.settings is None:
        app.state.settings = get_settings()
    settings = app.state.settings
    logging.getLogger().setLevel(settings.log_level)

    logger.info(f"Starting server on port {settings.port}")

    yield

    logger.info("Server shutting down...")


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="deploy-demo",
        description="Static endpoint for confirming a deployment succeeded.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Mount routers
    app.include_router(demo_router)
    app.include_router(admin_router)

    return app


# ASGI entrypoint (uvicorn: `uvicorn app.main:app`)
app = create_app()
