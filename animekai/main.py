"""FastAPI application entry point with lifespan management.

Startup: configure logging, announce listening port and upstream base URL.
Shutdown: log only; the service holds no long-lived resources.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from animekai.config.settings import UPSTREAM_BASE_URL, FrontendSettings
from animekai.logging_config import configure_logging
from animekai.middleware.error_handler import register_error_handlers
from animekai.middleware.request_id import RequestIdMiddleware
from animekai.routers.api import create_api_router
from animekai.routers.health import create_health_router
from animekai.routers.pages import create_pages_router
from animekai.upstream.client import UpstreamClient
from animekai.views.renderer import ViewRenderer

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _make_lifespan(settings: FrontendSettings, client: Any):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: startup and shutdown logging."""
        configure_logging(settings.log_level)
        logger.info("AnimeKai server running on http://localhost:%d", settings.port)
        logger.info("API Base URL: %s", client.base_url)

        yield

        logger.info("AnimeKai server shut down")

    return lifespan


def create_app(
    settings: FrontendSettings | None = None,
    client: Any = None,
    renderer: ViewRenderer | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``client`` and ``renderer`` default to an ``UpstreamClient`` on the fixed
    upstream base URL and a ``ViewRenderer`` on the bundled templates.
    """
    if settings is None:
        settings = FrontendSettings()
    if client is None:
        client = UpstreamClient(UPSTREAM_BASE_URL)
    if renderer is None:
        renderer = ViewRenderer()

    app = FastAPI(
        title="AnimeKai Web",
        version="1.0.0",
        lifespan=_make_lifespan(settings, client),
    )

    register_error_handlers(app, renderer)

    # Starlette applies middleware in reverse order of add_middleware calls
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    app.include_router(create_health_router(client=client))
    app.include_router(create_api_router(client=client))
    app.include_router(create_pages_router(client=client, renderer=renderer))

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.state.settings = settings
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured port."""
    settings: FrontendSettings = app.state.settings
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
