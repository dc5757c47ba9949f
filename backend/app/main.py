# backend/app/main.py
from __future__ import annotations

"""
FastAPI application setup.

This module depends on:
- app.config.get_settings for configuration
- app.core for logging
- app.api.api_router for route registration

Run it with `backend` (console script), `python -m app.main`, or
`uvicorn app.main:app --reload --port 8000`.

The settings an app was built with live on `app.state.settings`; routes
and the lifespan read them from there.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.api import api_router
from app.config import Settings, get_settings
from app.core import configure_logging, install_access_log_filter
from app.services.statsig_client import get_statsig_client, shutdown_statsig

logger = logging.getLogger(__name__)


# ---- Lifecycle ----


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    install_access_log_filter()
    # Build the event client before serving so the first request doesn't pay for it
    get_statsig_client(settings)
    logger.info(
        "%s %s starting (environment=%s, listening on %s:%s)",
        settings.app_name,
        __version__,
        settings.environment,
        settings.host,
        settings.port,
    )
    yield
    shutdown_statsig()
    logger.info("%s stopped", settings.app_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ---- CORS ----

    # AnyHttpUrl renders with a trailing slash; browsers send Origin without one
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(o).rstrip("/") for o in settings.allowed_origins],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---- Routes ----

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn using host/port/reload from settings."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
