# backend/app/api/health.py
from __future__ import annotations

from fastapi import APIRouter, Request

from app import __version__, schemas

router = APIRouter(tags=["health"])


@router.get("/health", response_model=schemas.HealthStatus)
def health() -> schemas.HealthStatus:
    """Container liveness probe; filtered out of the uvicorn access log."""
    return schemas.HealthStatus()


@router.get("/info", response_model=schemas.AppInfo)
def info(request: Request) -> schemas.AppInfo:
    settings = request.app.state.settings
    return schemas.AppInfo(
        app_name=settings.app_name,
        environment=settings.environment,
        version=__version__,
    )
