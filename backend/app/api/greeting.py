# backend/app/api/greeting.py
from __future__ import annotations

from fastapi import APIRouter, Request

from app import schemas
from app.services.statsig_client import log_backend_event

router = APIRouter(tags=["greeting"])


@router.get("/", response_model=schemas.Greeting)
def read_root(request: Request) -> schemas.Greeting:
    settings = request.app.state.settings
    log_backend_event("greeting_served", metadata={"environment": settings.environment})
    return schemas.Greeting(message=settings.greeting_message)
